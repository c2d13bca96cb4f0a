#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import requests

from bridge.auth import AuthError
from bridge.constants import ConfigError, Settings
from bridge.services import build_message_payload, deliver, resolve_color, run_in_background, send_message

SETTINGS = Settings(
    app_id='app-id',
    app_secret='app-secret',
    webhook_secret='wh-secret',
    base_url='https://workspace.test',
    timeout=3,
)


def _fake_post(token_status=200, send_status=201):
    calls = []

    def post(url, **kwargs):
        calls.append((url, kwargs))
        if url.endswith('/oauth/token'):
            resp = Mock(status_code=token_status)
            resp.json.return_value = {'access_token': 'jwt-xyz'}
            return resp
        return Mock(status_code=send_status, text='')

    return post, calls


class TestColor(unittest.TestCase):
    def test_open_closed_default(self):
        self.assertEqual(resolve_color('open'), '#CC0000')
        self.assertEqual(resolve_color('closed'), '#32CD32')
        self.assertEqual(resolve_color('acknowledged'), '#1DA1F2')
        self.assertEqual(resolve_color('OPEN'), '#1DA1F2')
        self.assertEqual(resolve_color(None), '#1DA1F2')
        self.assertEqual(resolve_color(['open']), '#1DA1F2')


class TestPayload(unittest.TestCase):
    def test_annotation_format(self):
        payload = build_message_payload('Titulo', 'Texto', 'open')
        self.assertEqual(payload, {
            'type': 'appMessage',
            'version': 1.0,
            'annotations': [{
                'type': 'generic',
                'version': 1.0,
                'color': '#CC0000',
                'title': 'Titulo',
                'text': 'Texto',
            }],
        })


class TestSendMessage(unittest.TestCase):
    def test_authenticates_then_posts_with_bearer(self):
        post, calls = _fake_post()
        with patch('requests.post', side_effect=post):
            resp = send_message('space-1', 'T', 'msg', 'closed', settings=SETTINGS)

        self.assertEqual(resp.status_code, 201)
        self.assertEqual([c[0] for c in calls], [
            'https://workspace.test/oauth/token',
            'https://workspace.test/v1/spaces/space-1/messages',
        ])
        send_kwargs = calls[1][1]
        self.assertEqual(send_kwargs['headers'], {'Authorization': 'Bearer jwt-xyz'})
        self.assertEqual(send_kwargs['json']['annotations'][0]['color'], '#32CD32')
        self.assertEqual(send_kwargs['timeout'], 3)

    def test_every_send_reauthenticates(self):
        post, calls = _fake_post()
        with patch('requests.post', side_effect=post):
            send_message('s', 'T', 'a', settings=SETTINGS)
            send_message('s', 'T', 'b', settings=SETTINGS)
        token_calls = [c for c in calls if c[0].endswith('/oauth/token')]
        self.assertEqual(len(token_calls), 2)

    def test_auth_failure_raises_and_skips_send(self):
        post, calls = _fake_post(token_status=500)
        with patch('requests.post', side_effect=post):
            with self.assertRaises(AuthError):
                send_message('s', 'T', 'a', settings=SETTINGS)
        self.assertEqual(len(calls), 1)

    def test_delivery_failure_is_logged_not_raised(self):
        post, calls = _fake_post(send_status=403)
        with patch('requests.post', side_effect=post):
            with self.assertLogs('bridge.services', level='ERROR'):
                resp = send_message('s', 'T', 'a', settings=SETTINGS)
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(len(calls), 2)

    def test_missing_credentials_without_settings(self):
        unconfigured = Settings(app_id=None, app_secret=None, webhook_secret=None)
        with patch('bridge.services.load_settings', return_value=unconfigured), \
                patch('requests.post') as post:
            with self.assertRaises(ConfigError):
                send_message('s', 'T', 'a')
        post.assert_not_called()

    def test_delivery_transport_error_returns_none(self):
        def post(url, **kwargs):
            if url.endswith('/oauth/token'):
                resp = Mock(status_code=200)
                resp.json.return_value = {'access_token': 't'}
                return resp
            raise requests.Timeout('slow')

        with patch('requests.post', side_effect=post):
            self.assertIsNone(send_message('s', 'T', 'a', settings=SETTINGS))


class TestDeliver(unittest.TestCase):
    def test_auth_error_is_contained(self):
        post, calls = _fake_post(token_status=401)
        with patch('requests.post', side_effect=post):
            with self.assertLogs('bridge.services', level='ERROR') as logs:
                self.assertIsNone(deliver('s', 'T', 'a', settings=SETTINGS))
        self.assertTrue(any('autenticação' in line for line in logs.output))
        self.assertEqual(len(calls), 1)


class TestRunInBackground(unittest.TestCase):
    def test_runs_in_daemon_thread(self):
        func = Mock()
        thread = run_in_background(func, 1, b=2)
        thread.join(timeout=5)
        self.assertTrue(thread.daemon)
        func.assert_called_once_with(1, b=2)

    def test_exception_is_logged(self):
        func = Mock(side_effect=RuntimeError('boom'))
        with self.assertLogs('bridge.services', level='ERROR'):
            thread = run_in_background(func)
            thread.join(timeout=5)


if __name__ == '__main__':
    unittest.main()
