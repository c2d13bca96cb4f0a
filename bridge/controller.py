import json
import logging

from flask import Flask, Response, request

from .constants import ALIVE_MESSAGE, ECHO_TITLE, SERVICE_NAME, Settings, load_settings
from .dispatch import EVENT_MESSAGE_CREATED, EVENT_VERIFICATION, EventDispatcher
from .echo import handle_message_created
from .formatters import format_incident
from .services import deliver, run_in_background
from .verification import build_verification_response

logger = logging.getLogger(__name__)


def ignore_message():
    # 200 com corpo vazio para tudo que não será processado
    return '', 200


def create_app(settings: Settings = None, runner=None, rng=None):
    settings = (settings or load_settings()).validate()
    runner = runner or run_in_background

    app = Flask(__name__)

    def schedule_send(space_id, title, text, state=None):
        runner(deliver, space_id, title, text, state, settings=settings)

    def verify_callback(data):
        challenge = data.get('challenge')
        if not isinstance(challenge, str):
            logger.info("Evento de verificação sem challenge, ignorado")
            return ignore_message()
        logger.info("Verificando challenge")
        body, token = build_verification_response(challenge, settings.webhook_secret)
        resp = Response(body, status=200, mimetype='application/json')
        resp.headers['X-OUTBOUND-TOKEN'] = token
        return resp

    def message_created(data):
        handle_message_created(
            data,
            settings.keyword,
            settings.responses,
            lambda space_id, answer: schedule_send(space_id, ECHO_TITLE, answer),
            rng=rng,
        )
        return ignore_message()

    dispatcher = EventDispatcher(
        {
            EVENT_VERIFICATION: verify_callback,
            EVENT_MESSAGE_CREATED: message_created,
        },
        fallback=lambda data: ignore_message(),
    )

    @app.route('/', methods=['GET'])
    def index():
        return ALIVE_MESSAGE

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/webhook', methods=['POST'])
    def webhook():
        data = request.get_json(silent=True)
        logger.debug("Webhook recebido: %s", data)
        return dispatcher.dispatch(data)

    @app.route('/alert/<space_id>', methods=['POST'])
    def alert(space_id):
        data = request.get_json(silent=True)
        logger.info("Alerta recebido: %s", json.dumps(data))
        if not isinstance(data, dict):
            return ignore_message()

        title, text, state = format_incident(data)
        schedule_send(space_id, title, text, state)
        return ignore_message()

    return app
