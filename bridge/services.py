import logging
import threading
from typing import Optional

import requests

from .auth import AuthError, authenticate_app
from .constants import DEFAULT_COLOR, STATE_COLORS, Settings, load_settings

logger = logging.getLogger(__name__)


def resolve_color(state: Optional[str]) -> str:
    return STATE_COLORS.get(state, DEFAULT_COLOR) if isinstance(state, str) else DEFAULT_COLOR


def build_message_payload(title, text, state=None):
    return {
        "type": "appMessage",
        "version": 1.0,
        "annotations": [
            {
                "type": "generic",
                "version": 1.0,
                "color": resolve_color(state),
                "title": title,
                "text": text,
            }
        ],
    }


def send_message(space_id, title, text, state=None, settings: Optional[Settings] = None):
    """
    Publica uma anotação no space indicado.

    Autentica a cada chamada. AuthError sobe para quem chamou; falhas de entrega
    (status != 201) apenas são registradas no log, sem retentativa.
    """
    settings = settings or load_settings().validate()
    payload = build_message_payload(title, text, state)

    token = authenticate_app(settings.app_id, settings.app_secret, settings.base_url, settings.timeout)

    url = f"{settings.base_url}/v1/spaces/{space_id}/messages"
    try:
        resp = requests.post(
            url,
            headers={"Authorization": f"Bearer {token}"},
            json=payload,
            timeout=settings.timeout,
        )
    except requests.RequestException as exc:
        logger.error("Erro ao publicar mensagem no space %s: %s", space_id, exc)
        return None

    if resp.status_code != 201:
        logger.error(
            "Erro ao publicar mensagem no space %s (status=%s): %s",
            space_id, resp.status_code, resp.text,
        )
    else:
        logger.debug("Mensagem publicada no space %s", space_id)
    return resp


def deliver(space_id, title, text, state=None, settings: Optional[Settings] = None):
    # Executa fora do request do webhook: nada daqui volta para quem chamou
    try:
        return send_message(space_id, title, text, state, settings=settings)
    except AuthError as exc:
        logger.error("Envio para o space %s abortado, falha de autenticação: %s (status=%s)",
                     space_id, exc, exc.status_code)
        return None


def run_in_background(func, *args, **kwargs):
    # Threads daemon: envios em andamento são descartados no shutdown
    def _target():
        try:
            func(*args, **kwargs)
        except Exception:
            logger.exception("Erro em tarefa de envio em background")

    thread = threading.Thread(target=_target, daemon=True)
    thread.start()
    return thread
