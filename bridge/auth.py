import logging
from typing import Optional

import requests
from requests.auth import HTTPBasicAuth

logger = logging.getLogger(__name__)

AUTHENTICATION_API = "oauth/token"


class AuthError(RuntimeError):
    """Falha na troca de credenciais com o Watson Workspace."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def authenticate_app(app_id: str, app_secret: str, base_url: str, timeout: float) -> str:
    """
    Obtém um bearer token via client_credentials.

    Não há cache: cada envio de mensagem autentica novamente. Qualquer resposta
    diferente de 200 vira AuthError; quem chama decide se o serviço continua.
    """
    url = f"{base_url}/{AUTHENTICATION_API}"
    try:
        resp = requests.post(
            url,
            auth=HTTPBasicAuth(app_id, app_secret),
            data={"grant_type": "client_credentials"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise AuthError(f"Erro ao autenticar aplicação: {exc}") from exc

    if resp.status_code != 200:
        logger.error("Erro ao autenticar aplicação (status=%s)", resp.status_code)
        raise AuthError("Erro ao autenticar aplicação", status_code=resp.status_code)

    try:
        token = resp.json().get("access_token")
    except (ValueError, AttributeError) as exc:
        raise AuthError("Resposta de autenticação inválida", status_code=resp.status_code) from exc

    if not token:
        raise AuthError("Resposta de autenticação sem access_token", status_code=resp.status_code)
    return token
