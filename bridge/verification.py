import hashlib
import hmac
import json
import re
from typing import Tuple

from .constants import ConfigError

# Pares válidos já chegam combinados pelo decoder JSON; o que sobra é surrogate isolado
_LONE_SURROGATE = re.compile('[\ud800-\udfff]')


def _escape_surrogate(match) -> str:
    return '\\u%04x' % ord(match.group(0))


def canonical_json(body) -> bytes:
    serialized = json.dumps(body, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    # Mesmo formato do JSON.stringify: surrogate isolado vira escape \udxxx
    return _LONE_SURROGATE.sub(_escape_surrogate, serialized).encode("utf-8")


def sign_body(serialized: bytes, secret: str) -> str:
    if not secret:
        raise ConfigError("NEWRELIC_WEBHOOK_SECRET não configurado")
    return hmac.new(secret.encode("utf-8"), serialized, hashlib.sha256).hexdigest()


def build_verification_response(challenge: str, secret: str) -> Tuple[bytes, str]:
    """
    Monta a resposta do handshake de verificação do webhook.

    Retorna o corpo exato a ser enviado e o HMAC-SHA256 (hex) desse corpo,
    que vai no header X-OUTBOUND-TOKEN.
    """
    body = canonical_json({"response": challenge})
    return body, sign_body(body, secret)
