import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)

EVENT_VERIFICATION = "verification"
EVENT_MESSAGE_CREATED = "message-created"


class EventDispatcher:
    """Tabela de roteamento tipo de evento -> handler, com fallback para qualquer outro caso."""

    def __init__(self, handlers: Dict[str, Callable], fallback: Callable):
        self.handlers = dict(handlers)
        self.fallback = fallback

    def resolve(self, data) -> Callable:
        event_type = data.get("type") if isinstance(data, dict) else None
        if not isinstance(event_type, str):
            return self.fallback
        return self.handlers.get(event_type, self.fallback)

    def dispatch(self, data):
        handler = self.resolve(data)
        if handler is self.fallback:
            logger.debug("Evento ignorado: %r", data.get("type") if isinstance(data, dict) else type(data).__name__)
            return self.fallback(data)
        return handler(data)
