import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


class ConfigError(RuntimeError):
    pass


APP_VERSION = "1.00"
SERVICE_NAME = "newrelic-workspace-bridge"

# Configurações globais de ambiente
WATSON_WORK_URL = os.getenv("WATSON_WORK_URL", "https://api.watsonwork.ibm.com").rstrip("/")
APP_PORT = int(os.getenv("APP_PORT", os.getenv("PORT", "3000")))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Credenciais obtidas no registro da aplicação / do webhook no Watson Workspace
APP_ID = os.getenv("NEWRELIC_CLIENT_ID")
APP_SECRET = os.getenv("NEWRELIC_CLIENT_SECRET")
WEBHOOK_SECRET = os.getenv("NEWRELIC_WEBHOOK_SECRET")

# Palavra-chave que faz uma mensagem ser tratada como comando
WEBHOOK_KEYWORD = os.getenv("WEBHOOK_KEYWORD", "@magic8ball")

ALIVE_MESSAGE = "IBM Watson Workspace Integration for NewRelic is alive and happy!"
ECHO_TITLE = "Echo"

RESPONSES: Tuple[str, ...] = (
    "It is certain",
    "It is decidedly so",
    "Without a doubt",
    "Yes, definitely",
    "You may rely on it",
    "As I see it, yes",
    "Most likely",
    "Yes",
    "Signs point to yes",
    "Reply hazy try again",
    "Ask again later",
    "Better not tell you now",
    "Concentrate and ask again",
    "Don't count on it",
    "My reply is no",
    "My sources say no",
    "Outlook not so good",
    "Very doubtful",
    "Ask Anton",
    "Visit Cork, I hear its lovely this time of year!",
)

# Cor da anotação por estado do incidente
STATE_COLORS: Dict[str, str] = {
    "open": "#CC0000",
    "closed": "#32CD32",
}
DEFAULT_COLOR = "#1DA1F2"


@dataclass(frozen=True)
class Settings:
    app_id: Optional[str]
    app_secret: Optional[str]
    webhook_secret: Optional[str]
    base_url: str = WATSON_WORK_URL
    keyword: str = WEBHOOK_KEYWORD
    responses: Tuple[str, ...] = field(default=RESPONSES)
    timeout: float = HTTP_TIMEOUT_SECONDS

    def validate(self) -> "Settings":
        missing = [
            name for name, value in (
                ("NEWRELIC_CLIENT_ID", self.app_id),
                ("NEWRELIC_CLIENT_SECRET", self.app_secret),
                ("NEWRELIC_WEBHOOK_SECRET", self.webhook_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"Variáveis de ambiente obrigatórias ausentes: {', '.join(missing)}")
        if not self.keyword:
            raise ConfigError("WEBHOOK_KEYWORD não pode ser vazio")
        if self.timeout <= 0:
            raise ConfigError(f"HTTP_TIMEOUT_SECONDS inválido: {self.timeout}")
        return self


def load_settings() -> Settings:
    return Settings(
        app_id=APP_ID,
        app_secret=APP_SECRET,
        webhook_secret=WEBHOOK_SECRET,
    )
