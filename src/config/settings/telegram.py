"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API: credenciais do bot, chat de
destino das transmissões e dados para registro do webhook.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"
RELAY_PATH: str = "/api/telegram"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        chat_id: Chat/canal de destino das transmissões do site
        webhook_secret: Secret enviado pelo Telegram no header do webhook
        public_base_url: URL pública do serviço (registro do webhook)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        parse_mode: Modo de formatação das mensagens
        timezone: Fuso usado no carimbo de tempo das transmissões
    """

    # Credenciais
    bot_token: str = ""
    chat_id: str = ""
    webhook_secret: str = ""

    # Webhook
    public_base_url: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL
    request_timeout_seconds: float = 10.0
    parse_mode: str = "Markdown"

    # Formatação
    timezone: str = "Africa/Addis_Ababa"

    @property
    def is_configured(self) -> bool:
        """True quando token e chat de destino estão presentes."""
        return bool(self.bot_token and self.chat_id)

    @property
    def webhook_url(self) -> str:
        """URL pública que o Telegram deve chamar."""
        if not self.public_base_url:
            raise ValueError("public_base_url é obrigatório")
        return f"{self.public_base_url.rstrip('/')}{RELAY_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if not self.chat_id:
            errors.append("TELEGRAM_CHAT_ID não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.parse_mode not in ("Markdown", "MarkdownV2", "HTML"):
            errors.append(f"TELEGRAM_PARSE_MODE inválido: {self.parse_mode}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"TRANSMISSION_TIMEZONE inválido: {self.timezone}")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
        webhook_secret=os.getenv("TELEGRAM_WEBHOOK_SECRET", ""),
        public_base_url=os.getenv("PUBLIC_BASE_URL", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")),
        parse_mode=os.getenv("TELEGRAM_PARSE_MODE", "Markdown"),
        timezone=os.getenv("TRANSMISSION_TIMEZONE", "Africa/Addis_Ababa"),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
