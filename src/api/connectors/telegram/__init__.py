"""Connector Telegram Bot API."""

from api.connectors.telegram.bot_errors import TelegramApiError, parse_bot_api_error
from api.connectors.telegram.http_client import (
    TelegramHttpClient,
    create_telegram_http_client,
)

__all__ = [
    "TelegramApiError",
    "TelegramHttpClient",
    "create_telegram_http_client",
    "parse_bot_api_error",
]
