"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API (`ok: false`)."""

    error_code: int
    description: str


def parse_bot_api_error(response_data: dict[str, Any]) -> TelegramApiError | None:
    """Extrai o erro do response da Bot API.

    Returns:
        TelegramApiError se `ok` for falso, None se sucesso.
    """
    if response_data.get("ok") is True:
        return None

    raw_code = response_data.get("error_code", 0)
    try:
        error_code = int(raw_code)
    except (TypeError, ValueError):
        error_code = 0

    return TelegramApiError(
        error_code=error_code,
        description=str(response_data.get("description") or "Unknown Telegram API error"),
    )

