"""Normalizer Telegram — converte updates para InboundUpdate.

Updates sem remetente, de bots, ou de tipos não tratados (inline queries,
posts de canal, mídia sem legenda) retornam None e são apenas confirmados.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from api.normalizers.telegram.extractor import TelegramUpdate
from app.protocols.models import InboundUpdate

logger = logging.getLogger(__name__)


def telegram_identity(user_id: int) -> str:
    """Chave de identidade de um usuário Telegram."""
    return f"tg:{user_id}"


def normalize_update(payload: dict[str, Any]) -> InboundUpdate | None:
    """Normaliza um update do Telegram.

    Returns:
        InboundUpdate ou None se o update não gera resposta.
    """
    try:
        update = TelegramUpdate.model_validate(payload)
    except ValidationError as exc:
        logger.warning(
            "telegram_update_invalid",
            extra={"error_count": exc.error_count()},
        )
        return None

    query = update.callback_query
    if query is not None:
        if query.from_user.is_bot or query.message is None:
            return None
        return InboundUpdate(
            update_id=update.update_id,
            identity=telegram_identity(query.from_user.id),
            chat_id=query.message.chat.id,
            kind="callback",
            display_name=query.from_user.display_name,
            callback_data=query.data or "",
            callback_query_id=query.id,
        )

    message = update.message or update.edited_message
    if message is None or message.from_user is None or message.from_user.is_bot:
        return None

    text = (message.text or message.caption or "").strip()
    if not text:
        return None

    return InboundUpdate(
        update_id=update.update_id,
        identity=telegram_identity(message.from_user.id),
        chat_id=message.chat.id,
        kind="command" if text.startswith("/") else "message",
        text=text,
        display_name=message.from_user.display_name,
    )
