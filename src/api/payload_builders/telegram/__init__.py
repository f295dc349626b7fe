"""Builders de payload da Telegram Bot API."""

from api.payload_builders.telegram.text import build_inline_keyboard, build_send_message_payload

__all__ = ["build_inline_keyboard", "build_send_message_payload"]
