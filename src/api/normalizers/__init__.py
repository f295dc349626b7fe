"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- telegram/: updates da Bot API para InboundUpdate
"""

from .telegram import normalize_update, telegram_identity

__all__ = [
    "normalize_update",
    "telegram_identity",
]
