"""Normalizer Telegram — extração e normalização de updates.

Responsabilidades:
- Validar o subconjunto do Update da Bot API usado pelo bot (pydantic)
- Normalizar para o modelo interno InboundUpdate
- Suportar: mensagens de texto, comandos "/", legendas e callback_query
"""

from api.normalizers.telegram.normalizer import normalize_update, telegram_identity

__all__ = ["normalize_update", "telegram_identity"]
