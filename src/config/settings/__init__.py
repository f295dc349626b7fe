"""Agregador de settings do relay Real1Editor.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    RateLimitSettings,
    SessionSettings,
    StoreBackend,
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
)

# Channel-specific settings
from config.settings.telegram import (
    RELAY_PATH,
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    # Constants
    "RELAY_PATH",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    "RateLimitSettings",
    "SessionSettings",
    "StoreBackend",
    # Channels
    "TelegramSettings",
    "get_base_settings",
    "get_rate_limit_settings",
    "get_session_settings",
    "get_telegram_settings",
]
