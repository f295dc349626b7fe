"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.rate_limit import (
    RateLimitSettings,
    get_rate_limit_settings,
)
from config.settings.base.session import (
    SessionSettings,
    StoreBackend,
    get_session_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    # Rate limit
    "RateLimitSettings",
    # Session
    "SessionSettings",
    "StoreBackend",
    "get_base_settings",
    "get_rate_limit_settings",
    "get_session_settings",
]
