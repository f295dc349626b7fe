"""Factories de stores — escolhe memória ou Redis conforme settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_redis_client
from app.infra.stores import (
    MemoryRateLimitStore,
    MemorySessionStore,
    RedisRateLimitStore,
    RedisSessionStore,
)
from config.settings import (
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
)

if TYPE_CHECKING:
    from app.protocols.rate_limit_store import RateLimitStoreProtocol
    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


def _warn_memory_outside_dev(store_name: str) -> None:
    base = get_base_settings()
    if not base.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"store": store_name, "environment": base.environment},
        )


def create_rate_limit_store() -> RateLimitStoreProtocol:
    """Cria store de janelas do rate limiter (RATE_LIMIT_BACKEND)."""
    settings = get_rate_limit_settings()

    if settings.backend == "redis":
        store: RateLimitStoreProtocol = RedisRateLimitStore(
            create_redis_client(), window_seconds=settings.window_seconds
        )
    else:
        _warn_memory_outside_dev("rate_limit")
        store = MemoryRateLimitStore(window_seconds=settings.window_seconds)

    logger.info("rate_limit_store_created", extra={"backend": settings.backend})
    return store


def create_session_store() -> SessionStoreProtocol:
    """Cria store de sessão do bot (SESSION_STORE_BACKEND)."""
    settings = get_session_settings()

    if settings.store_backend == "redis":
        store: SessionStoreProtocol = RedisSessionStore(
            create_redis_client(), ttl_seconds=settings.ttl_seconds
        )
    else:
        _warn_memory_outside_dev("session")
        store = MemorySessionStore(ttl_seconds=settings.ttl_seconds)

    logger.info("session_store_created", extra={"backend": settings.store_backend})
    return store
