"""Stores — implementações concretas de persistência efêmera.

Módulos disponíveis:
    - memory_stores: Stores em memória (um processo)
    - redis_rate_limit_store: Janelas do rate limiter em Redis
    - redis_session_store: Sessões do bot em Redis
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryRateLimitStore, MemorySessionStore
from app.infra.stores.redis_rate_limit_store import RedisRateLimitStore
from app.infra.stores.redis_session_store import RedisSessionStore

__all__ = [
    # Memory
    "MemoryRateLimitStore",
    "MemorySessionStore",
    # Redis
    "RedisRateLimitStore",
    "RedisSessionStore",
]
