"""Redis Rate Limit Store — janelas compartilhadas entre instâncias.

Cada janela é gravada com TTL igual à duração da janela, então entradas
vencidas somem sem varredura.

Limitação: o read-modify-write do RateLimiter não é atômico entre
processos; sob rajadas simultâneas da mesma identidade em instâncias
diferentes algumas requisições podem escapar do limite.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.domain.rate_limit import RateLimitEntry
from app.protocols.rate_limit_store import RateLimitStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from datetime import datetime

    from redis import Redis

logger = logging.getLogger(__name__)

RATE_LIMIT_PREFIX = "ratelimit:"


class RedisRateLimitStore(RateLimitStoreProtocol):
    """Store das janelas do rate limiter em Redis.

    Args:
        redis_client: Cliente Redis síncrono
        window_seconds: Duração da janela (TTL das chaves)
    """

    def __init__(self, redis_client: Redis[bytes], window_seconds: int = 60) -> None:
        self._redis = redis_client
        self._window_seconds = window_seconds

    def _key(self, identity: str) -> str:
        return f"{RATE_LIMIT_PREFIX}{identity}"

    def get(self, identity: str) -> RateLimitEntry | None:
        try:
            data = self._redis.get(self._key(identity))
        except RedisError as exc:
            raise RedisConnectionError("redis_get_failed") from exc
        if data is None:
            return None
        try:
            return RateLimitEntry.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning("rate_limit_load_error", extra={"identity": identity, "error": str(e)})
            return None

    def set(self, entry: RateLimitEntry) -> None:
        try:
            self._redis.setex(
                self._key(entry.identity),
                self._window_seconds,
                json.dumps(entry.to_dict()),
            )
        except RedisError as exc:
            raise RedisConnectionError("redis_set_failed") from exc

    def delete(self, identity: str) -> bool:
        try:
            return bool(self._redis.delete(self._key(identity)))
        except RedisError as exc:
            raise RedisConnectionError("redis_delete_failed") from exc

    def sweep(self, now: datetime) -> int:
        """No-op: o Redis expira as chaves sozinho."""
        return 0
