"""Factory do cliente Redis compartilhado pelos stores."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from config.settings import get_base_settings

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

REDIS_SOCKET_TIMEOUT_SECONDS = 5.0


@lru_cache(maxsize=1)
def create_redis_client() -> Redis[bytes]:
    """Cria cliente Redis síncrono (singleton).

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    import redis

    redis_url = get_base_settings().redis_url
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: Redis[bytes] = redis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
        socket_connect_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
        retry_on_timeout=True,
    )

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("redis_client_created", extra={"host": host})
    return client
