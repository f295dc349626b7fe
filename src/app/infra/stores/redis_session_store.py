"""Redis Session Store — sessões do bot compartilhadas entre instâncias.

TTL nativo do Redis substitui a varredura: cada `set` renova a expiração
para `ttl_seconds` a partir do último contato.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.session_store import SessionStoreProtocol
from app.sessions.models import UserSession
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from datetime import datetime

    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo para namespace de sessões
SESSION_PREFIX = "usersession:"


class RedisSessionStore(SessionStoreProtocol):
    """Store de sessão usando Redis.

    Args:
        redis_client: Cliente Redis síncrono
        ttl_seconds: Inatividade máxima da sessão
    """

    def __init__(self, redis_client: Redis[bytes], ttl_seconds: int = 86400) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds

    def _key(self, identity: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{SESSION_PREFIX}{identity}"

    def get(self, identity: str) -> UserSession | None:
        """Carrega sessão do Redis."""
        try:
            data = self._redis.get(self._key(identity))
        except RedisError as exc:
            raise RedisConnectionError("redis_get_failed") from exc
        if data is None:
            return None
        try:
            return UserSession.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning("session_load_error", extra={"identity": identity, "error": str(e)})
            return None

    def set(self, session: UserSession) -> None:
        """Salva sessão com TTL renovado."""
        data = json.dumps(session.to_dict())
        try:
            self._redis.setex(self._key(session.identity), self._ttl_seconds, data)
        except RedisError as exc:
            raise RedisConnectionError("redis_set_failed") from exc
        logger.debug("session_saved", extra={"identity": session.identity})

    def delete(self, identity: str) -> bool:
        """Remove sessão do Redis."""
        try:
            return bool(self._redis.delete(self._key(identity)))
        except RedisError as exc:
            raise RedisConnectionError("redis_delete_failed") from exc

    def sweep(self, now: datetime) -> int:
        """No-op: o Redis expira as chaves sozinho."""
        return 0
