"""Rate limiter de janela fixa por identidade.

Regra por chamada de `allow(identity, now)`:
- sem entrada, ou `now - window_start >= W`: janela nova {now, 1}, aceita;
- senão aceita se o contador antes do incremento for < C, e só incrementa
  enquanto o contador não chegou em C.

O lock serializa o read-modify-write por processo. Entre processos não há
atomicidade (ver RedisRateLimitStore).
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import TYPE_CHECKING

from app.domain.rate_limit import RateLimitEntry

if TYPE_CHECKING:
    from datetime import datetime

    from app.protocols.rate_limit_store import RateLimitStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SECONDS = 60
DEFAULT_MAX_REQUESTS = 10


class RateLimiter:
    """Contador de janela fixa (W segundos, capacidade C)."""

    __slots__ = ("_lock", "_max_requests", "_store", "_window")

    def __init__(
        self,
        store: RateLimitStoreProtocol,
        window_seconds: int = DEFAULT_WINDOW_SECONDS,
        max_requests: int = DEFAULT_MAX_REQUESTS,
    ) -> None:
        self._store = store
        self._window = timedelta(seconds=window_seconds)
        self._max_requests = max_requests
        self._lock = threading.Lock()

    @property
    def window_seconds(self) -> int:
        return int(self._window.total_seconds())

    @property
    def max_requests(self) -> int:
        return self._max_requests

    def allow(self, identity: str, now: datetime) -> bool:
        """Registra uma requisição e diz se ela está dentro do limite."""
        with self._lock:
            entry = self._store.get(identity)

            if entry is None or now - entry.window_start >= self._window:
                self._store.set(RateLimitEntry(identity=identity, window_start=now, count=1))
                return True

            if entry.count >= self._max_requests:
                logger.info(
                    "rate_limit_exceeded",
                    extra={"identity": identity, "limit": self._max_requests},
                )
                return False

            entry.count += 1
            self._store.set(entry)
            return True
