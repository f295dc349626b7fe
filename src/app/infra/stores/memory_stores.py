"""Stores em memória — um processo só.

ATENÇÃO: estado não é compartilhado entre instâncias serverless nem
sobrevive a reinícios. Com várias instâncias o rate limit vira no-op entre
elas; use os stores Redis nesse cenário.
"""

from __future__ import annotations

import threading
from datetime import timedelta
from typing import TYPE_CHECKING

from app.protocols.rate_limit_store import RateLimitStoreProtocol
from app.protocols.session_store import SessionStoreProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.rate_limit import RateLimitEntry
    from app.sessions.models import UserSession


class MemoryRateLimitStore(RateLimitStoreProtocol):
    """Janelas do rate limiter em dict."""

    def __init__(self, window_seconds: int = 60) -> None:
        self._window = timedelta(seconds=window_seconds)
        self._store: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def get(self, identity: str) -> RateLimitEntry | None:
        return self._store.get(identity)

    def set(self, entry: RateLimitEntry) -> None:
        with self._lock:
            self._store[entry.identity] = entry

    def delete(self, identity: str) -> bool:
        with self._lock:
            return self._store.pop(identity, None) is not None

    def sweep(self, now: datetime) -> int:
        """Remove janelas com `now - window_start > window`."""
        with self._lock:
            expired = [k for k, v in self._store.items() if now - v.window_start > self._window]
            for k in expired:
                del self._store[k]
        return len(expired)

    def __len__(self) -> int:
        return len(self._store)


class MemorySessionStore(SessionStoreProtocol):
    """Sessões do bot em dict; expiração pela varredura ou pelo tracker."""

    def __init__(self, ttl_seconds: int = 86400) -> None:
        self._ttl_seconds = ttl_seconds
        self._store: dict[str, UserSession] = {}
        self._lock = threading.Lock()

    def get(self, identity: str) -> UserSession | None:
        return self._store.get(identity)

    def set(self, session: UserSession) -> None:
        with self._lock:
            self._store[session.identity] = session

    def delete(self, identity: str) -> bool:
        with self._lock:
            return self._store.pop(identity, None) is not None

    def sweep(self, now: datetime) -> int:
        """Remove sessões com `now - last_seen > ttl`."""
        with self._lock:
            expired = [k for k, v in self._store.items() if v.is_expired(now, self._ttl_seconds)]
            for k in expired:
                del self._store[k]
        return len(expired)

    def __len__(self) -> int:
        return len(self._store)
