"""Limpeza de janelas e sessões vencidas.

Não há timer em background: a varredura roda no início das requisições,
no máximo uma vez por intervalo, ou sob demanda via `sweep`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from app.protocols.rate_limit_store import RateLimitStoreProtocol
    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SweepResult:
    """Quantidade de registros removidos em uma varredura."""

    rate_limit_entries: int
    sessions: int


class MaintenanceSweeper:
    """Executa `sweep` nos stores respeitando um intervalo mínimo."""

    def __init__(
        self,
        rate_limit_store: RateLimitStoreProtocol,
        session_store: SessionStoreProtocol,
        interval_seconds: int = 3600,
    ) -> None:
        self._rate_limit_store = rate_limit_store
        self._session_store = session_store
        self._interval = timedelta(seconds=interval_seconds)
        self._last_run: datetime | None = None
        self._lock = threading.Lock()

    def maybe_sweep(self, now: datetime) -> SweepResult | None:
        """Varre se o intervalo venceu (a primeira chamada sempre varre)."""
        with self._lock:
            if self._last_run is not None and now - self._last_run < self._interval:
                return None
            self._last_run = now
        return self.sweep(now)

    def sweep(self, now: datetime) -> SweepResult:
        result = SweepResult(
            rate_limit_entries=self._rate_limit_store.sweep(now),
            sessions=self._session_store.sweep(now),
        )
        if result.rate_limit_entries or result.sessions:
            logger.info(
                "housekeeping_sweep",
                extra={
                    "rate_limit_entries_removed": result.rate_limit_entries,
                    "sessions_removed": result.sessions,
                },
            )
        return result
