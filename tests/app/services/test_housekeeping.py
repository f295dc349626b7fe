"""Testes da varredura de manutenção e da expiração nos stores em memória."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

from app.domain.rate_limit import RateLimitEntry
from app.infra.stores.memory_stores import MemoryRateLimitStore, MemorySessionStore
from app.services.housekeeping import MaintenanceSweeper, SweepResult
from app.sessions.tracker import SessionTracker

T0 = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
TTL = 86400


class TestMemorySweep:
    """Remoção de registros vencidos."""

    def test_session_untouched_past_ttl_is_removed(self) -> None:
        store = MemorySessionStore(ttl_seconds=TTL)
        tracker = SessionTracker(store, ttl_seconds=TTL)
        now = T0 + timedelta(seconds=TTL + 1)

        tracker.touch("tg:1", T0, "hello")
        tracker.touch("tg:2", now - timedelta(seconds=1), "hello")

        removed = store.sweep(now)

        assert removed == 1
        assert store.get("tg:1") is None
        assert store.get("tg:2") is not None

    def test_session_exactly_at_ttl_survives(self) -> None:
        store = MemorySessionStore(ttl_seconds=TTL)
        SessionTracker(store, ttl_seconds=TTL).touch("tg:1", T0, "hi")

        assert store.sweep(T0 + timedelta(seconds=TTL)) == 0
        assert len(store) == 1

    def test_rate_limit_window_past_duration_is_removed(self) -> None:
        store = MemoryRateLimitStore(window_seconds=60)
        store.set(RateLimitEntry("ip:old", T0, 3))
        store.set(RateLimitEntry("ip:new", T0 + timedelta(seconds=30), 1))

        removed = store.sweep(T0 + timedelta(seconds=61))

        assert removed == 1
        assert store.get("ip:old") is None
        assert store.get("ip:new") is not None


class TestMaintenanceSweeper:
    """Intervalo mínimo entre varreduras."""

    def _stores(self) -> tuple[MagicMock, MagicMock]:
        rate_store = MagicMock()
        rate_store.sweep.return_value = 2
        session_store = MagicMock()
        session_store.sweep.return_value = 1
        return rate_store, session_store

    def test_first_call_always_sweeps(self) -> None:
        rate_store, session_store = self._stores()
        sweeper = MaintenanceSweeper(rate_store, session_store, interval_seconds=3600)

        result = sweeper.maybe_sweep(T0)

        assert result == SweepResult(rate_limit_entries=2, sessions=1)
        rate_store.sweep.assert_called_once_with(T0)
        session_store.sweep.assert_called_once_with(T0)

    def test_skips_until_interval_elapses(self) -> None:
        rate_store, session_store = self._stores()
        sweeper = MaintenanceSweeper(rate_store, session_store, interval_seconds=3600)

        sweeper.maybe_sweep(T0)
        assert sweeper.maybe_sweep(T0 + timedelta(minutes=59)) is None
        assert sweeper.maybe_sweep(T0 + timedelta(hours=1)) is not None
        assert rate_store.sweep.call_count == 2

    def test_manual_sweep_ignores_interval(self) -> None:
        rate_store, session_store = self._stores()
        sweeper = MaintenanceSweeper(rate_store, session_store, interval_seconds=3600)

        sweeper.maybe_sweep(T0)
        sweeper.sweep(T0 + timedelta(seconds=1))

        assert session_store.sweep.call_count == 2
