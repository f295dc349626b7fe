"""Protocolo de domínio para o store de janelas do rate limiter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.rate_limit import RateLimitEntry


class RateLimitStoreProtocol(ABC):
    """Contrato mínimo para armazenamento de RateLimitEntry por identidade."""

    @abstractmethod
    def get(self, identity: str) -> RateLimitEntry | None: ...

    @abstractmethod
    def set(self, entry: RateLimitEntry) -> None: ...

    @abstractmethod
    def delete(self, identity: str) -> bool: ...

    @abstractmethod
    def sweep(self, now: datetime) -> int:
        """Remove janelas vencidas. Retorna quantas foram removidas."""
