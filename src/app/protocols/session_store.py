"""Protocolo de domínio para o store de sessões do bot."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from app.sessions.models import UserSession


class SessionStoreProtocol(ABC):
    """Contrato mínimo para armazenamento de UserSession por identidade.

    Backend em memória vale só para um processo; em deploy com várias
    instâncias use um store compartilhado (Redis).
    """

    @abstractmethod
    def get(self, identity: str) -> UserSession | None: ...

    @abstractmethod
    def set(self, session: UserSession) -> None: ...

    @abstractmethod
    def delete(self, identity: str) -> bool: ...

    @abstractmethod
    def sweep(self, now: datetime) -> int:
        """Remove sessões expiradas. Retorna quantas foram removidas."""
