"""Registro de interações por usuário.

Resolve, cria e atualiza a UserSession a cada mensagem recebida pelo bot.
Sessão vencida encontrada na leitura é descartada e recriada (limpeza
preguiçosa, independente da varredura periódica).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.sessions.interests import apply_interests
from app.sessions.models import ConversationEntry, UserSession

if TYPE_CHECKING:
    from datetime import datetime

    from app.protocols.session_store import SessionStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 86400
DEFAULT_MAX_LOG_ENTRIES = 50


class SessionTracker:
    """Mantém as sessões do bot em um SessionStoreProtocol."""

    __slots__ = ("_max_log_entries", "_store", "_ttl_seconds")

    def __init__(
        self,
        store: SessionStoreProtocol,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        max_log_entries: int = DEFAULT_MAX_LOG_ENTRIES,
    ) -> None:
        """Inicializa o tracker.

        Args:
            store: Store de sessão (memória ou Redis)
            ttl_seconds: Inatividade máxima antes de descartar a sessão
            max_log_entries: Entradas mantidas no log de conversa
        """
        self._store = store
        self._ttl_seconds = ttl_seconds
        self._max_log_entries = max_log_entries

    @property
    def store(self) -> SessionStoreProtocol:
        return self._store

    def touch(
        self,
        identity: str,
        now: datetime,
        text: str,
        display_name: str = "",
    ) -> UserSession:
        """Registra uma mensagem e devolve a sessão atualizada.

        Args:
            identity: Chave do usuário
            now: Momento da mensagem
            text: Texto recebido
            display_name: Nome exibido (atualiza o registro quando informado)

        Returns:
            Sessão existente atualizada ou sessão nova.
        """
        session = self._store.get(identity)
        if session is not None and session.is_expired(now, self._ttl_seconds):
            logger.debug("session_expired_on_access", extra={"identity": identity})
            self._store.delete(identity)
            session = None

        if session is None:
            session = UserSession(identity=identity, first_seen=now, last_seen=now)
            logger.info("session_created", extra={"identity": identity})

        if display_name:
            session.display_name = display_name
        session.last_seen = now
        session.query_count += 1
        session.conversation_log.append(ConversationEntry(timestamp=now, text=text))
        if len(session.conversation_log) > self._max_log_entries:
            del session.conversation_log[: -self._max_log_entries]

        added = apply_interests(session, text)
        if added:
            logger.debug("session_interests_added", extra={"identity": identity, "interests": added})

        self._store.set(session)
        return session
