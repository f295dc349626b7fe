"""Settings de sessão do bot.

Configurações do registro efêmero de interação por usuário.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class SessionSettings:
    """Configurações de sessão.

    Attributes:
        ttl_seconds: Inatividade máxima antes da remoção (24h)
        sweep_interval_seconds: Intervalo mínimo entre varreduras de limpeza
        max_log_entries: Tamanho máximo do log de conversa por usuário
        store_backend: Backend para armazenamento de sessão
    """

    ttl_seconds: int = 86400
    sweep_interval_seconds: int = 3600
    max_log_entries: int = 50
    store_backend: StoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de sessão.

        Args:
            base: BaseSettings para verificar backend compartilhado.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.ttl_seconds <= 0:
            errors.append("SESSION_TTL_SECONDS deve ser > 0")

        if self.sweep_interval_seconds <= 0:
            errors.append("SESSION_SWEEP_INTERVAL_SECONDS deve ser > 0")

        if self.max_log_entries < 1:
            errors.append("SESSION_MAX_LOG_ENTRIES deve ser >= 1")

        if self.store_backend not in ("memory", "redis"):
            errors.append(f"SESSION_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "redis" and not base.redis_url:
            errors.append("SESSION_STORE_BACKEND=redis requer REDIS_URL configurado")

        return errors


def parse_backend(raw: str) -> StoreBackend:
    """Normaliza o nome do backend (default memory)."""
    value = raw.strip().lower()
    return "redis" if value == "redis" else "memory"


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    return SessionSettings(
        ttl_seconds=int(os.getenv("SESSION_TTL_SECONDS", "86400")),
        sweep_interval_seconds=int(os.getenv("SESSION_SWEEP_INTERVAL_SECONDS", "3600")),
        max_log_entries=int(os.getenv("SESSION_MAX_LOG_ENTRIES", "50")),
        store_backend=parse_backend(os.getenv("SESSION_STORE_BACKEND", "memory")),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
