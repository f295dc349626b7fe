"""Settings do rate limiter de janela fixa."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from config.settings.base.session import StoreBackend, parse_backend

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings


@dataclass(frozen=True)
class RateLimitSettings:
    """Configurações do rate limiter.

    Attributes:
        window_seconds: Duração da janela fixa (W)
        max_requests: Capacidade por janela e identidade (C)
        backend: Backend das janelas (memory|redis)
    """

    window_seconds: int = 60
    max_requests: int = 10
    backend: StoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de rate limit."""
        errors: list[str] = []

        if self.window_seconds <= 0:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser > 0")

        if self.max_requests < 1:
            errors.append("RATE_LIMIT_MAX_REQUESTS deve ser >= 1")

        if self.backend == "redis" and not base.redis_url:
            errors.append("RATE_LIMIT_BACKEND=redis requer REDIS_URL configurado")

        if self.backend == "memory" and base.is_production:
            # Memória não é compartilhada entre instâncias serverless
            errors.append(
                "RATE_LIMIT_BACKEND=memory não limita entre instâncias em production. "
                "Use Redis."
            )

        return errors


def _load_rate_limit_from_env() -> RateLimitSettings:
    """Carrega RateLimitSettings de variáveis de ambiente."""
    return RateLimitSettings(
        window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60")),
        max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "10")),
        backend=parse_backend(os.getenv("RATE_LIMIT_BACKEND", "memory")),
    )


@lru_cache(maxsize=1)
def get_rate_limit_settings() -> RateLimitSettings:
    """Retorna instância cacheada de RateLimitSettings."""
    return _load_rate_limit_from_env()
