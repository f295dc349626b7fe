"""Settings base do relay Real1Editor.

Configurações comuns ao endpoint de relay e ao webhook do bot.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo (expõe detalhes de erros internos)
        redis_url: URL de conexão Redis (backends compartilhados)
        cors_allow_origins: Origens liberadas para chamadas do site
        max_body_bytes: Tamanho máximo do corpo aceito pelo endpoint
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "real1editor-relay"
    debug: bool = False

    # Redis
    redis_url: str = ""

    # CORS
    cors_allow_origins: tuple[str, ...] = ("*",)

    # Requisições
    max_body_bytes: int = 1_048_576

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    @property
    def expose_error_details(self) -> bool:
        """Detalhes de exceções internas só saem em debug/desenvolvimento."""
        return self.debug or self.is_development

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS não pode ser vazio")

        if self.max_body_bytes <= 0:
            errors.append("MAX_BODY_BYTES deve ser > 0")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "real1editor-relay"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        redis_url=os.getenv("REDIS_URL", ""),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        max_body_bytes=int(os.getenv("MAX_BODY_BYTES", "1048576")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
