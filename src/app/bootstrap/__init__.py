"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_relay_use_case

    # Na inicialização do serviço
    initialize_app()

    # Nas rotas
    use_case = get_relay_use_case()
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
    get_telegram_settings,
)

if TYPE_CHECKING:
    from app.protocols.outbound_sender import OutboundSenderProtocol
    from app.protocols.rate_limit_store import RateLimitStoreProtocol
    from app.protocols.session_store import SessionStoreProtocol
    from app.services.housekeeping import MaintenanceSweeper
    from app.services.rate_limiter import RateLimiter
    from app.sessions.tracker import SessionTracker
    from app.use_cases.handle_inbound_update import HandleInboundUpdateUseCase
    from app.use_cases.relay_transmission import RelayTransmissionUseCase

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Relógio de produção (UTC)."""
    return datetime.now(UTC)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Configura logging JSON com correlation_id e redação do token do bot.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    telegram = get_telegram_settings()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
        secrets=[telegram.bot_token, telegram.webhook_secret],
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"telegram: {error}" for error in get_telegram_settings().validate())
    errors.extend(f"rate_limit: {error}" for error in get_rate_limit_settings().validate(base))
    errors.extend(f"session: {error}" for error in get_session_settings().validate(base))

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_rate_limit_store() -> RateLimitStoreProtocol:
    """Obtém store de janelas do rate limiter (singleton)."""
    from app.bootstrap.dependencies import create_rate_limit_store

    return create_rate_limit_store()


@lru_cache(maxsize=1)
def get_session_store() -> SessionStoreProtocol:
    """Obtém store de sessão do bot (singleton)."""
    from app.bootstrap.dependencies import create_session_store

    return create_session_store()


@lru_cache(maxsize=1)
def get_rate_limiter() -> RateLimiter:
    from app.services.rate_limiter import RateLimiter

    settings = get_rate_limit_settings()
    return RateLimiter(
        get_rate_limit_store(),
        window_seconds=settings.window_seconds,
        max_requests=settings.max_requests,
    )


@lru_cache(maxsize=1)
def get_session_tracker() -> SessionTracker:
    from app.sessions.tracker import SessionTracker

    settings = get_session_settings()
    return SessionTracker(
        get_session_store(),
        ttl_seconds=settings.ttl_seconds,
        max_log_entries=settings.max_log_entries,
    )


@lru_cache(maxsize=1)
def get_sweeper() -> MaintenanceSweeper:
    from app.services.housekeeping import MaintenanceSweeper

    return MaintenanceSweeper(
        get_rate_limit_store(),
        get_session_store(),
        interval_seconds=get_session_settings().sweep_interval_seconds,
    )


@lru_cache(maxsize=1)
def get_outbound_sender() -> OutboundSenderProtocol | None:
    """Cliente da Bot API, ou None quando TELEGRAM_BOT_TOKEN está ausente."""
    from api.connectors.telegram.http_client import create_telegram_http_client

    telegram = get_telegram_settings()
    if not telegram.bot_token:
        logger.warning("telegram_sender_unavailable", extra={"reason": "missing_bot_token"})
        return None
    return create_telegram_http_client(telegram)


@lru_cache(maxsize=1)
def get_relay_use_case() -> RelayTransmissionUseCase:
    from app.use_cases.relay_transmission import RelayTransmissionUseCase

    telegram = get_telegram_settings()
    return RelayTransmissionUseCase(
        get_outbound_sender(),
        telegram.chat_id,
        parse_mode=telegram.parse_mode,
        timezone=telegram.timezone,
        clock=utc_now,
    )


@lru_cache(maxsize=1)
def get_inbound_use_case() -> HandleInboundUpdateUseCase:
    from app.use_cases.handle_inbound_update import HandleInboundUpdateUseCase

    return HandleInboundUpdateUseCase(
        get_session_tracker(),
        get_rate_limiter(),
        get_outbound_sender(),
        parse_mode=get_telegram_settings().parse_mode,
        clock=utc_now,
    )
