"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap.clients import create_redis_client
from config.settings import (
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
    get_telegram_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()

REDIS_PING_TIMEOUT_SECONDS = 2.0


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "skipped", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: credenciais do bot e Redis (quando selecionado)."""
    telegram_check = _check_telegram()
    redis_check = await _check_redis()
    ready = telegram_check.status == "ok" and redis_check.status in {"ok", "skipped"}

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "telegram": telegram_check.as_dict(),
            "redis": redis_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_telegram() -> DependencyCheck:
    if get_telegram_settings().is_configured:
        return DependencyCheck(status="ok")
    return DependencyCheck(status="failed", error="not_configured")


def _redis_selected() -> bool:
    return (
        get_rate_limit_settings().backend == "redis"
        or get_session_settings().store_backend == "redis"
    )


async def _check_redis() -> DependencyCheck:
    if not _redis_selected():
        return DependencyCheck(status="skipped")
    started_at = time.perf_counter()
    try:
        client = create_redis_client()
        await asyncio.wait_for(asyncio.to_thread(client.ping), timeout=REDIS_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_redis_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))
