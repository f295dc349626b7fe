"""Entrypoint da aplicação real1editor-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.datastructures import Headers

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware cujo preflight aceito responde 200 sem corpo."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida settings no startup e fecha o cliente Redis no shutdown."""
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service})
    from app.bootstrap.clients import create_redis_client

    if create_redis_client.cache_info().currsize:
        create_redis_client().close()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Real1Editor Relay",
        description="Relay de transmissões do site para o Telegram e webhook do bot",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )

    # Origem "*" não pode ser combinada com credenciais
    fastapi_app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting real1editor-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
