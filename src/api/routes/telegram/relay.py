"""Endpoint único do relay Telegram.

Endpoints:
- OPTIONS /api/telegram: preflight CORS (200, corpo vazio)
- POST /api/telegram: transmissão do site/mini app ou update do bot
- GET/PUT/PATCH/DELETE /api/telegram: 405

Fluxo do POST:
1. correlation_id e varredura de manutenção (se o intervalo venceu)
2. Leitura do corpo (413 acima de MAX_BODY_BYTES) e parse do JSON (400 se inválido)
3. `update_id` presente: ramo do bot, sempre 200 após o secret conferir
4. Caso contrário: rate limit por IP e relay para o chat da equipe
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.telegram.webhook.receive import (
    InvalidJsonError,
    InvalidSecretTokenError,
    is_inbound_update,
    parse_request_body,
    verify_secret_token,
)
from api.normalizers.telegram import normalize_update
from app.bootstrap import (
    get_inbound_use_case,
    get_rate_limiter,
    get_relay_use_case,
    get_sweeper,
    utc_now,
)
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_base_settings, get_telegram_settings
from utils.errors import (
    ClientInputError,
    InternalError,
    MethodNotAllowedError,
    PayloadTooLargeError,
    RateLimitExceededError,
    RelayError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INBOUND_ACK: dict[str, str] = {"status": "ok"}


def client_identity(request: Request) -> str:
    """Identidade do chamador do relay para o rate limiter.

    Primeiro hop de X-Forwarded-For, depois X-Real-IP, depois o peer.
    """
    forwarded = request.headers.get("x-forwarded-for", "")
    address = forwarded.split(",")[0].strip()
    if not address:
        address = request.headers.get("x-real-ip", "").strip()
    if not address and request.client is not None:
        address = request.client.host
    return f"ip:{address or 'unknown'}"


def _error_response(error: RelayError) -> JSONResponse:
    return JSONResponse(content=error.to_body(), status_code=error.http_status)


async def _read_body(request: Request, limit: int) -> bytes:
    """Lê o corpo respeitando o limite (Content-Length e bytes recebidos)."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(details=f"Body exceeds {limit} bytes")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(details=f"Body exceeds {limit} bytes")
    return bytes(body)


def _run_maintenance() -> None:
    try:
        get_sweeper().maybe_sweep(utc_now())
    except Exception:
        # Falha de limpeza não derruba a requisição
        logger.exception("maintenance_sweep_failed")


@router.options("", response_model=None)
async def preflight() -> Response:
    """Preflight CORS; os headers vêm do CORSMiddleware."""
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], response_model=None)
async def method_not_allowed(request: Request) -> JSONResponse:
    logger.info("relay_method_not_allowed", extra={"method": request.method})
    return _error_response(MethodNotAllowedError())


@router.post("", response_model=None)
async def receive(request: Request) -> JSONResponse:
    """Recebe transmissão do site ou update do Telegram."""
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        _run_maintenance()

        limit = get_base_settings().max_body_bytes
        try:
            raw_body = await _read_body(request, limit)
        except PayloadTooLargeError as exc:
            logger.warning("relay_body_too_large", extra={"limit": limit})
            return _error_response(exc)

        try:
            payload = parse_request_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "relay_body_invalid",
                extra={"reason": str(exc), "payload_size": len(raw_body)},
            )
            return _error_response(
                ClientInputError("Invalid transmission data format.", details="Data parsing failed")
            )

        if is_inbound_update(payload):
            return await _handle_inbound(request, payload)
        return await _handle_relay(request, payload)
    finally:
        reset_correlation_id(token)


async def _handle_inbound(request: Request, payload: dict[str, Any]) -> JSONResponse:
    """Ramo do bot: confirma o update mesmo quando o processamento falha."""
    try:
        verify_secret_token(request.headers, get_telegram_settings().webhook_secret)
    except InvalidSecretTokenError:
        logger.warning("telegram_secret_token_invalid")
        return JSONResponse(
            content={"status": "error", "error": "Unauthorized"},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    update = normalize_update(payload)
    if update is None:
        logger.info("telegram_update_ignored", extra={"update_id": payload.get("update_id")})
        return JSONResponse(content=INBOUND_ACK)

    try:
        await get_inbound_use_case().execute(update)
    except Exception:
        logger.exception(
            "telegram_update_failed",
            extra={
                "update_id": update.update_id,
                "kind": update.kind,
                "correlation_id": get_correlation_id(),
            },
        )
    return JSONResponse(content=INBOUND_ACK)


async def _handle_relay(request: Request, payload: dict[str, Any]) -> JSONResponse:
    """Ramo do relay: rate limit por IP e encaminhamento ao chat da equipe."""
    identity = client_identity(request)
    try:
        if not get_rate_limiter().allow(identity, utc_now()):
            raise RateLimitExceededError
        result = await get_relay_use_case().execute(payload)
    except RelayError as exc:
        if exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "relay_failed",
                extra={"http_status": exc.http_status, "error_type": type(exc).__name__},
            )
        return _error_response(exc)
    except Exception as exc:
        logger.exception("relay_unexpected_error")
        details = str(exc) if get_base_settings().expose_error_details else None
        return _error_response(InternalError(details=details))

    return JSONResponse(content=result.to_body())
