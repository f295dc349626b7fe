"""Testes end-to-end do endpoint /api/telegram (ASGI em memória)."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from api.routes.telegram import relay
from app.infra.stores.memory_stores import MemoryRateLimitStore, MemorySessionStore
from app.protocols.models import OutboundMessageResponse
from app.services.housekeeping import MaintenanceSweeper
from app.services.rate_limiter import RateLimiter
from app.sessions.tracker import SessionTracker
from app.use_cases.handle_inbound_update import HandleInboundUpdateUseCase
from app.use_cases.relay_transmission import RelayTransmissionUseCase
from config.settings import BaseSettings, TelegramSettings

NOW = datetime(2026, 10, 19, 17, 30, tzinfo=UTC)
BOT_TOKEN = "987654:TOKEN-THAT-MUST-NOT-LEAK"
WEBHOOK_SECRET = "hook-secret"


class Harness:
    """Dependências do endpoint com sender falso."""

    def __init__(self) -> None:
        self.sender = MagicMock()
        self.sender.send_message = AsyncMock(
            return_value=OutboundMessageResponse(ok=True, message_id=42)
        )
        self.sender.answer_callback_query = AsyncMock(
            return_value=OutboundMessageResponse(ok=True)
        )
        rate_store = MemoryRateLimitStore()
        session_store = MemorySessionStore()
        self.rate_limiter = RateLimiter(rate_store, window_seconds=60, max_requests=10)
        self.sweeper = MaintenanceSweeper(rate_store, session_store)
        self.relay = RelayTransmissionUseCase(self.sender, "-1001", clock=lambda: NOW)
        self.inbound = HandleInboundUpdateUseCase(
            SessionTracker(session_store), self.rate_limiter, self.sender, clock=lambda: NOW
        )


@pytest.fixture
def harness(monkeypatch: pytest.MonkeyPatch) -> Harness:
    h = Harness()
    monkeypatch.setattr(relay, "get_relay_use_case", lambda: h.relay)
    monkeypatch.setattr(relay, "get_inbound_use_case", lambda: h.inbound)
    monkeypatch.setattr(relay, "get_rate_limiter", lambda: h.rate_limiter)
    monkeypatch.setattr(relay, "get_sweeper", lambda: h.sweeper)
    monkeypatch.setattr(relay, "utc_now", lambda: NOW)
    monkeypatch.setattr(
        relay,
        "get_telegram_settings",
        lambda: TelegramSettings(bot_token=BOT_TOKEN, chat_id="-1001", webhook_secret=WEBHOOK_SECRET),
    )
    return h


@pytest_asyncio.fixture
async def client(harness: Harness) -> AsyncIterator[httpx.AsyncClient]:
    app = FastAPI()
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.include_router(create_api_router())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://relay.test") as c:
        yield c


async def _post(client: httpx.AsyncClient, body: Any, **headers: str) -> httpx.Response:
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return await client.post(
        "/api/telegram",
        content=content,
        headers={"content-type": "application/json", **headers},
    )


class TestRelayBranch:
    @pytest.mark.asyncio
    async def test_subscribe_success(self, client: httpx.AsyncClient, harness: Harness) -> None:
        response = await _post(client, {"type": "subscribe", "email": "fan@example.com"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["telegramMessageId"] == 42
        assert body["type"] == "subscribe"
        assert body["transmissionId"].startswith("TX-")
        harness.sender.send_message.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_upstream_401_returns_generic_500(
        self,
        client: httpx.AsyncClient,
        harness: Harness,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        harness.sender.send_message.return_value = OutboundMessageResponse(
            ok=False, error_code=401, description="Unauthorized"
        )

        with caplog.at_level(logging.DEBUG):
            response = await _post(client, {"type": "feedback", "message": "nice"})

        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "error": "Quantum server misconfigured. Transmission failed.",
            "details": "Server configuration error",
        }
        assert BOT_TOKEN not in response.text
        assert BOT_TOKEN not in caplog.text

    @pytest.mark.asyncio
    async def test_upstream_500_returns_502(
        self, client: httpx.AsyncClient, harness: Harness
    ) -> None:
        harness.sender.send_message.return_value = OutboundMessageResponse(
            ok=False, error_code=500, description="Internal Server Error"
        )

        response = await _post(client, {"type": "feedback"})

        assert response.status_code == 502
        assert response.json()["details"] == "Internal Server Error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("body", "error"),
        [
            ({"type": "unknown"}, "Unknown transmission type."),
            ({"type": "project", "name": "N"}, "Missing required fields."),
        ],
    )
    async def test_invalid_payload_returns_400_without_external_call(
        self,
        client: httpx.AsyncClient,
        harness: Harness,
        body: dict[str, Any],
        error: str,
    ) -> None:
        response = await _post(client, body)

        assert response.status_code == 400
        assert response.json()["error"] == error
        harness.sender.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_json(self, client: httpx.AsyncClient, harness: Harness) -> None:
        response = await _post(client, b"{broken")

        assert response.status_code == 400
        assert response.json() == {
            "status": "error",
            "error": "Invalid transmission data format.",
            "details": "Data parsing failed",
        }
        harness.sender.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rate_limit_by_client_ip(self, client: httpx.AsyncClient) -> None:
        headers = {"x-forwarded-for": "203.0.113.7, 10.0.0.1"}
        statuses = [
            (await _post(client, {"type": "feedback"}, **headers)).status_code for _ in range(11)
        ]

        assert statuses[:10] == [200] * 10
        assert statuses[10] == 429
        other = await _post(client, {"type": "feedback"}, **{"x-forwarded-for": "198.51.100.1"})
        assert other.status_code == 200

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_500(
        self, client: httpx.AsyncClient, harness: Harness
    ) -> None:
        harness.sender.send_message.side_effect = RuntimeError("kaboom")

        response = await _post(client, {"type": "feedback"})

        assert response.status_code == 500
        assert response.json()["error"] == "Quantum system overload. Transmission failed."


class TestBodyLimit:
    @pytest.mark.asyncio
    async def test_body_over_limit_returns_413(
        self,
        client: httpx.AsyncClient,
        harness: Harness,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(relay, "get_base_settings", lambda: BaseSettings(max_body_bytes=64))

        response = await _post(client, {"type": "feedback", "message": "x" * 200})

        assert response.status_code == 413
        assert response.json() == {
            "status": "error",
            "error": "Transmission too large.",
            "details": "Body exceeds 64 bytes",
        }
        harness.sender.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_body_within_limit_is_relayed(
        self,
        client: httpx.AsyncClient,
        harness: Harness,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(relay, "get_base_settings", lambda: BaseSettings(max_body_bytes=1024))

        response = await _post(client, {"type": "feedback", "message": "short"})

        assert response.status_code == 200
        harness.sender.send_message.assert_awaited_once()


class TestMethods:
    @pytest.mark.asyncio
    async def test_options_returns_empty_200(self, client: httpx.AsyncClient) -> None:
        response = await client.options("/api/telegram")

        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_cors_preflight(self, client: httpx.AsyncClient) -> None:
        response = await client.options(
            "/api/telegram",
            headers={
                "origin": "https://real1editor.example",
                "access-control-request-method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_other_methods_return_405(
        self, client: httpx.AsyncClient, method: str
    ) -> None:
        response = await client.request(method, "/api/telegram")

        assert response.status_code == 405
        assert response.json() == {
            "status": "error",
            "error": "Quantum interference detected. Method not allowed.",
        }


class TestInboundBranch:
    def _update(self, text: str = "hello") -> dict[str, Any]:
        return {
            "update_id": 77,
            "message": {
                "message_id": 1,
                "chat": {"id": 555},
                "from": {"id": 42, "first_name": "Saba"},
                "text": text,
            },
        }

    @pytest.mark.asyncio
    async def test_update_gets_reply_and_ok(
        self, client: httpx.AsyncClient, harness: Harness
    ) -> None:
        response = await _post(
            client,
            self._update("/pricing"),
            **{"x-telegram-bot-api-secret-token": WEBHOOK_SECRET},
        )

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        request = harness.sender.send_message.await_args.args[0]
        assert request.chat_id == 555
        assert "*Pricing*" in request.text

    @pytest.mark.asyncio
    async def test_dispatcher_failure_still_returns_200(
        self,
        client: httpx.AsyncClient,
        harness: Harness,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        failing = MagicMock()
        failing.execute = AsyncMock(side_effect=RuntimeError("dispatcher exploded"))
        monkeypatch.setattr(relay, "get_inbound_use_case", lambda: failing)

        response = await _post(
            client, self._update(), **{"x-telegram-bot-api-secret-token": WEBHOOK_SECRET}
        )

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_invalid_secret_returns_401(
        self, client: httpx.AsyncClient, harness: Harness
    ) -> None:
        response = await _post(
            client, self._update(), **{"x-telegram-bot-api-secret-token": "nope"}
        )

        assert response.status_code == 401
        harness.sender.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ignored_update_is_acknowledged(
        self, client: httpx.AsyncClient, harness: Harness
    ) -> None:
        response = await _post(
            client,
            {"update_id": 78, "channel_post": {"message_id": 1}},
            **{"x-telegram-bot-api-secret-token": WEBHOOK_SECRET},
        )

        assert response.status_code == 200
        harness.sender.send_message.assert_not_awaited()


def test_client_identity_fallbacks() -> None:
    from starlette.requests import Request

    def _request(headers: list[tuple[bytes, bytes]]) -> Request:
        return Request(
            {
                "type": "http",
                "method": "POST",
                "path": "/api/telegram",
                "headers": headers,
                "client": ("192.0.2.5", 5000),
            }
        )

    assert relay.client_identity(_request([(b"x-real-ip", b"198.51.100.9")])) == "ip:198.51.100.9"
    assert relay.client_identity(_request([])) == "ip:192.0.2.5"
