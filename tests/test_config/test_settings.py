"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    BaseSettings,
    RateLimitSettings,
    SessionSettings,
    TelegramSettings,
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
    get_telegram_settings,
)

_GETTERS = (
    get_base_settings,
    get_rate_limit_settings,
    get_session_settings,
    get_telegram_settings,
)


@pytest.fixture(autouse=True)
def _clear_caches() -> Iterator[None]:
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


class TestBaseSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "DEBUG", "REDIS_URL", "CORS_ALLOW_ORIGINS", "MAX_BODY_BYTES"):
            monkeypatch.delenv(name, raising=False)

        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.cors_allow_origins == ("*",)
        assert settings.max_body_bytes == 1_048_576
        assert settings.expose_error_details is True
        assert settings.validate() == []

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")

        settings = get_base_settings()

        assert settings.is_production is True
        assert settings.expose_error_details is False
        assert settings.cors_allow_origins == ("https://a.example", "https://b.example")

    def test_non_positive_body_limit_is_reported(self) -> None:
        errors = BaseSettings(max_body_bytes=0).validate()
        assert errors == ["MAX_BODY_BYTES deve ser > 0"]


class TestTelegramSettings:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "1:abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100")
        monkeypatch.setenv("PUBLIC_BASE_URL", "https://relay.example/")
        monkeypatch.delenv("TELEGRAM_API_BASE_URL", raising=False)

        settings = get_telegram_settings()

        assert settings.is_configured is True
        assert settings.webhook_url == "https://relay.example/api/telegram"

    def test_validate_reports_missing_credentials(self) -> None:
        errors = TelegramSettings().validate()

        assert "TELEGRAM_BOT_TOKEN não configurado" in errors
        assert "TELEGRAM_CHAT_ID não configurado" in errors

    def test_invalid_parse_mode(self) -> None:
        errors = TelegramSettings(bot_token="t", chat_id="c", parse_mode="RST").validate()
        assert errors == ["TELEGRAM_PARSE_MODE inválido: RST"]

    def test_unknown_timezone_is_reported(self) -> None:
        errors = TelegramSettings(bot_token="t", chat_id="c", timezone="Mars/Olympus").validate()
        assert errors == ["TRANSMISSION_TIMEZONE inválido: Mars/Olympus"]


class TestRateLimitAndSession:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "RATE_LIMIT_WINDOW_SECONDS",
            "RATE_LIMIT_MAX_REQUESTS",
            "RATE_LIMIT_BACKEND",
            "SESSION_TTL_SECONDS",
            "SESSION_STORE_BACKEND",
        ):
            monkeypatch.delenv(name, raising=False)

        rate = get_rate_limit_settings()
        session = get_session_settings()

        assert (rate.window_seconds, rate.max_requests, rate.backend) == (60, 10, "memory")
        assert (session.ttl_seconds, session.sweep_interval_seconds) == (86400, 3600)
        assert session.max_log_entries == 50

    def test_memory_rate_limit_flagged_in_production(self) -> None:
        errors = RateLimitSettings().validate(BaseSettings(environment="production"))
        assert any("RATE_LIMIT_BACKEND=memory" in e for e in errors)

    def test_redis_backend_requires_url(self) -> None:
        errors = SessionSettings(store_backend="redis").validate(BaseSettings())
        assert errors == ["SESSION_STORE_BACKEND=redis requer REDIS_URL configurado"]

    def test_unknown_backend_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESSION_STORE_BACKEND", "firestore")
        assert get_session_settings().store_backend == "memory"
