"""Testes do parse do corpo e do secret do webhook."""

from __future__ import annotations

import pytest

from api.connectors.telegram.webhook import (
    SECRET_TOKEN_HEADER,
    InvalidJsonError,
    InvalidSecretTokenError,
    is_inbound_update,
    parse_request_body,
    verify_secret_token,
)


class TestParseRequestBody:
    def test_valid_object(self) -> None:
        assert parse_request_body(b'{"type": "feedback"}') == {"type": "feedback"}

    def test_empty_body_is_empty_object(self) -> None:
        assert parse_request_body(b"") == {}

    @pytest.mark.parametrize("raw", [b"{not json", b"[1, 2]", b"\xff\xfe"])
    def test_invalid(self, raw: bytes) -> None:
        with pytest.raises(InvalidJsonError):
            parse_request_body(raw)


def test_is_inbound_update() -> None:
    assert is_inbound_update({"update_id": 1}) is True
    assert is_inbound_update({"type": "project"}) is False


class TestVerifySecretToken:
    def test_skipped_without_secret(self) -> None:
        assert verify_secret_token({}, "") is False

    def test_valid(self) -> None:
        assert verify_secret_token({SECRET_TOKEN_HEADER: "abc"}, "abc") is True

    @pytest.mark.parametrize("headers", [{}, {SECRET_TOKEN_HEADER: "wrong"}])
    def test_invalid(self, headers: dict[str, str]) -> None:
        with pytest.raises(InvalidSecretTokenError):
            verify_secret_token(headers, "abc")
