"""Testes dos builders de payload da Bot API."""

from __future__ import annotations

import pytest

from api.payload_builders.telegram import build_inline_keyboard, build_send_message_payload
from app.protocols.models import InlineButton, OutboundMessageRequest


def test_inline_keyboard_rows_of_two() -> None:
    buttons = (
        InlineButton("A", "a"),
        InlineButton("B", "b"),
        InlineButton("Site", "https://real1editor.example", is_url=True),
    )

    keyboard = build_inline_keyboard(buttons)

    assert keyboard == {
        "inline_keyboard": [
            [{"text": "A", "callback_data": "a"}, {"text": "B", "callback_data": "b"}],
            [{"text": "Site", "url": "https://real1editor.example"}],
        ]
    }


def test_send_message_without_buttons_or_parse_mode() -> None:
    payload = build_send_message_payload(
        OutboundMessageRequest(chat_id=7, text="plain", parse_mode=None)
    )

    assert payload == {
        "chat_id": 7,
        "text": "plain",
        "disable_web_page_preview": True,
        "disable_notification": False,
    }


@pytest.mark.parametrize(
    "request_",
    [
        OutboundMessageRequest(chat_id=7, text=""),
        OutboundMessageRequest(chat_id="", text="x"),
    ],
)
def test_send_message_requires_text_and_chat(request_: OutboundMessageRequest) -> None:
    with pytest.raises(ValueError):
        build_send_message_payload(request_)
