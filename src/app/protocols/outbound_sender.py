"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import OutboundMessageRequest, OutboundMessageResponse


class OutboundSenderProtocol(Protocol):
    """Contrato mínimo para enviar mensagens ao Telegram.

    Falha de transporte levanta NetworkError; rejeição da Bot API volta
    como OutboundMessageResponse com ok=False.
    """

    async def send_message(
        self,
        request: OutboundMessageRequest,
    ) -> OutboundMessageResponse: ...

    async def answer_callback_query(
        self,
        callback_query_id: str,
        text: str | None = None,
    ) -> OutboundMessageResponse: ...
