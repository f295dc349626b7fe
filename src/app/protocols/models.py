"""Modelos de contrato entre camadas (app <-> api).

Estruturas neutras: não dependem de httpx nem do formato de wire do
Telegram além do necessário para o relay.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

UpdateKind = Literal["message", "command", "callback"]


@dataclass(frozen=True, slots=True)
class InlineButton:
    """Botão inline de resposta.

    Atributos:
        label: Texto exibido.
        action: callback_data enviado de volta ao webhook, ou URL quando
            `is_url` for True.
        is_url: Botão abre link em vez de gerar callback.
    """

    label: str
    action: str
    is_url: bool = False


@dataclass(frozen=True, slots=True)
class InboundUpdate:
    """Update do Telegram já normalizado.

    Atributos:
        update_id: ID do update (dedupe/log).
        identity: Chave do usuário ("tg:<id>").
        chat_id: Chat onde a resposta deve ser enviada.
        kind: message | command | callback.
        text: Texto da mensagem (vazio para callbacks).
        display_name: Nome do usuário para saudação.
        callback_data: Identificador do botão pressionado.
        callback_query_id: ID para answerCallbackQuery.
    """

    update_id: int
    identity: str
    chat_id: int
    kind: UpdateKind
    text: str = ""
    display_name: str = ""
    callback_data: str | None = None
    callback_query_id: str | None = None

    @property
    def trigger_text(self) -> str:
        """Texto registrado no log da sessão."""
        if self.kind == "callback":
            return f"[button] {self.callback_data or ''}".strip()
        return self.text


@dataclass(frozen=True, slots=True)
class OutboundMessageRequest:
    """Pedido de envio de mensagem (sendMessage)."""

    chat_id: str | int
    text: str
    parse_mode: str | None = "Markdown"
    buttons: tuple[InlineButton, ...] = field(default_factory=tuple)
    disable_web_page_preview: bool = True
    disable_notification: bool = False


@dataclass(frozen=True, slots=True)
class OutboundMessageResponse:
    """Resultado do envio conforme a Bot API.

    Atributos:
        ok: Bot API aceitou a chamada.
        message_id: ID da mensagem criada (quando ok).
        error_code: Código de erro da Bot API (quando não ok).
        description: Descrição do erro da Bot API.
    """

    ok: bool
    message_id: int | None = None
    error_code: int | None = None
    description: str | None = None
