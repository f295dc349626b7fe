"""Builder de payload sendMessage (texto + teclado inline)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import InlineButton, OutboundMessageRequest

# Botões por linha do teclado inline
BUTTONS_PER_ROW = 2


def build_inline_keyboard(
    buttons: tuple[InlineButton, ...],
    per_row: int = BUTTONS_PER_ROW,
) -> dict[str, Any]:
    """Monta `reply_markup` com os botões em linhas de `per_row`."""
    rows: list[list[dict[str, str]]] = []
    for start in range(0, len(buttons), per_row):
        row = []
        for button in buttons[start : start + per_row]:
            key = "url" if button.is_url else "callback_data"
            row.append({"text": button.label, key: button.action})
        rows.append(row)
    return {"inline_keyboard": rows}


def build_send_message_payload(request: OutboundMessageRequest) -> dict[str, Any]:
    """Constrói o corpo JSON de sendMessage.

    Raises:
        ValueError: Se texto ou chat_id estiverem vazios.
    """
    if not request.text:
        raise ValueError("text é obrigatório")
    if request.chat_id in ("", None):
        raise ValueError("chat_id é obrigatório")

    payload: dict[str, Any] = {
        "chat_id": request.chat_id,
        "text": request.text,
        "disable_web_page_preview": request.disable_web_page_preview,
        "disable_notification": request.disable_notification,
    }
    if request.parse_mode:
        payload["parse_mode"] = request.parse_mode
    if request.buttons:
        payload["reply_markup"] = build_inline_keyboard(request.buttons)
    return payload
