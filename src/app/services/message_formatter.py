"""Formatação das transmissões enviadas ao chat da equipe.

Função pura: mesmo payload + mesmo `now` geram exatamente o mesmo texto.
Campos ausentes viram texto padrão, nunca exceção. Valores do usuário são
escapados para o Markdown legado do Telegram.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from app.domain.transmission import TransmissionSource, TransmissionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from app.domain.transmission import RelayPayload

DEFAULT_TIMEZONE = "Africa/Addis_Ababa"

_MARKDOWN_SPECIALS = ("\\", "_", "*", "`", "[")


def escape_markdown(value: str) -> str:
    """Escapa caracteres de entidade do Markdown legado."""
    for char in _MARKDOWN_SPECIALS:
        value = value.replace(char, f"\\{char}")
    return value


def _field(value: str | None, fallback: str) -> str:
    return escape_markdown(value) if value else fallback


def format_timestamp(now: datetime, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Data completa + hora média em inglês, ex: `Monday, October 19, 2026 at 8:30:00 PM`."""
    local = now.astimezone(ZoneInfo(timezone))
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local:%A}, {local:%B} {local.day}, {local.year} "
        f"at {hour}:{local:%M:%S} {meridiem}"
    )


def _project_body(payload: RelayPayload) -> list[str]:
    return [
        "🎬 *NEW PROJECT REQUEST*",
        f"├ *Client*: {_field(payload.name, 'Anonymous Quantum Being')}",
        f"├ *Email*: {_field(payload.email, 'Not provided')}",
        "├ *Project Details*:",
        f"└ {_field(payload.message, 'No details provided')}",
    ]


def _feedback_body(payload: RelayPayload) -> list[str]:
    return [
        "💬 *CLIENT FEEDBACK*",
        f"├ *From*: {_field(payload.name, 'Anonymous')}",
        "├ *Message*:",
        f"└ {_field(payload.message, 'Empty feedback')}",
    ]


def _subscribe_body(payload: RelayPayload) -> list[str]:
    return [
        "📧 *NEWSLETTER SUBSCRIPTION*",
        f"├ *Email*: {_field(payload.email, 'Invalid email')}",
        "├ *Status*: 🟢 ACTIVE",
        "└ *Frequency*: Quantum Updates Enabled",
    ]


# Um template por tipo; TransmissionType é fechado, então a tabela é exaustiva
BODY_TEMPLATES: dict[TransmissionType, Callable[[RelayPayload], list[str]]] = {
    TransmissionType.PROJECT: _project_body,
    TransmissionType.FEEDBACK: _feedback_body,
    TransmissionType.SUBSCRIBE: _subscribe_body,
}


def format_transmission(
    payload: RelayPayload,
    now: datetime,
    *,
    timezone: str = DEFAULT_TIMEZONE,
) -> str:
    """Monta o texto da transmissão (cabeçalho, corpo do tipo, rodapé).

    Args:
        payload: Transmissão validada.
        now: Momento da transmissão (injetado para determinismo).
        timezone: Fuso do carimbo de tempo.

    Returns:
        Texto multi-linha em Markdown legado.
    """
    source_label = payload.source.label
    is_miniapp = payload.source is TransmissionSource.MINIAPP
    lines = [
        "🌌 *QUANTUM TRANSMISSION INITIATED* 🌌",
        f"⏰ *Time*: {format_timestamp(now, timezone)}",
        f"📡 *Transmission Type*: {payload.type.value.upper()}",
        f"🚀 *Source*: {source_label}",
        "",
        *BODY_TEMPLATES[payload.type](payload),
        "",
        "---",
        "⚡ *REAL1EDITOR QUANTUM SYSTEMS* ⚡",
        "📍 Neo-Addis | 3045 Era | Video Editing Elite",
        f"🌐 {'Telegram Mini App' if is_miniapp else 'Web Portal'}",
    ]
    return "\n".join(lines)
