"""Transmissões do site/mini app para o chat da equipe.

Define o tipo fechado de transmissão, a origem e o payload validado que
chega ao endpoint de relay. Nada aqui é persistido: o payload é validado,
formatado, encaminhado e descartado.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from utils.errors import ClientInputError


class TransmissionType(StrEnum):
    """Tipos de transmissão aceitos pelo relay."""

    PROJECT = "project"
    FEEDBACK = "feedback"
    SUBSCRIBE = "subscribe"


class TransmissionSource(StrEnum):
    """Origem da transmissão."""

    WEB = "web"
    MINIAPP = "miniapp"

    @property
    def label(self) -> str:
        if self is TransmissionSource.MINIAPP:
            return "Telegram Mini App"
        return "Quantum Web Portal"


# "webapp" é o valor enviado pela versão antiga do mini app
_SOURCE_ALIASES = {"miniapp": TransmissionSource.MINIAPP, "webapp": TransmissionSource.MINIAPP}

# Campos obrigatórios por tipo
REQUIRED_FIELDS: dict[TransmissionType, tuple[str, ...]] = {
    TransmissionType.PROJECT: ("name", "email", "message"),
    TransmissionType.FEEDBACK: (),
    TransmissionType.SUBSCRIBE: (),
}


@dataclass(frozen=True, slots=True)
class RelayPayload:
    """Payload validado de uma transmissão.

    Atributos:
        type: Tipo da transmissão.
        source: Origem (site ou mini app).
        name: Nome informado (opcional).
        email: Email informado (opcional).
        message: Mensagem/detalhes do projeto (opcional).
    """

    type: TransmissionType
    source: TransmissionSource = TransmissionSource.WEB
    name: str | None = None
    email: str | None = None
    message: str | None = None


def _clean(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_source(raw: Any) -> TransmissionSource:
    """Converte origem livre em TransmissionSource (default web)."""
    if not isinstance(raw, str):
        return TransmissionSource.WEB
    return _SOURCE_ALIASES.get(raw.strip().lower(), TransmissionSource.WEB)


def parse_transmission_type(raw: Any) -> TransmissionType:
    """Valida o tipo da transmissão.

    Raises:
        ClientInputError: Se o tipo estiver ausente ou não for suportado.
    """
    try:
        return TransmissionType(raw)
    except ValueError:
        allowed = ", ".join(t.value for t in TransmissionType)
        raise ClientInputError(
            "Unknown transmission type.",
            details=f"type must be one of: {allowed}",
        ) from None


def parse_relay_payload(data: Any) -> RelayPayload:
    """Valida o corpo de uma requisição de relay.

    O campo `project` é aceito como sinônimo de `message`.

    Raises:
        ClientInputError: Corpo não-objeto, tipo desconhecido ou campos
            obrigatórios ausentes.
    """
    if not isinstance(data, dict):
        raise ClientInputError(details="Body must be a JSON object")

    transmission_type = parse_transmission_type(data.get("type"))
    payload = RelayPayload(
        type=transmission_type,
        source=parse_source(data.get("source")),
        name=_clean(data.get("name")),
        email=_clean(data.get("email")),
        message=_clean(data.get("message")) or _clean(data.get("project")),
    )

    missing = [f for f in REQUIRED_FIELDS[transmission_type] if getattr(payload, f) is None]
    if missing:
        raise ClientInputError(
            "Missing required fields.",
            details=f"{transmission_type.value} requires: {', '.join(missing)}",
        )
    return payload
