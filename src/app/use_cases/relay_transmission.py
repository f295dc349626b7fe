"""Use case: relay de transmissões do site/mini app para o chat da equipe.

Fluxo:
1. Valida tipo e campos obrigatórios (400, sem chamada externa)
2. Confere credenciais do servidor (500 genérico)
3. Formata e envia via Bot API, sem retry
4. Mapeia falhas da Bot API: 400->400, 401/403->500, outras->502;
   falha de rede->503
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.transmission import TransmissionType, parse_relay_payload
from app.protocols.models import OutboundMessageRequest
from app.services.message_formatter import DEFAULT_TIMEZONE, format_transmission
from utils.errors import ClientInputError, ConfigurationError, RelayError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import OutboundMessageResponse
    from app.protocols.outbound_sender import OutboundSenderProtocol

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Quantum transmission successful! Data received across dimensions."

# Códigos da Bot API que indicam credencial/permissão inválida
CONFIGURATION_ERROR_CODES = frozenset({401, 403})


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_iso_timestamp(moment: datetime) -> str:
    """ISO 8601 em UTC com milissegundos e sufixo Z."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_transmission_id(moment: datetime) -> str:
    """ID baseado no tempo: `TX-<epoch ms>`."""
    return f"TX-{int(moment.timestamp() * 1000)}"


def map_send_failure(response: OutboundMessageResponse) -> RelayError:
    """Converte rejeição da Bot API no erro HTTP local.

    401/403 viram 500 genérico para não revelar a validade da credencial.
    """
    if response.error_code == 400:
        return ClientInputError(
            "Invalid transmission format. Please check your data.",
            details=response.description,
        )
    if response.error_code in CONFIGURATION_ERROR_CODES:
        return ConfigurationError(details="Server configuration error")
    return UpstreamError(
        details=response.description or "Unknown Telegram API error",
        upstream_code=response.error_code,
    )


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resultado de uma transmissão aceita pelo Telegram."""

    transmission_id: str
    type: TransmissionType
    timestamp: datetime
    telegram_message_id: int | None

    def to_body(self) -> dict[str, Any]:
        """Corpo JSON de sucesso (contrato público)."""
        return {
            "status": "success",
            "message": SUCCESS_MESSAGE,
            "transmissionId": self.transmission_id,
            "type": self.type.value,
            "timestamp": format_iso_timestamp(self.timestamp),
            "telegramMessageId": self.telegram_message_id,
        }


class RelayTransmissionUseCase:
    """Valida, formata e encaminha uma transmissão.

    Args:
        sender: Cliente da Bot API; None quando o token não está configurado.
        chat_id: Chat de destino das transmissões.
        parse_mode: Modo de formatação do Telegram.
        timezone: Fuso do carimbo de tempo da mensagem.
        clock: Fonte de tempo (injetável para testes).
    """

    def __init__(
        self,
        sender: OutboundSenderProtocol | None,
        chat_id: str,
        *,
        parse_mode: str = "Markdown",
        timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._sender = sender
        self._chat_id = chat_id
        self._parse_mode = parse_mode
        self._timezone = timezone
        self._clock = clock

    async def execute(self, data: Any) -> RelayResult:
        """Executa o relay de um corpo já parseado.

        Raises:
            ClientInputError: Corpo inválido ou rejeitado pela Bot API (400).
            ConfigurationError: Credenciais ausentes ou rejeitadas (500).
            UpstreamError: Falha não reconhecida da Bot API (502).
            NetworkError: Bot API inacessível (503).
        """
        payload = parse_relay_payload(data)

        if self._sender is None or not self._chat_id:
            logger.error(
                "relay_missing_configuration",
                extra={"has_token": self._sender is not None, "has_chat_id": bool(self._chat_id)},
            )
            raise ConfigurationError(details="Server configuration incomplete")

        now = self._clock()
        text = format_transmission(payload, now, timezone=self._timezone)
        response = await self._sender.send_message(
            OutboundMessageRequest(
                chat_id=self._chat_id,
                text=text,
                parse_mode=self._parse_mode,
            )
        )

        if not response.ok:
            logger.error(
                "relay_rejected_by_telegram",
                extra={
                    "error_code": response.error_code,
                    "description": response.description,
                    "transmission_type": payload.type.value,
                    "source": payload.source.value,
                },
            )
            raise map_send_failure(response)

        result = RelayResult(
            transmission_id=generate_transmission_id(now),
            type=payload.type,
            timestamp=now,
            telegram_message_id=response.message_id,
        )
        logger.info(
            "relay_succeeded",
            extra={
                "transmission_type": payload.type.value,
                "source": payload.source.value,
                "message_id": response.message_id,
                "transmission_id": result.transmission_id,
            },
        )
        return result
