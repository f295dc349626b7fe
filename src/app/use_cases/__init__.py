"""Casos de uso do relay."""

from app.use_cases.handle_inbound_update import HandleInboundUpdateUseCase
from app.use_cases.relay_transmission import RelayResult, RelayTransmissionUseCase

__all__ = [
    "HandleInboundUpdateUseCase",
    "RelayResult",
    "RelayTransmissionUseCase",
]
