"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto. Implementações de IO ficam em app/infra/.
"""

from app.services.command_dispatcher import BotResponse, dispatch, resolve_trigger
from app.services.housekeeping import MaintenanceSweeper, SweepResult
from app.services.message_formatter import format_transmission
from app.services.rate_limiter import RateLimiter

__all__ = [
    "BotResponse",
    "MaintenanceSweeper",
    "RateLimiter",
    "SweepResult",
    "dispatch",
    "format_transmission",
    "resolve_trigger",
]
