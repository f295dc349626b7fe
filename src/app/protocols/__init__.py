"""Protocolos e contratos do core da aplicação."""

from .models import (
    InboundUpdate,
    InlineButton,
    OutboundMessageRequest,
    OutboundMessageResponse,
)
from .outbound_sender import OutboundSenderProtocol
from .rate_limit_store import RateLimitStoreProtocol
from .session_store import SessionStoreProtocol

__all__ = [
    "InboundUpdate",
    "InlineButton",
    "OutboundMessageRequest",
    "OutboundMessageResponse",
    "OutboundSenderProtocol",
    "RateLimitStoreProtocol",
    "SessionStoreProtocol",
]
