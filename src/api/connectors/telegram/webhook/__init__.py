"""Recebimento do endpoint: parse do corpo e secret do webhook."""

from api.connectors.telegram.webhook.receive import (
    SECRET_TOKEN_HEADER,
    InvalidJsonError,
    InvalidSecretTokenError,
    WebhookRequestError,
    is_inbound_update,
    parse_request_body,
    verify_secret_token,
)

__all__ = [
    "SECRET_TOKEN_HEADER",
    "InvalidJsonError",
    "InvalidSecretTokenError",
    "WebhookRequestError",
    "is_inbound_update",
    "parse_request_body",
    "verify_secret_token",
]
