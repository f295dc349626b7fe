"""Parse e validação inicial do corpo recebido pelo endpoint (sem PII).

O mesmo endpoint recebe updates do Telegram e transmissões do site; a
presença de `update_id` decide o ramo.
"""

from __future__ import annotations

import hmac
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

SECRET_TOKEN_HEADER = "x-telegram-bot-api-secret-token"


class WebhookRequestError(ValueError):
    """Erro base para falhas de parse do corpo."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido ou corpo que não é objeto."""


class InvalidSecretTokenError(WebhookRequestError):
    """Header de secret do webhook ausente ou divergente."""


def parse_request_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo JSON da requisição.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto.
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload


def is_inbound_update(payload: Mapping[str, Any]) -> bool:
    """True quando o corpo é um update do Telegram."""
    return "update_id" in payload


def verify_secret_token(headers: Mapping[str, str], secret: str | None) -> bool:
    """Confere o header de secret enviado pelo Telegram.

    Sem secret configurado a verificação é ignorada.

    Raises:
        InvalidSecretTokenError: Se o header estiver ausente ou não conferir.

    Returns:
        True se verificou, False se ignorou.
    """
    if not secret:
        return False

    received = headers.get(SECRET_TOKEN_HEADER) or ""
    if not hmac.compare_digest(received.encode(), secret.encode()):
        raise InvalidSecretTokenError("invalid_secret_token")
    return True
