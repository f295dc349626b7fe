"""correlation_id por requisição, injetado em todos os logs.

ContextVar mantém o valor isolado entre requisições concorrentes.

Uso:
    token = set_correlation_id(correlation_id_from_headers(request.headers))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

CORRELATION_ID_HEADER = "x-correlation-id"
# Cloud/serverless proxies costumam enviar um destes
_FALLBACK_HEADERS = ("x-request-id", "x-vercel-id")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 quando não informado."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def correlation_id_from_headers(headers: Mapping[str, str]) -> str | None:
    """Reaproveita o ID enviado pelo cliente ou pelo proxy, se houver."""
    for name in (CORRELATION_ID_HEADER, *_FALLBACK_HEADERS):
        value = headers.get(name)
        if value:
            return value.strip()[:128]
    return None
