"""Filters de logging para injeção de contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: real1editor-relay)

Redação:
- Token do bot nunca aparece em mensagem ou campo extra de log.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

# Atributos padrão de LogRecord que não são campos `extra`
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui segredos conhecidos por [REDACTED] na mensagem e nos extras.

    A URL da Bot API embute o token (`/bot<token>/`), então qualquer log de
    erro do httpx pode vazá-lo sem este filtro.

    Args:
        secrets: Valores a redigir (strings vazias são ignoradas).
    """

    def __init__(self, secrets: Iterable[str]) -> None:
        super().__init__()
        self._secrets = tuple(s for s in secrets if s)

    def _redact(self, value: str) -> str:
        for secret in self._secrets:
            value = value.replace(secret, REDACTED)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True

        rendered = record.getMessage()
        redacted = self._redact(rendered)
        if redacted != rendered:
            record.msg = redacted
            record.args = None

        for key, value in list(record.__dict__.items()):
            if key in _STANDARD_ATTRS:
                continue
            if isinstance(value, str):
                setattr(record, key, self._redact(value))
        return True
