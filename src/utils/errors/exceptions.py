"""Exceções de domínio do relay e falhas recuperáveis de infraestrutura.

Cada erro de relay carrega o status HTTP, a mensagem pública e os detalhes
públicos. Nada aqui deve conter token, chat_id ou payload bruto.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para erros que viram resposta HTTP do endpoint."""

    http_status: int = 500
    default_message: str = "Quantum system overload. Transmission failed."

    def __init__(self, message: str | None = None, details: str | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        """Corpo JSON de erro (contrato público)."""
        body = {"status": "error", "error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ClientInputError(RelayError):
    """Entrada inválida do chamador — nunca retentável."""

    http_status = 400
    default_message = "Invalid transmission data format."


class MethodNotAllowedError(ClientInputError):
    """Método HTTP não suportado pelo endpoint."""

    http_status = 405
    default_message = "Quantum interference detected. Method not allowed."


class PayloadTooLargeError(ClientInputError):
    """Corpo acima do limite aceito pelo endpoint."""

    http_status = 413
    default_message = "Transmission too large."


class RateLimitExceededError(ClientInputError):
    """Identidade excedeu a janela do rate limiter."""

    http_status = 429
    default_message = "Too many transmissions. Please slow down."


class ConfigurationError(RelayError):
    """Credenciais ausentes ou rejeitadas — detalhe apenas em log."""

    http_status = 500
    default_message = "Quantum server misconfigured. Transmission failed."


class UpstreamError(RelayError):
    """API externa alcançada, mas rejeitou a chamada."""

    http_status = 502
    default_message = "Quantum gateway error. Transmission failed."

    def __init__(
        self,
        message: str | None = None,
        details: str | None = None,
        *,
        http_status: int | None = None,
        upstream_code: int | None = None,
    ) -> None:
        super().__init__(message, details)
        if http_status is not None:
            self.http_status = http_status
        self.upstream_code = upstream_code


class NetworkError(RelayError):
    """API externa inacessível — seguro para o chamador retentar."""

    http_status = 503
    default_message = "Quantum network disruption. Please try again."


class InternalError(RelayError):
    """Qualquer outra falha; mensagem redigida fora do modo debug."""

    http_status = 500


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""
