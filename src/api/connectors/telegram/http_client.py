"""Cliente HTTP para a Telegram Bot API.

- Uma tentativa por chamada: sem retry local, falha volta direto ao chamador
- Timeout do httpx é o único limite de tempo
- Falha de transporte vira NetworkError; `ok: false` vira resposta com erro
- Logs nunca carregam o token (a URL da Bot API o contém)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.telegram.bot_errors import parse_bot_api_error
from api.payload_builders.telegram.text import build_send_message_payload
from app.protocols.models import OutboundMessageResponse
from utils.errors import NetworkError, UpstreamError

if TYPE_CHECKING:
    from app.protocols.models import OutboundMessageRequest
    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)


class TelegramHttpClient:
    """Cliente da Bot API (`{api_base_url}/bot{token}/{method}`).

    Args:
        bot_token: Token do bot.
        api_base_url: URL base da API.
        timeout_seconds: Timeout de cada requisição.
        transport: Transport httpx opcional (testes usam httpx.MockTransport).
    """

    def __init__(
        self,
        bot_token: str,
        api_base_url: str = "https://api.telegram.org",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not bot_token or not bot_token.strip():
            raise ValueError("bot_token é obrigatório")
        self._bot_token = bot_token
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def _method_url(self, method: str) -> str:
        return f"{self._api_base_url}/bot{self._bot_token}/{method}"

    async def call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Executa um método da Bot API e devolve o JSON de resposta.

        A Bot API responde JSON também em erros HTTP (400/401/403...), então o
        status HTTP não é tratado aqui; quem interpreta é `ok`/`error_code`.

        Raises:
            NetworkError: Timeout ou falha de conexão.
            UpstreamError: Resposta sem JSON válido.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._method_url(method), json=payload)
        except httpx.TransportError as exc:
            logger.error(
                "telegram_network_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise NetworkError(details="Network connectivity issue") from exc

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            logger.error(
                "telegram_invalid_response",
                extra={"method": method, "status_code": response.status_code},
            )
            raise UpstreamError(details="Invalid response from Telegram API") from exc

        if not isinstance(data, dict):
            raise UpstreamError(details="Invalid response from Telegram API")
        return data

    async def _call_for_result(
        self,
        method: str,
        payload: dict[str, Any],
    ) -> OutboundMessageResponse:
        data = await self.call(method, payload)
        error = parse_bot_api_error(data)
        if error is not None:
            logger.warning(
                "telegram_api_error",
                extra={
                    "method": method,
                    "error_code": error.error_code,
                    "description": error.description,
                },
            )
            return OutboundMessageResponse(
                ok=False,
                error_code=error.error_code,
                description=error.description,
            )

        result = data.get("result")
        message_id = result.get("message_id") if isinstance(result, dict) else None
        logger.debug("telegram_call_ok", extra={"method": method, "message_id": message_id})
        return OutboundMessageResponse(ok=True, message_id=message_id)

    async def send_message(self, request: OutboundMessageRequest) -> OutboundMessageResponse:
        """Envia mensagem de texto (sendMessage)."""
        return await self._call_for_result("sendMessage", build_send_message_payload(request))

    async def answer_callback_query(
        self,
        callback_query_id: str,
        text: str | None = None,
    ) -> OutboundMessageResponse:
        """Confirma o toque em um botão inline (answerCallbackQuery)."""
        payload: dict[str, Any] = {"callback_query_id": callback_query_id}
        if text:
            payload["text"] = text
        return await self._call_for_result("answerCallbackQuery", payload)

    async def set_webhook(
        self,
        url: str,
        secret_token: str | None = None,
        allowed_updates: list[str] | None = None,
    ) -> OutboundMessageResponse:
        """Registra a URL do webhook (setWebhook)."""
        payload: dict[str, Any] = {"url": url}
        if secret_token:
            payload["secret_token"] = secret_token
        if allowed_updates is not None:
            payload["allowed_updates"] = allowed_updates
        return await self._call_for_result("setWebhook", payload)

    async def delete_webhook(self) -> OutboundMessageResponse:
        """Remove o webhook registrado (deleteWebhook)."""
        return await self._call_for_result("deleteWebhook", {})

    async def set_my_commands(self, commands: list[dict[str, str]]) -> OutboundMessageResponse:
        """Publica a lista de comandos do bot (setMyCommands)."""
        return await self._call_for_result("setMyCommands", {"commands": commands})


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TelegramHttpClient:
    """Factory para criar o cliente com config do ambiente.

    Raises:
        ValueError: Se TELEGRAM_BOT_TOKEN não estiver configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_telegram_settings

    telegram = settings or get_telegram_settings()
    return TelegramHttpClient(
        bot_token=telegram.bot_token,
        api_base_url=telegram.api_base_url,
        timeout_seconds=telegram.request_timeout_seconds,
        transport=transport,
    )
