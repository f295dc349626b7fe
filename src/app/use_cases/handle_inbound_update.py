"""Use case: resposta do bot a um update recebido pelo webhook.

Rate limit por usuário, registro na sessão, dispatch e envio da resposta
ao chat de origem. Exceções sobem para o chamador; o endpoint as registra
e confirma o update mesmo assim.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import OutboundMessageRequest
from app.services.command_dispatcher import dispatch
from app.use_cases.relay_transmission import utc_now

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from app.protocols.models import InboundUpdate
    from app.protocols.outbound_sender import OutboundSenderProtocol
    from app.services.command_dispatcher import BotResponse
    from app.services.rate_limiter import RateLimiter
    from app.sessions.tracker import SessionTracker

logger = logging.getLogger(__name__)


class HandleInboundUpdateUseCase:
    """Processa um InboundUpdate e responde no chat de origem.

    Args:
        tracker: Registro de sessões do bot.
        rate_limiter: Limite por usuário.
        sender: Cliente da Bot API; None quando o token não está configurado.
        parse_mode: Modo de formatação das respostas.
        clock: Fonte de tempo.
    """

    def __init__(
        self,
        tracker: SessionTracker,
        rate_limiter: RateLimiter,
        sender: OutboundSenderProtocol | None,
        *,
        parse_mode: str = "Markdown",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._tracker = tracker
        self._rate_limiter = rate_limiter
        self._sender = sender
        self._parse_mode = parse_mode
        self._clock = clock

    async def execute(self, update: InboundUpdate) -> BotResponse | None:
        """Responde ao update.

        Returns:
            Resposta do dispatcher, ou None se o usuário excedeu o limite.
        """
        now = self._clock()
        if not self._rate_limiter.allow(update.identity, now):
            logger.info(
                "inbound_update_rate_limited",
                extra={"update_id": update.update_id, "identity": update.identity},
            )
            return None

        session = self._tracker.touch(
            update.identity,
            now,
            update.trigger_text,
            display_name=update.display_name,
        )
        response = dispatch(session, update)

        if self._sender is None:
            logger.warning(
                "inbound_reply_skipped",
                extra={"update_id": update.update_id, "reason": "missing_bot_token"},
            )
            return response

        if update.callback_query_id:
            await self._sender.answer_callback_query(update.callback_query_id)

        result = await self._sender.send_message(
            OutboundMessageRequest(
                chat_id=update.chat_id,
                text=response.text,
                parse_mode=self._parse_mode,
                buttons=response.buttons,
            )
        )
        if not result.ok:
            logger.warning(
                "inbound_reply_failed",
                extra={
                    "update_id": update.update_id,
                    "error_code": result.error_code,
                    "description": result.description,
                },
            )
        else:
            logger.info(
                "inbound_reply_sent",
                extra={
                    "update_id": update.update_id,
                    "kind": update.kind,
                    "query_count": session.query_count,
                },
            )
        return response
