"""Dispatcher determinístico do bot (comandos, botões e palavras-chave).

Resolução do disparador, nesta ordem:
1. comando "/" explícito (sufixo "@bot" ignorado);
2. callback_data de botão inline;
3. grupos de palavras-chave em KEYWORD_PRIORITY (primeiro que casar vence);
4. menu padrão.

Handlers só leem a sessão recebida; não há efeito colateral fora dela.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.constants.bot_replies import (
    BOT_REPLIES,
    DEFAULT_REPLY_KEY,
    KEYWORD_PRIORITY,
    BotReplyConfig,
)
from app.services.message_formatter import escape_markdown

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import InboundUpdate, InlineButton
    from app.sessions.models import UserSession

logger = logging.getLogger(__name__)

TriggerKind = Literal["command", "callback", "keyword", "default"]


@dataclass(frozen=True, slots=True)
class Trigger:
    """Disparador resolvido para um update."""

    kind: TriggerKind
    key: str


@dataclass(frozen=True, slots=True)
class BotResponse:
    """Resposta estruturada do bot."""

    text: str
    buttons: tuple[InlineButton, ...] = ()


_REPLIES_BY_KEY: dict[str, BotReplyConfig] = {reply.key: reply for reply in BOT_REPLIES}


def _build_index(attr: str) -> dict[str, str]:
    index: dict[str, str] = {}
    for reply in BOT_REPLIES:
        for trigger in getattr(reply, attr):
            index[trigger.lower()] = reply.key
    return index


_COMMAND_INDEX = _build_index("commands")
_CALLBACK_INDEX = _build_index("callbacks")


def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    # palavra inteira, aceitando flexões simples ("prices", "booking")
    alternatives = "|".join(re.escape(kw) for kw in keywords)
    return re.compile(rf"\b(?:{alternatives})(?:s|es|d|ed|ing)?\b")


_KEYWORD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (key, _keyword_pattern(_REPLIES_BY_KEY[key].keywords)) for key in KEYWORD_PRIORITY
)


def _humanize(label: str) -> str:
    return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", label)


def _static_handler(session: UserSession, trigger: Trigger) -> BotResponse:
    reply = _REPLIES_BY_KEY[trigger.key]
    return BotResponse(text=reply.text, buttons=reply.buttons)


def _menu_handler(session: UserSession, trigger: Trigger) -> BotResponse:
    reply = _REPLIES_BY_KEY["menu"]
    text = reply.text
    if session.interests:
        interests = ", ".join(_humanize(label) for label in session.interests)
        text = f"{text}\n\n🎯 You asked about: {interests}"
    return BotResponse(text=text, buttons=reply.buttons)


def _greeting_handler(session: UserSession, trigger: Trigger) -> BotResponse:
    reply = _REPLIES_BY_KEY["greeting"]
    name = escape_markdown(session.display_name.strip())
    greeting = f"Hey {name}! 👋" if name else "Hey there! 👋"
    return BotResponse(text=f"{greeting} {reply.text}", buttons=reply.buttons)


HANDLERS: dict[str, Callable[[UserSession, Trigger], BotResponse]] = {
    "menu": _menu_handler,
    "pricing": _static_handler,
    "portfolio": _static_handler,
    "services": _static_handler,
    "contact": _static_handler,
    "book": _static_handler,
    "greeting": _greeting_handler,
    "thanks": _static_handler,
}


def _extract_command(text: str) -> str | None:
    raw = (text or "").strip()
    if not raw.startswith("/"):
        return None
    first = raw.split()[0].lower()
    return first.split("@", 1)[0]


def match_keyword(text: str) -> str | None:
    """Primeiro grupo de palavras-chave (em ordem de prioridade) presente no texto."""
    lowered = (text or "").lower()
    for key, pattern in _KEYWORD_PATTERNS:
        if pattern.search(lowered):
            return key
    return None


def resolve_trigger(update: InboundUpdate) -> Trigger:
    """Converte o update em disparador."""
    if update.kind == "callback":
        key = _CALLBACK_INDEX.get((update.callback_data or "").lower())
        if key:
            return Trigger("callback", key)
        return Trigger("default", DEFAULT_REPLY_KEY)

    command = _extract_command(update.text)
    if command:
        key = _COMMAND_INDEX.get(command)
        if key:
            return Trigger("command", key)
        return Trigger("default", DEFAULT_REPLY_KEY)

    key = match_keyword(update.text)
    if key:
        return Trigger("keyword", key)
    return Trigger("default", DEFAULT_REPLY_KEY)


def dispatch(session: UserSession, update: InboundUpdate) -> BotResponse:
    """Resolve o disparador do update e executa o handler correspondente."""
    trigger = resolve_trigger(update)
    logger.debug(
        "bot_trigger_resolved",
        extra={"trigger_kind": trigger.kind, "trigger_key": trigger.key},
    )
    return HANDLERS[trigger.key](session, trigger)
