"""Respostas fixas do bot (comandos "/", botões inline e palavras-chave).

Cada resposta declara seus disparadores. A prioridade entre grupos de
palavras-chave é dada por KEYWORD_PRIORITY, não pela ordem de BOT_REPLIES.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.protocols.models import InlineButton

MENU_BUTTONS: tuple[InlineButton, ...] = (
    InlineButton("💰 Pricing", "pricing"),
    InlineButton("🎞 Portfolio", "portfolio"),
    InlineButton("🛠 Services", "services"),
    InlineButton("📞 Contact", "contact"),
    InlineButton("📅 Book a project", "book"),
)

BACK_TO_MENU = InlineButton("⬅️ Menu", "menu")


@dataclass(frozen=True, slots=True)
class BotReplyConfig:
    """Configuração de uma resposta fixa.

    Atributos:
        key: Identificador interno (também nome do handler).
        text: Corpo da resposta (Markdown legado).
        buttons: Botões inline anexados.
        commands: Comandos "/" que disparam a resposta.
        callbacks: callback_data de botões que disparam a resposta.
        keywords: Palavras (ou começo de palavras) em texto livre.
    """

    key: str
    text: str
    buttons: tuple[InlineButton, ...] = ()
    commands: tuple[str, ...] = ()
    callbacks: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()


BOT_REPLIES: tuple[BotReplyConfig, ...] = (
    BotReplyConfig(
        key="menu",
        text=(
            "🌌 *Real1Editor Quantum Studio*\n"
            "Pick a channel below or just tell me what you are working on."
        ),
        buttons=MENU_BUTTONS,
        commands=("/start", "/menu", "/help"),
        callbacks=("menu",),
    ),
    BotReplyConfig(
        key="pricing",
        text=(
            "💰 *Pricing*\n"
            "├ Short-form / reels: from $50\n"
            "├ YouTube episodes: from $120\n"
            "├ Commercials & music videos: from $300\n"
            "└ Color grading & motion graphics: quoted per project\n\n"
            "Send a brief for an exact quote."
        ),
        buttons=(InlineButton("📅 Book a project", "book"), BACK_TO_MENU),
        commands=("/pricing",),
        callbacks=("pricing",),
        keywords=("price", "pricing", "cost", "how much", "budget", "quote", "rate"),
    ),
    BotReplyConfig(
        key="portfolio",
        text=(
            "🎞 *Portfolio*\n"
            "Showreel, commercials, music videos and documentary cuts are on the "
            "web portal. Ask for a sample in your niche and we will send it."
        ),
        buttons=(InlineButton("💰 Pricing", "pricing"), BACK_TO_MENU),
        commands=("/portfolio",),
        callbacks=("portfolio",),
        keywords=("portfolio", "showreel", "sample", "example", "previous work", "your work"),
    ),
    BotReplyConfig(
        key="services",
        text=(
            "🛠 *Services*\n"
            "├ Video editing (long & short form)\n"
            "├ Color grading\n"
            "├ Motion graphics & titles\n"
            "├ Sound design & mixing\n"
            "└ VFX clean-up"
        ),
        buttons=(InlineButton("🎞 Portfolio", "portfolio"), BACK_TO_MENU),
        commands=("/services",),
        callbacks=("services",),
        keywords=("service", "offer", "what do you do", "editing", "grading", "motion"),
    ),
    BotReplyConfig(
        key="contact",
        text=(
            "📞 *Contact*\n"
            "Write here any time, or use the form on the web portal. "
            "We reply within one business day."
        ),
        buttons=(InlineButton("📅 Book a project", "book"), BACK_TO_MENU),
        commands=("/contact",),
        callbacks=("contact",),
        keywords=("contact", "email", "phone", "reach", "call", "talk"),
    ),
    BotReplyConfig(
        key="book",
        text=(
            "📅 *Book a project*\n"
            "Tell us the format, the footage length and your deadline. "
            "A project request from the mini app lands straight with the editors."
        ),
        buttons=(BACK_TO_MENU,),
        commands=("/book",),
        callbacks=("book",),
        keywords=("book", "schedule", "appointment", "hire", "start a project", "deadline"),
    ),
    BotReplyConfig(
        key="greeting",
        text="Welcome to Real1Editor. How can we help with your footage today?",
        buttons=MENU_BUTTONS,
        keywords=("hi", "hello", "hey", "good morning", "good evening", "selam"),
    ),
    BotReplyConfig(
        key="thanks",
        text="Anytime! 🙌 Tap *Menu* whenever you need us again.",
        buttons=(BACK_TO_MENU,),
        keywords=("thank", "thx", "appreciate"),
    ),
)

# Ordem fixa de teste das palavras-chave; a primeira que casar vence
KEYWORD_PRIORITY: tuple[str, ...] = (
    "pricing",
    "portfolio",
    "services",
    "contact",
    "book",
    "greeting",
    "thanks",
)

DEFAULT_REPLY_KEY = "menu"

# Lista publicada via setMyCommands (sem a barra)
BOT_COMMANDS: tuple[tuple[str, str], ...] = (
    ("start", "Open the studio menu"),
    ("pricing", "Editing packages and rates"),
    ("portfolio", "Recent work"),
    ("services", "What we edit"),
    ("contact", "Reach the team"),
    ("book", "Start a project"),
    ("help", "Show the menu"),
)
