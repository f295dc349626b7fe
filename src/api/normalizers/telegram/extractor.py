"""Extrator de payloads Telegram Bot API.

Estrutura do webhook Telegram (subconjunto usado):
- update_id
- message: message_id, from, chat, text
- callback_query: id, from, data, message.chat

Campos desconhecidos são ignorados.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TelegramUser(BaseModel):
    """Remetente (`from`)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: str | None = None
    username: str | None = None

    @property
    def display_name(self) -> str:
        full = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full or (self.username or "")


class TelegramChat(BaseModel):
    """Chat de origem."""

    model_config = ConfigDict(extra="ignore")

    id: int
    type: str = "private"


class TelegramMessage(BaseModel):
    """Mensagem recebida."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_id: int
    chat: TelegramChat
    from_user: TelegramUser | None = Field(default=None, alias="from")
    text: str | None = None
    caption: str | None = None


class TelegramCallbackQuery(BaseModel):
    """Toque em botão inline."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    from_user: TelegramUser = Field(alias="from")
    data: str | None = None
    message: TelegramMessage | None = None


class TelegramUpdate(BaseModel):
    """Update do webhook."""

    model_config = ConfigDict(extra="ignore")

    update_id: int
    message: TelegramMessage | None = None
    edited_message: TelegramMessage | None = None
    callback_query: TelegramCallbackQuery | None = None
