"""Rotas do canal Telegram."""

from api.routes.telegram.router import router

__all__ = ["router"]
