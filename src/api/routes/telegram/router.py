"""Router do canal Telegram — relay e webhook do bot no mesmo path."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.telegram.relay import router as relay_router
from config.settings import RELAY_PATH

router = APIRouter()

# Rotas do relay são declaradas com path vazio; o prefixo fica aqui
router.include_router(relay_router, prefix=RELAY_PATH)
