#!/usr/bin/env python3
"""Registra (ou remove) o webhook do bot e publica a lista de comandos.

Uso:
    python scripts/register_webhook.py
    python scripts/register_webhook.py --url https://relay.example.com/api/telegram
    python scripts/register_webhook.py --delete

Lê TELEGRAM_BOT_TOKEN, TELEGRAM_WEBHOOK_SECRET e PUBLIC_BASE_URL do ambiente.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from api.connectors.telegram.http_client import create_telegram_http_client
from app.constants.bot_replies import BOT_COMMANDS
from config.settings import get_telegram_settings

ALLOWED_UPDATES: tuple[str, ...] = ("message", "edited_message", "callback_query")


async def register(url: str, *, delete: bool) -> int:
    settings = get_telegram_settings()
    if not settings.bot_token:
        print("TELEGRAM_BOT_TOKEN não configurado", file=sys.stderr)
        return 2

    client = create_telegram_http_client(settings)

    if delete:
        result = await client.delete_webhook()
        print(f"deleteWebhook ok={result.ok} {result.description or ''}".rstrip())
        return 0 if result.ok else 1

    if not url:
        print("Informe --url ou PUBLIC_BASE_URL", file=sys.stderr)
        return 2

    result = await client.set_webhook(
        url,
        secret_token=settings.webhook_secret or None,
        allowed_updates=list(ALLOWED_UPDATES),
    )
    print(f"setWebhook ok={result.ok} url={url} {result.description or ''}".rstrip())
    if not result.ok:
        return 1

    commands = [{"command": name, "description": text} for name, text in BOT_COMMANDS]
    result = await client.set_my_commands(commands)
    print(f"setMyCommands ok={result.ok} count={len(commands)}")
    return 0 if result.ok else 1


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--url", default="", help="URL pública do endpoint")
    parser.add_argument("--delete", action="store_true", help="Remove o webhook")
    args = parser.parse_args()

    url = args.url
    if not url and not args.delete and get_telegram_settings().public_base_url:
        url = get_telegram_settings().webhook_url
    raise SystemExit(asyncio.run(register(url, delete=args.delete)))


if __name__ == "__main__":
    main()
