"""Connectors — adapters de borda para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (cliente HTTP, erros e parse do webhook)
"""

__all__: list[str] = []
