"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- telegram/: sendMessage e teclado inline da Bot API
"""

__all__: list[str] = []
