"""API — camada de borda do relay.

Responsabilidades:
- Receber requests do site, do mini app e do Telegram
- Validar corpo e secret do webhook
- Normalizar updates para modelos internos
- Construir payloads e chamar a Bot API

Subpastas:
- connectors/: cliente HTTP da Bot API e parse do webhook
- normalizers/: updates externos -> modelos internos
- payload_builders/: payloads da Bot API
- routes/: endpoints HTTP (relay, health)

NÃO PODE conter: regras de sessão, rate limit, formatação de mensagens.
"""
