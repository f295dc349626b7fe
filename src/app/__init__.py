"""App — casos de uso, serviços e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: relay de transmissões e resposta a updates do bot
- services/: rate limiter, formatter, dispatcher, manutenção
- domain/: tipos de transmissão e janelas de rate limit
- infra/: stores em memória e Redis
- protocols/: contratos entre camadas
- sessions/: registro efêmero de usuários do bot
- observability/: correlation_id nos logs
- constants/: respostas fixas do bot

Padrão: app executa; api adapta; utils apoia.
"""
