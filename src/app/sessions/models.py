"""Modelo de sessão efêmera do bot.

Uma sessão por identidade (usuário Telegram). Nunca persistida além do TTL;
perdida em reinício do processo quando o backend é memória.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class ConversationEntry:
    """Entrada do log de conversa.

    Atributos:
        timestamp: Momento da mensagem
        text: Texto recebido (ou callback do botão)
    """

    timestamp: datetime
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Serializa entrada para persistência."""
        return {"timestamp": self.timestamp.isoformat(), "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversationEntry:
        """Deserializa entrada de persistência."""
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            text=data.get("text", ""),
        )


@dataclass(slots=True)
class UserSession:
    """Registro de interação de um usuário com o bot.

    Atributos:
        identity: Chave estável do usuário
        display_name: Nome exibido no Telegram
        first_seen: Primeira mensagem recebida
        last_seen: Última mensagem recebida (base do TTL)
        interests: Rótulos de interesse em ordem de primeira ocorrência, sem repetição
        query_count: Mensagens recebidas
        conversation_log: Últimas mensagens (limitado pelo tracker)
    """

    identity: str
    first_seen: datetime
    last_seen: datetime
    display_name: str = ""
    interests: list[str] = field(default_factory=list)
    query_count: int = 0
    conversation_log: list[ConversationEntry] = field(default_factory=list)

    def add_interest(self, label: str) -> bool:
        """Adiciona interesse se ainda ausente. Retorna True se adicionou."""
        if label in self.interests:
            return False
        self.interests.append(label)
        return True

    def is_expired(self, now: datetime, ttl_seconds: int) -> bool:
        return (now - self.last_seen).total_seconds() > ttl_seconds

    def to_dict(self) -> dict[str, Any]:
        """Serializa sessão para persistência."""
        return {
            "identity": self.identity,
            "display_name": self.display_name,
            "first_seen": self.first_seen.isoformat(),
            "last_seen": self.last_seen.isoformat(),
            "interests": list(self.interests),
            "query_count": self.query_count,
            "conversation_log": [entry.to_dict() for entry in self.conversation_log],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserSession:
        """Deserializa sessão de persistência."""
        return cls(
            identity=data["identity"],
            display_name=data.get("display_name", ""),
            first_seen=datetime.fromisoformat(data["first_seen"]),
            last_seen=datetime.fromisoformat(data["last_seen"]),
            interests=list(dict.fromkeys(data.get("interests", []))),
            query_count=int(data.get("query_count", 0)),
            conversation_log=[
                ConversationEntry.from_dict(item) for item in data.get("conversation_log", [])
            ],
        )
