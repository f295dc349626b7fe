"""Janela do rate limiter por identidade."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True)
class RateLimitEntry:
    """Contador de janela fixa de uma identidade.

    Atributos:
        identity: Chave do chamador (ex: "ip:1.2.3.4", "tg:42").
        window_start: Início da janela corrente.
        count: Requisições aceitas na janela (nunca passa da capacidade).
    """

    identity: str
    window_start: datetime
    count: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "identity": self.identity,
            "window_start": self.window_start.isoformat(),
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RateLimitEntry:
        return cls(
            identity=data["identity"],
            window_start=datetime.fromisoformat(data["window_start"]),
            count=int(data.get("count", 1)),
        )
