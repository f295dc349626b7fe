"""Detecção de interesses por palavra-chave.

Casamento por substring no texto em minúsculas (não tokeniza):
"videoclip" casa com "video". A ordem da tabela não define a ordem dos
interesses na sessão; vale a ordem de primeira ocorrência entre mensagens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.sessions.models import UserSession

# substring (minúscula) -> rótulo de interesse
KEYWORD_INTERESTS: tuple[tuple[str, str], ...] = (
    ("video", "VideoEditing"),
    ("edit", "VideoEditing"),
    ("color", "ColorGrading"),
    ("colour", "ColorGrading"),
    ("grading", "ColorGrading"),
    ("motion", "MotionGraphics"),
    ("animation", "MotionGraphics"),
    ("vfx", "VisualEffects"),
    ("effect", "VisualEffects"),
    ("sound", "SoundDesign"),
    ("audio", "SoundDesign"),
    ("music", "MusicVideos"),
    ("wedding", "Weddings"),
    ("commercial", "Commercials"),
    ("youtube", "YouTubeContent"),
    ("reel", "ShortForm"),
    ("tiktok", "ShortForm"),
)


def match_interests(text: str) -> list[str]:
    """Rótulos presentes no texto, sem repetição, na ordem da tabela."""
    lowered = (text or "").lower()
    labels: list[str] = []
    for keyword, label in KEYWORD_INTERESTS:
        if keyword in lowered and label not in labels:
            labels.append(label)
    return labels


def apply_interests(session: UserSession, text: str) -> list[str]:
    """Adiciona à sessão os interesses novos encontrados no texto.

    Returns:
        Rótulos efetivamente adicionados.
    """
    return [label for label in match_interests(text) if session.add_interest(label)]
