"""Registro efêmero de usuários do bot.

Exporta modelos, extração de interesses e o tracker.
"""

from app.sessions.interests import KEYWORD_INTERESTS, match_interests
from app.sessions.models import ConversationEntry, UserSession
from app.sessions.tracker import SessionTracker

__all__ = [
    "KEYWORD_INTERESTS",
    "ConversationEntry",
    "SessionTracker",
    "UserSession",
    "match_interests",
]
