"""Testes do SessionTracker, dos interesses e da serialização de sessão."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.infra.stores.memory_stores import MemorySessionStore
from app.sessions.interests import match_interests
from app.sessions.models import UserSession
from app.sessions.tracker import SessionTracker

T0 = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def tracker() -> SessionTracker:
    return SessionTracker(MemorySessionStore(), ttl_seconds=86400, max_log_entries=50)


class TestTouch:
    """Criação e atualização de sessões."""

    def test_creates_session_on_first_message(self, tracker: SessionTracker) -> None:
        session = tracker.touch("tg:1", T0, "hello", display_name="Abebe")

        assert session.identity == "tg:1"
        assert session.first_seen == T0
        assert session.last_seen == T0
        assert session.query_count == 1
        assert session.display_name == "Abebe"
        assert [e.text for e in session.conversation_log] == ["hello"]

    def test_updates_existing_session(self, tracker: SessionTracker) -> None:
        tracker.touch("tg:1", T0, "hello")
        later = T0 + timedelta(minutes=5)

        session = tracker.touch("tg:1", later, "again")

        assert session.first_seen == T0
        assert session.last_seen == later
        assert session.query_count == 2

    def test_interests_keep_first_occurrence_order(self, tracker: SessionTracker) -> None:
        tracker.touch("tg:1", T0, "I need color grading")
        session = tracker.touch("tg:1", T0 + timedelta(seconds=5), "and motion graphics")

        assert session.interests == ["ColorGrading", "MotionGraphics"]

    def test_interests_are_not_duplicated(self, tracker: SessionTracker) -> None:
        tracker.touch("tg:1", T0, "color please")
        session = tracker.touch("tg:1", T0, "more colour and grading")

        assert session.interests == ["ColorGrading"]

    def test_conversation_log_is_capped(self) -> None:
        tracker = SessionTracker(MemorySessionStore(), max_log_entries=50)
        for i in range(55):
            session = tracker.touch("tg:1", T0 + timedelta(seconds=i), f"msg {i}")

        assert len(session.conversation_log) == 50
        assert session.conversation_log[0].text == "msg 5"
        assert session.conversation_log[-1].text == "msg 54"
        assert session.query_count == 55

    def test_expired_session_is_recreated_on_access(self, tracker: SessionTracker) -> None:
        tracker.touch("tg:1", T0, "video edit")
        later = T0 + timedelta(seconds=86401)

        session = tracker.touch("tg:1", later, "hi")

        assert session.first_seen == later
        assert session.query_count == 1
        assert session.interests == []

    def test_empty_display_name_keeps_previous(self, tracker: SessionTracker) -> None:
        tracker.touch("tg:1", T0, "hi", display_name="Saba")
        session = tracker.touch("tg:1", T0, "hi")

        assert session.display_name == "Saba"


class TestMatchInterests:
    """Casamento por substring."""

    def test_substring_match(self) -> None:
        assert match_interests("Need a VIDEOCLIP cut") == ["VideoEditing"]

    def test_multiple_labels_without_repetition(self) -> None:
        assert match_interests("sound and audio for my wedding reel") == [
            "SoundDesign",
            "Weddings",
            "ShortForm",
        ]

    def test_no_match(self) -> None:
        assert match_interests("good morning") == []


class TestUserSessionSerialization:
    def test_from_dict_restores_session(self) -> None:
        session = UserSession(identity="tg:9", first_seen=T0, last_seen=T0, interests=["Weddings"])
        session.query_count = 3

        restored = UserSession.from_dict(session.to_dict())

        assert restored.identity == "tg:9"
        assert restored.last_seen == T0
        assert restored.interests == ["Weddings"]
        assert restored.query_count == 3
