"""Testes do formatter de transmissões."""

from __future__ import annotations

from datetime import UTC, datetime

from app.domain.transmission import RelayPayload, TransmissionSource, TransmissionType
from app.services.message_formatter import (
    escape_markdown,
    format_timestamp,
    format_transmission,
)

NOW = datetime(2026, 10, 19, 17, 30, tzinfo=UTC)


class TestFormatTimestamp:
    def test_uses_configured_timezone(self) -> None:
        assert format_timestamp(NOW, "Africa/Addis_Ababa") == (
            "Monday, October 19, 2026 at 8:30:00 PM"
        )

    def test_morning_hour_without_leading_zero(self) -> None:
        morning = datetime(2026, 10, 19, 5, 4, 9, tzinfo=UTC)
        assert format_timestamp(morning, "UTC") == "Monday, October 19, 2026 at 5:04:09 AM"

    def test_midnight_is_twelve_am(self) -> None:
        midnight = datetime(2026, 10, 20, 0, 0, tzinfo=UTC)
        assert format_timestamp(midnight, "UTC").endswith("at 12:00:00 AM")


class TestFormatTransmission:
    """Cabeçalho, corpo por tipo e rodapé."""

    def test_is_deterministic(self) -> None:
        payload = RelayPayload(type=TransmissionType.FEEDBACK, name="Liya", message="Great cut")
        assert format_transmission(payload, NOW) == format_transmission(payload, NOW)

    def test_project_message(self) -> None:
        payload = RelayPayload(
            type=TransmissionType.PROJECT,
            name="Abebe",
            email="abebe@example.com",
            message="Music video, 3 minutes",
        )

        text = format_transmission(payload, NOW)
        lines = text.split("\n")

        assert lines[0] == "🌌 *QUANTUM TRANSMISSION INITIATED* 🌌"
        assert lines[1] == "⏰ *Time*: Monday, October 19, 2026 at 8:30:00 PM"
        assert lines[2] == "📡 *Transmission Type*: PROJECT"
        assert lines[3] == "🚀 *Source*: Quantum Web Portal"
        assert "🎬 *NEW PROJECT REQUEST*" in lines
        assert "├ *Client*: Abebe" in lines
        assert "└ Music video, 3 minutes" in lines
        assert lines[-1] == "🌐 Web Portal"

    def test_miniapp_source_footer(self) -> None:
        payload = RelayPayload(
            type=TransmissionType.SUBSCRIBE,
            source=TransmissionSource.MINIAPP,
            email="fan@example.com",
        )

        text = format_transmission(payload, NOW)

        assert "🚀 *Source*: Telegram Mini App" in text
        assert text.endswith("🌐 Telegram Mini App")
        assert "├ *Email*: fan@example.com" in text
        assert "├ *Status*: 🟢 ACTIVE" in text

    def test_feedback_fallbacks(self) -> None:
        text = format_transmission(RelayPayload(type=TransmissionType.FEEDBACK), NOW)

        assert "├ *From*: Anonymous" in text
        assert "└ Empty feedback" in text

    def test_subscribe_without_email(self) -> None:
        text = format_transmission(RelayPayload(type=TransmissionType.SUBSCRIBE), NOW)
        assert "├ *Email*: Invalid email" in text

    def test_escapes_user_markdown(self) -> None:
        payload = RelayPayload(type=TransmissionType.FEEDBACK, name="a_b*c", message="[x](y)")

        text = format_transmission(payload, NOW)

        assert "├ *From*: a\\_b\\*c" in text
        assert "└ \\[x](y)" in text


def test_escape_markdown_handles_backslash_first() -> None:
    assert escape_markdown("\\_") == "\\\\\\_"
