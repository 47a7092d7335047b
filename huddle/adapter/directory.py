"""Participant directory implementations."""

from huddle.config import DirectorySettings
from huddle.domain.service.directory import Directory
from huddle.domain.value import ParticipantId


def _fallback_name(participant: ParticipantId) -> str:
    """Local part of an e-mail style identifier, or the identifier itself."""
    return participant.split("@")[0] or participant


class StaticDirectory(Directory):
    """Directory backed by the configured display name mapping."""

    def __init__(self, settings: DirectorySettings) -> None:
        self._display_names = dict(settings.display_names)

    def resolve_display_name(self, participant: ParticipantId) -> str:
        """Resolve a participant's display name."""
        return self._display_names.get(participant) or _fallback_name(participant)


class MockDirectory(Directory):
    """Mock directory for testing with a fixed set of known people."""

    KNOWN_NAMES = {
        "alice@example.com": "Alice White",
        "bob@example.com": "Bob Green",
        "charlie@example.com": "Charlie Black",
        "diana@example.com": "Diana Gray",
        "eve@example.com": "Eve Blue",
    }

    def resolve_display_name(self, participant: ParticipantId) -> str:
        """Resolve a participant's display name."""
        return self.KNOWN_NAMES.get(participant) or _fallback_name(participant)
