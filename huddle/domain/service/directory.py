"""Participant directory interface."""

from huddle.domain.value import ParticipantId


class Directory:
    """Maps participant identifiers to display names.

    Only used to fill in message text, never for booking logic.
    """

    def resolve_display_name(self, participant: ParticipantId) -> str:
        """Resolve a participant's display name.

        Args:
            participant: Participant identifier

        Returns:
            Human-readable name
        """
        raise NotImplementedError
