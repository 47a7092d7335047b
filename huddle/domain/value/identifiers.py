"""Strongly typed identifiers for Huddle domain entities.

Bookings and invitations are identified by UUIDs minted by the engines.
Participants and resources come from external collaborators (the directory
and the resource catalog) and keep their string identifiers.
"""

from typing import NewType
from uuid import UUID

BookingId = NewType("BookingId", UUID)
InvitationId = NewType("InvitationId", UUID)

# Externally supplied identifiers
ParticipantId = NewType("ParticipantId", str)
ResourceId = NewType("ResourceId", str)
