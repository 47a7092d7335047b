"""Domain services."""

from .booking_service import BookingService
from .catalog import ResourceCatalog
from .directory import Directory
from .invitation_service import Inbox, InvitationService, Resolution

__all__ = [
    "BookingService",
    "Directory",
    "Inbox",
    "InvitationService",
    "Resolution",
    "ResourceCatalog",
]
