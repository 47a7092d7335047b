"""Domain model entities for Huddle."""

from huddle.domain.model.booking import Booking
from huddle.domain.model.invitation import Invitation
from huddle.domain.model.resource import Resource
from huddle.domain.model.schedule import DailySchedule, ResourceSchedule

__all__ = [
    "Booking",
    "DailySchedule",
    "Invitation",
    "Resource",
    "ResourceSchedule",
]
