"""Daily schedule read model."""

from datetime import date

from huddle.domain.model.booking import Booking
from huddle.domain.model.common import DomainModel
from huddle.domain.model.resource import Resource


class ResourceSchedule(DomainModel):
    """Occupancy of one resource, keyed by time slot."""

    resource: Resource
    slots: dict[str, Booking | None]


class DailySchedule(DomainModel):
    """Occupancy of every resource on one day.

    Only non-cancelled bookings occupy a slot or count towards the totals.
    """

    day: date
    resources: list[ResourceSchedule]
    total_bookings: int
    occupied_resources: int
    participant_count: int
