"""Get daily schedule use case."""

from datetime import date

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import UseCase
from huddle.application.usecase.booking.items import BookingItem
from huddle.domain.service import BookingService
from huddle.domain.value import ResourceId, TimeSlot


class GetScheduleRequest(BaseModel):
    """Schedule request for one day."""

    date: date
    slot: str | None = None  # Restrict to one slot
    resource_id: str | None = None  # Also report this resource's free slots


class SlotOccupancy(BaseModel):
    """A slot of a resource and the booking occupying it, if any."""

    slot: str
    booking: BookingItem | None = None


class ResourceScheduleItem(BaseModel):
    """Schedule of one resource."""

    resource_id: str
    resource_name: str
    capacity: int
    slots: list[SlotOccupancy]


class GetScheduleResponse(BaseModel):
    """Occupancy overview of a day."""

    date: date
    resources: list[ResourceScheduleItem]
    total_bookings: int
    occupied_resources: int
    participant_count: int
    available_slots: list[str] | None = None


class GetScheduleUseCase(UseCase[GetScheduleRequest, GetScheduleResponse]):
    """Use case for the day overview of every room."""

    def __init__(self, booking_service: BookingService) -> None:
        """Initialize use case.

        Args:
            booking_service: Booking domain service
        """
        self.booking_service = booking_service

    async def execute(self, request: GetScheduleRequest) -> GetScheduleResponse:
        """Build the schedule for a day.

        Args:
            request: Schedule request

        Returns:
            Per-room slot occupancy with summary counters

        Raises:
            ValueError: If the slot is malformed
            NotFoundError: If the resource is unknown
        """
        with logfire.span(
            "get_schedule", date=request.date.isoformat(), slot=request.slot
        ):
            slot = TimeSlot(request.slot) if request.slot else None
            schedule = await self.booking_service.daily_schedule(request.date, slot)

            available_slots = None
            if request.resource_id:
                free = await self.booking_service.available_slots(
                    ResourceId(request.resource_id), request.date
                )
                available_slots = [s.root for s in free]

            return GetScheduleResponse(
                date=schedule.day,
                resources=[
                    ResourceScheduleItem(
                        resource_id=entry.resource.id,
                        resource_name=entry.resource.name,
                        capacity=entry.resource.capacity,
                        slots=[
                            SlotOccupancy(
                                slot=s,
                                booking=BookingItem.from_booking(b) if b else None,
                            )
                            for s, b in entry.slots.items()
                        ],
                    )
                    for entry in schedule.resources
                ],
                total_bookings=schedule.total_bookings,
                occupied_resources=schedule.occupied_resources,
                participant_count=schedule.participant_count,
                available_slots=available_slots,
            )
