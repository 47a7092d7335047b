"""Booking lifecycle domain service."""

from collections.abc import Sequence
from datetime import date, datetime
from uuid import uuid4

import logfire

from huddle.config import BookingSettings
from huddle.domain.error import (
    GroupAlreadyBookedError,
    InvalidParticipantsError,
    InvalidSlotError,
    NotFoundError,
    SlotUnavailableError,
)
from huddle.domain.model import Booking, DailySchedule, Invitation, ResourceSchedule
from huddle.domain.repository import ConsensusStore
from huddle.domain.service.catalog import ResourceCatalog
from huddle.domain.service.directory import Directory
from huddle.domain.service.notices import invitation_message
from huddle.domain.value import (
    BookingFilter,
    BookingId,
    BookingStatus,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    ParticipantId,
    ResourceId,
    TimeSlot,
)


class BookingService:
    """Domain service validating and creating bookings.

    A new booking is written together with one pending invitation per
    member, or not at all.
    """

    def __init__(
        self,
        store: ConsensusStore,
        catalog: ResourceCatalog,
        directory: Directory,
        booking_settings: BookingSettings,
    ) -> None:
        """Initialize booking service.

        Args:
            store: Consensus store
            catalog: Resource catalog
            directory: Participant directory (message text only)
            booking_settings: Member count bounds
        """
        self.store = store
        self.catalog = catalog
        self.directory = directory
        self.booking_settings = booking_settings

    async def create_booking(
        self,
        organizer: ParticipantId,
        resource_id: ResourceId,
        day: date,
        slot: str,
        candidate_members: Sequence[str],
    ) -> Booking:
        """Create a pending booking and invite its members.

        Checks run in order and the first failure wins: slot, resource,
        participants, group overlap on the day, slot availability.

        Args:
            organizer: Participant creating the booking
            resource_id: Resource to book
            day: Calendar day
            slot: One of the catalog's time slots
            candidate_members: Members to invite; blanks are ignored

        Returns:
            Created booking

        Raises:
            InvalidSlotError: If the slot is not in the catalog
            NotFoundError: If the resource is unknown
            InvalidParticipantsError: If members are too few, too many or
                not unique
            GroupAlreadyBookedError: If a participant is already booked that day
            SlotUnavailableError: If the resource is taken for the slot
        """
        with logfire.span(
            "booking_service.create_booking",
            organizer=organizer,
            resource_id=resource_id,
            day=day.isoformat(),
            slot=slot,
        ):
            if not self.catalog.has_slot(slot):
                logfire.warn("Unknown time slot", slot=slot)
                raise InvalidSlotError(slot)

            resource = self.catalog.get_resource(resource_id)
            if not resource:
                logfire.warn("Unknown resource", resource_id=resource_id)
                raise NotFoundError("Resource", resource_id)

            organizer, members = self._normalize_participants(
                organizer, candidate_members
            )

            now = datetime.now()
            booking = Booking(
                id=BookingId(uuid4()),
                resource_id=resource.id,
                resource_name=resource.name,
                date=day,
                slot=TimeSlot(slot),
                organizer=organizer,
                members=members,
                status=BookingStatus.PENDING,
                created_at=now,
            )

            message = invitation_message(
                self.directory.resolve_display_name(organizer)
            )
            invitations = [
                Invitation(
                    id=InvitationId(uuid4()),
                    booking_id=booking.id,
                    recipient=member,
                    status=InvitationStatus.PENDING,
                    kind=InvitationKind.ACTIONABLE,
                    message=message,
                    created_at=now,
                )
                for member in members
            ]

            def guard(existing: Sequence[Booking]) -> None:
                self._check_group_overlap(booking, existing)
                self._check_slot_available(booking, existing)

            saved = await self.store.create(booking, invitations, guard)
            logfire.info(
                "Booking created",
                booking_id=str(saved.id),
                organizer=organizer,
                member_count=len(members),
            )
            return saved

    def _normalize_participants(
        self, organizer: str, candidate_members: Sequence[str]
    ) -> tuple[ParticipantId, tuple[ParticipantId, ...]]:
        """Trim identifiers, drop blanks and enforce count and uniqueness.

        Raises:
            InvalidParticipantsError: If the participant list is invalid
        """
        organizer = organizer.strip()
        if not organizer:
            raise InvalidParticipantsError("Organizer identifier is required")

        members = [m.strip() for m in candidate_members if m.strip()]

        min_members = self.booking_settings.min_members
        max_members = self.booking_settings.max_members
        if len(members) < min_members:
            logfire.warn(
                "Too few members", requested=len(members), minimum=min_members
            )
            raise InvalidParticipantsError(
                f"Please enter at least {min_members} additional members"
            )
        if len(members) > max_members:
            logfire.warn(
                "Too many members", requested=len(members), maximum=max_members
            )
            raise InvalidParticipantsError(
                f"At most {max_members} additional members are allowed"
            )

        everyone = [organizer, *members]
        if len(set(everyone)) != len(everyone):
            logfire.warn("Duplicate participants", organizer=organizer)
            raise InvalidParticipantsError("Each participant must be unique")

        return ParticipantId(organizer), tuple(ParticipantId(m) for m in members)

    @staticmethod
    def _check_group_overlap(booking: Booking, existing: Sequence[Booking]) -> None:
        """Nobody may take part in two non-cancelled bookings on one day.

        Compared against every booking in the system, using the member
        lists as currently stored.
        """
        for other in existing:
            if other.is_cancelled or other.date != booking.date:
                continue
            overlap = booking.participants & other.participants
            if overlap:
                logfire.warn(
                    "Group already booked",
                    day=booking.date.isoformat(),
                    conflicting_booking_id=str(other.id),
                )
                raise GroupAlreadyBookedError(
                    booking.date.isoformat(), sorted(overlap)
                )

    @staticmethod
    def _check_slot_available(booking: Booking, existing: Sequence[Booking]) -> None:
        """At most one non-cancelled booking per resource, date and slot."""
        for other in existing:
            if (
                not other.is_cancelled
                and other.resource_id == booking.resource_id
                and other.date == booking.date
                and other.slot == booking.slot
            ):
                logfire.warn(
                    "Slot unavailable",
                    resource_id=booking.resource_id,
                    day=booking.date.isoformat(),
                    slot=booking.slot.root,
                )
                raise SlotUnavailableError(
                    booking.resource_id, booking.date.isoformat(), booking.slot.root
                )

    async def get_booking(self, booking_id: BookingId) -> Booking:
        """Get a booking by ID.

        Raises:
            NotFoundError: If the booking does not exist
        """
        booking = await self.store.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking", str(booking_id))
        return booking

    async def list_bookings(
        self, booking_filter: BookingFilter | None = None
    ) -> list[Booking]:
        """List bookings matching a filter.

        Args:
            booking_filter: Optional criteria

        Returns:
            Bookings ordered by date and slot
        """
        with logfire.span("booking_service.list_bookings"):
            bookings = await self.store.list_bookings(booking_filter)
            logfire.info("Bookings listed", count=len(bookings))
            return bookings

    async def available_slots(
        self, resource_id: ResourceId, day: date
    ) -> list[TimeSlot]:
        """Slots of a resource that are still free on a day.

        Raises:
            NotFoundError: If the resource is unknown
        """
        if not self.catalog.get_resource(resource_id):
            raise NotFoundError("Resource", resource_id)

        taken = {
            booking.slot
            for booking in await self.store.list_bookings(
                BookingFilter(resource_id=resource_id, day=day)
            )
            if not booking.is_cancelled
        }
        return [slot for slot in self.catalog.list_slots() if slot not in taken]

    async def daily_schedule(
        self, day: date, slot: TimeSlot | None = None
    ) -> DailySchedule:
        """Occupancy of every resource on a day.

        Args:
            day: Calendar day
            slot: Optionally restrict to one slot

        Returns:
            Per-resource slot occupancy and summary counters
        """
        with logfire.span(
            "booking_service.daily_schedule",
            day=day.isoformat(),
            slot=slot.root if slot else None,
        ):
            active = [
                booking
                for booking in await self.store.list_bookings(
                    BookingFilter(day=day, slot=slot)
                )
                if not booking.is_cancelled
            ]
            slots = [slot] if slot else self.catalog.list_slots()

            resources = []
            for resource in self.catalog.list_resources():
                occupancy = {
                    s.root: next(
                        (
                            b
                            for b in active
                            if b.resource_id == resource.id and b.slot == s
                        ),
                        None,
                    )
                    for s in slots
                }
                resources.append(ResourceSchedule(resource=resource, slots=occupancy))

            participants: set[ParticipantId] = set()
            for booking in active:
                participants |= booking.participants

            return DailySchedule(
                day=day,
                resources=resources,
                total_bookings=len(active),
                occupied_resources=len({b.resource_id for b in active}),
                participant_count=len(participants),
            )
