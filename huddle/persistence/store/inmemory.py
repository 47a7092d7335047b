"""In-memory consensus store.

Bookings and invitations are immutable models kept in plain dicts. A
transaction computes replacement records from a snapshot and the commit
swaps them in without awaiting, so concurrent readers on the event loop
only ever see the state before or after a transaction.
"""

import asyncio
from collections.abc import Sequence

import logfire

from huddle.domain.error import NotFoundError
from huddle.domain.model import Booking, Invitation
from huddle.domain.repository import (
    ConsensusChange,
    ConsensusStore,
    CreationGuard,
    Transaction,
)
from huddle.domain.value import BookingFilter, BookingId, InvitationId, ParticipantId


class InMemoryConsensusStore(ConsensusStore):
    """In-memory implementation of ConsensusStore.

    Creations share one lock because their conflict checks span every
    booking. Mutations lock only the booking they touch.
    """

    def __init__(self) -> None:
        self._bookings: dict[BookingId, Booking] = {}
        self._invitations: dict[InvitationId, Invitation] = {}
        self._creation_lock = asyncio.Lock()
        self._booking_locks: dict[BookingId, asyncio.Lock] = {}

    def _lock_for(self, booking_id: BookingId) -> asyncio.Lock:
        if booking_id not in self._bookings:
            raise NotFoundError("Booking", str(booking_id))
        lock = self._booking_locks.get(booking_id)
        if lock is None:
            lock = self._booking_locks[booking_id] = asyncio.Lock()
        return lock

    def _invitations_of(self, booking_id: BookingId) -> list[Invitation]:
        return [
            invitation
            for invitation in self._invitations.values()
            if invitation.booking_id == booking_id
        ]

    def _commit(self, booking: Booking, invitations: Sequence[Invitation]) -> None:
        # Must not await: this is the atomic step
        self._bookings[booking.id] = booking
        for invitation in invitations:
            self._invitations[invitation.id] = invitation

    async def create(
        self,
        booking: Booking,
        invitations: Sequence[Invitation],
        guard: CreationGuard,
    ) -> Booking:
        """Write a new booking and its invitations as one unit."""
        if any(invitation.booking_id != booking.id for invitation in invitations):
            raise ValueError("Invitations must belong to the booking being created")

        async with self._creation_lock:
            guard(list(self._bookings.values()))
            if booking.id in self._bookings:
                raise ValueError(f"Booking {booking.id} already exists")
            self._commit(booking, invitations)

        logfire.debug(
            "Booking stored",
            booking_id=str(booking.id),
            invitation_count=len(invitations),
        )
        return booking

    async def mutate(self, booking_id: BookingId, fn: Transaction) -> ConsensusChange:
        """Apply a transaction to one booking under its lock."""
        async with self._lock_for(booking_id):
            booking = self._bookings[booking_id]
            change = fn(booking, self._invitations_of(booking_id))

            if change.booking.id != booking_id:
                raise ValueError("Transaction must not switch bookings")
            if any(inv.booking_id != booking_id for inv in change.invitations):
                raise ValueError("Transaction must only touch its own invitations")
            self._commit(change.booking, change.invitations)

        logfire.debug(
            "Booking mutated",
            booking_id=str(booking_id),
            status=change.booking.status.value,
            written_invitations=len(change.invitations),
        )
        return change

    async def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Find a booking by ID."""
        return self._bookings.get(booking_id)

    async def get_invitation(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def list_bookings(
        self, booking_filter: BookingFilter | None = None
    ) -> list[Booking]:
        """List bookings ordered by date, slot and creation time."""
        matches = [
            booking
            for booking in self._bookings.values()
            if booking_filter is None or booking_filter.matches(booking)
        ]
        matches.sort(key=lambda b: (b.date, b.slot.root, b.created_at))
        return matches

    async def list_invitations(
        self,
        recipient: ParticipantId | None = None,
        booking_id: BookingId | None = None,
    ) -> list[Invitation]:
        """List invitation records, newest first."""
        matches = []
        for invitation in self._invitations.values():
            if recipient is not None and invitation.recipient != recipient:
                continue
            if booking_id is not None and invitation.booking_id != booking_id:
                continue
            matches.append(invitation)

        # Sort by created_at descending
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches
