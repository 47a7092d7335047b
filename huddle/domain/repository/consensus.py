"""Consensus store interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from huddle.domain.model import Booking, Invitation
from huddle.domain.value import BookingFilter, BookingId, InvitationId, ParticipantId
from huddle.domain.value.common import ValueObject


class ConsensusChange(ValueObject):
    """Result of a booking transaction.

    Holds the updated booking together with every invitation record to
    write (updated actionable invitations and newly appended notices), so
    that both are committed as one unit.
    """

    booking: Booking
    invitations: tuple[Invitation, ...] = ()


CreationGuard = Callable[[Sequence[Booking]], None]
Transaction = Callable[[Booking, Sequence[Invitation]], ConsensusChange]


class ConsensusStore(ABC):
    """Authoritative store of bookings and invitations.

    Defines the contract for the only shared mutable state of the system.
    Records are never deleted; cancellation is a status transition.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(
        self,
        booking: Booking,
        invitations: Sequence[Invitation],
        guard: CreationGuard,
    ) -> Booking:
        """Write a new booking and its invitations as one unit.

        Creations are serialized. The guard runs inside the same critical
        section against the current bookings and rejects by raising.

        Args:
            booking: The new booking
            invitations: Its actionable invitations
            guard: Conflict check run before the write

        Returns:
            The stored booking

        Raises:
            DomainError: Whatever the guard raises; nothing is written
        """
        pass

    @abstractmethod
    async def mutate(self, booking_id: BookingId, fn: Transaction) -> ConsensusChange:
        """Apply a transaction to one booking.

        The transaction function receives a consistent snapshot of the
        booking and all of its invitations while holding the booking's
        lock, and returns the change to commit. Transactions on different
        bookings run independently.

        Args:
            booking_id: Booking to mutate
            fn: Pure function computing the change

        Returns:
            The committed change

        Raises:
            NotFoundError: If the booking does not exist
            DomainError: Whatever the transaction raises; nothing is written
        """
        pass

    @abstractmethod
    async def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Find a booking by ID.

        Args:
            booking_id: The booking's unique identifier

        Returns:
            The booking if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_invitation(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_bookings(
        self, booking_filter: BookingFilter | None = None
    ) -> list[Booking]:
        """List bookings ordered by date, slot and creation time.

        Args:
            booking_filter: Optional criteria

        Returns:
            Matching bookings
        """
        pass

    @abstractmethod
    async def list_invitations(
        self,
        recipient: ParticipantId | None = None,
        booking_id: BookingId | None = None,
    ) -> list[Invitation]:
        """List invitation records, newest first.

        Args:
            recipient: Optional recipient filter
            booking_id: Optional booking filter

        Returns:
            Matching invitations
        """
        pass
