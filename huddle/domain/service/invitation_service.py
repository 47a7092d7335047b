"""Invitation resolution domain service."""

from collections.abc import Sequence
from datetime import datetime

import logfire

from huddle.config import BookingSettings
from huddle.domain.error import (
    AlreadyResolvedError,
    NotAMemberError,
    NotFoundError,
    NotOrganizerError,
    NotRecipientError,
    TerminalStateError,
)
from huddle.domain.model import Booking, Invitation
from huddle.domain.repository import ConsensusChange, ConsensusStore
from huddle.domain.service.consensus import (
    awaiting_answer,
    evaluate,
    member_statuses,
)
from huddle.domain.service.directory import Directory
from huddle.domain.service.notices import (
    cancellation_notices,
    leave_notice,
    response_notices,
)
from huddle.domain.value import (
    BookingId,
    BookingStatus,
    Decision,
    InvitationId,
    InvitationStatus,
    ParticipantId,
)
from huddle.domain.value.common import ValueObject


class Resolution(ValueObject):
    """Outcome of answering an invitation."""

    booking: Booking
    invitation: Invitation
    notices: tuple[Invitation, ...]


class Inbox(ValueObject):
    """A participant's invitation records, split for the notification center."""

    pending: tuple[Invitation, ...]
    processed: tuple[Invitation, ...]


class InvitationService:
    """Domain service for answering invitations and leaving or cancelling.

    Every operation runs as one store transaction on the booking, so the
    answer, the re-evaluated booking and the appended notices are written
    together.
    """

    def __init__(
        self,
        store: ConsensusStore,
        directory: Directory,
        booking_settings: BookingSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            store: Consensus store
            directory: Participant directory (message text only)
            booking_settings: Member count bounds
        """
        self.store = store
        self.directory = directory
        self.booking_settings = booking_settings

    async def respond(
        self, invitation_id: InvitationId, decision: Decision, actor: ParticipantId
    ) -> Resolution:
        """Accept or decline an invitation.

        Accepting confirms the booking once every current member accepted.
        Declining removes the actor from the members and cancels the booking
        when too few members remain. Either way the organizer and the actor
        each receive a notice.

        Args:
            invitation_id: Invitation being answered
            decision: Accept or decline
            actor: Participant answering

        Returns:
            Updated booking, the answered invitation and the new notices

        Raises:
            NotFoundError: If the invitation or its booking does not exist
            AlreadyResolvedError: If the invitation is not pending
            TerminalStateError: If the booking is cancelled
            NotRecipientError: If the invitation is addressed to someone else
            NotAMemberError: If the actor is no longer a member
        """
        with logfire.span(
            "invitation_service.respond",
            invitation_id=str(invitation_id),
            decision=decision.value,
            actor=actor,
        ):
            invitation = await self.store.get_invitation(invitation_id)
            if not invitation:
                logfire.warn("Invitation not found", invitation_id=str(invitation_id))
                raise NotFoundError("Invitation", str(invitation_id))
            if not invitation.is_actionable or not invitation.is_pending:
                logfire.warn(
                    "Invitation already answered",
                    invitation_id=str(invitation_id),
                    status=invitation.status.value,
                )
                raise AlreadyResolvedError(str(invitation_id))

            booking = await self.store.get_booking(invitation.booking_id)
            if not booking:
                logfire.error(
                    "Booking missing for invitation",
                    invitation_id=str(invitation_id),
                    booking_id=str(invitation.booking_id),
                )
                raise NotFoundError("Booking", str(invitation.booking_id))

            actor_name = self.directory.resolve_display_name(actor)
            organizer_name = self.directory.resolve_display_name(booking.organizer)
            now = datetime.now()
            min_members = self.booking_settings.min_members

            def transaction(
                booking: Booking, invitations: Sequence[Invitation]
            ) -> ConsensusChange:
                # Re-read under the booking lock; a concurrent answer wins
                current = next(
                    (inv for inv in invitations if inv.id == invitation_id), None
                )
                if current is None or not current.is_pending:
                    raise AlreadyResolvedError(str(invitation_id))
                if booking.is_cancelled:
                    raise TerminalStateError(str(booking.id))
                if current.recipient != actor:
                    raise NotRecipientError(str(invitation_id), actor)
                if not booking.is_member(actor):
                    raise NotAMemberError(str(booking.id), actor)

                answered = current.evolve(status=decision.status)

                if decision == Decision.ACCEPTED:
                    updated_invitations = [
                        answered if inv.id == answered.id else inv
                        for inv in invitations
                    ]
                    updated = booking.evolve(
                        status=evaluate(booking, updated_invitations, min_members)
                    )
                else:
                    updated = booking.without_member(actor)
                    if len(updated.members) < min_members:
                        updated = updated.evolve(status=BookingStatus.CANCELLED)

                notices = response_notices(
                    booking, actor, decision, actor_name, organizer_name, now
                )
                return ConsensusChange(
                    booking=updated, invitations=(answered, *notices)
                )

            try:
                change = await self.store.mutate(booking.id, transaction)
            except (
                AlreadyResolvedError,
                TerminalStateError,
                NotRecipientError,
                NotAMemberError,
            ) as e:
                logfire.warn(
                    "Invitation answer rejected",
                    invitation_id=str(invitation_id),
                    booking_id=str(booking.id),
                    error=str(e),
                )
                raise

            answered, *notices = change.invitations
            logfire.info(
                "Invitation answered",
                invitation_id=str(invitation_id),
                booking_id=str(booking.id),
                decision=decision.value,
                booking_status=change.booking.status.value,
                member_count=len(change.booking.members),
            )
            return Resolution(
                booking=change.booking, invitation=answered, notices=tuple(notices)
            )

    async def cancel_booking(
        self, booking_id: BookingId, actor: ParticipantId
    ) -> Booking:
        """Cancel a booking on behalf of its organizer.

        Every current member receives a cancellation notice.

        Args:
            booking_id: Booking to cancel
            actor: Participant cancelling; must be the organizer

        Returns:
            Cancelled booking

        Raises:
            NotFoundError: If the booking does not exist
            TerminalStateError: If the booking is already cancelled
            NotOrganizerError: If the actor is not the organizer
        """
        with logfire.span(
            "invitation_service.cancel_booking",
            booking_id=str(booking_id),
            actor=actor,
        ):
            booking = await self._get_booking(booking_id)
            organizer_name = self.directory.resolve_display_name(booking.organizer)
            now = datetime.now()

            def transaction(
                booking: Booking, invitations: Sequence[Invitation]
            ) -> ConsensusChange:
                if booking.is_cancelled:
                    raise TerminalStateError(str(booking.id))
                if booking.organizer != actor:
                    raise NotOrganizerError(str(booking.id), actor)
                return ConsensusChange(
                    booking=booking.evolve(status=BookingStatus.CANCELLED),
                    invitations=tuple(
                        cancellation_notices(booking, organizer_name, now)
                    ),
                )

            try:
                change = await self.store.mutate(booking_id, transaction)
            except (TerminalStateError, NotOrganizerError) as e:
                logfire.warn(
                    "Cancellation rejected", booking_id=str(booking_id), error=str(e)
                )
                raise

            logfire.info(
                "Booking cancelled",
                booking_id=str(booking_id),
                notified_members=len(change.invitations),
            )
            return change.booking

    async def leave_booking(
        self, booking_id: BookingId, actor: ParticipantId
    ) -> Booking:
        """Remove a member from a booking at their own request.

        The organizer is notified. The booking is cancelled when too few
        members remain, and confirmed when every remaining member already
        accepted.

        Args:
            booking_id: Booking to leave
            actor: Member leaving

        Returns:
            Updated booking

        Raises:
            NotFoundError: If the booking does not exist
            TerminalStateError: If the booking is already cancelled
            NotAMemberError: If the actor is not a current member
        """
        with logfire.span(
            "invitation_service.leave_booking",
            booking_id=str(booking_id),
            actor=actor,
        ):
            await self._get_booking(booking_id)
            actor_name = self.directory.resolve_display_name(actor)
            now = datetime.now()
            min_members = self.booking_settings.min_members

            def transaction(
                booking: Booking, invitations: Sequence[Invitation]
            ) -> ConsensusChange:
                if booking.is_cancelled:
                    raise TerminalStateError(str(booking.id))
                if not booking.is_member(actor):
                    raise NotAMemberError(str(booking.id), actor)

                remaining = booking.without_member(actor)
                updated = remaining.evolve(
                    status=evaluate(remaining, invitations, min_members)
                )
                return ConsensusChange(
                    booking=updated,
                    invitations=(leave_notice(booking, actor_name, now),),
                )

            try:
                change = await self.store.mutate(booking_id, transaction)
            except (TerminalStateError, NotAMemberError) as e:
                logfire.warn(
                    "Leave rejected", booking_id=str(booking_id), error=str(e)
                )
                raise

            logfire.info(
                "Member left booking",
                booking_id=str(booking_id),
                booking_status=change.booking.status.value,
                member_count=len(change.booking.members),
            )
            return change.booking

    async def list_invitations(self, recipient: ParticipantId) -> Inbox:
        """List invitation records addressed to a participant, newest first.

        An invitation is pending only while it can still be answered: it is
        actionable and unanswered, its booking is not cancelled and the
        recipient is still a member. Everything else is processed activity.

        Args:
            recipient: Participant

        Returns:
            Pending and processed records
        """
        with logfire.span("invitation_service.list_invitations", recipient=recipient):
            invitations = await self.store.list_invitations(recipient=recipient)
            bookings: dict[BookingId, Booking | None] = {}
            pending = []
            processed = []
            for invitation in invitations:
                if invitation.is_actionable and invitation.is_pending:
                    if invitation.booking_id not in bookings:
                        bookings[invitation.booking_id] = await self.store.get_booking(
                            invitation.booking_id
                        )
                    if awaiting_answer(invitation, bookings[invitation.booking_id]):
                        pending.append(invitation)
                        continue
                processed.append(invitation)

            logfire.info(
                "Invitations listed",
                recipient=recipient,
                pending=len(pending),
                processed=len(processed),
            )
            return Inbox(pending=tuple(pending), processed=tuple(processed))

    async def member_answers(
        self, booking: Booking
    ) -> dict[ParticipantId, InvitationStatus]:
        """Answer of each current member of a booking."""
        invitations = await self.store.list_invitations(booking_id=booking.id)
        return member_statuses(booking, invitations)

    async def _get_booking(self, booking_id: BookingId) -> Booking:
        booking = await self.store.get_booking(booking_id)
        if not booking:
            logfire.warn("Booking not found", booking_id=str(booking_id))
            raise NotFoundError("Booking", str(booking_id))
        return booking
