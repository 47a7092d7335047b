"""Unit tests for InvitationService."""

import asyncio
from uuid import uuid4

import pytest

from huddle.domain.error import (
    AlreadyResolvedError,
    NotAMemberError,
    NotFoundError,
    NotOrganizerError,
    NotRecipientError,
    TerminalStateError,
)
from huddle.domain.repository import ConsensusStore
from huddle.domain.service import BookingService, InvitationService
from huddle.domain.value import (
    BookingStatus,
    Decision,
    InvitationKind,
    InvitationStatus,
)
from tests.conftest import ALICE, BOB, CHARLIE, DIANA, EVE, GROUP
from tests.harness import create_env_fixture

# Unit test fixture - directory mocked, fresh in-memory store per test
unit_env = create_env_fixture()


async def create_booking(env, day, members=GROUP):
    """Create a booking and return it with its invitations by recipient."""
    booking_service = await env.get(BookingService)
    store = await env.get(ConsensusStore)
    booking = await booking_service.create_booking(
        ALICE, "room-3", day, "08:00-10:00", members
    )
    invitations = {
        inv.recipient: inv
        for inv in await store.list_invitations(booking_id=booking.id)
        if inv.kind == InvitationKind.ACTIONABLE
    }
    return booking, invitations


class TestRespond:
    """Tests for respond method."""

    @pytest.mark.asyncio
    async def test_all_accept_confirms_after_last(self, unit_env, day):
        """Booking should confirm on the third acceptance, not before."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)

        # Act
        first = await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)
        second = await service.respond(
            invitations[CHARLIE].id, Decision.ACCEPTED, CHARLIE
        )
        third = await service.respond(invitations[DIANA].id, Decision.ACCEPTED, DIANA)

        # Assert
        assert first.booking.status == BookingStatus.PENDING
        assert second.booking.status == BookingStatus.PENDING
        assert third.booking.status == BookingStatus.CONFIRMED
        assert third.invitation.status == InvitationStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_accept_emits_organizer_notice_and_self_confirmation(
        self, unit_env, day
    ):
        """Accepting should notify the organizer and confirm to the actor."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)

        # Act
        resolution = await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)

        # Assert
        organizer_notice, self_notice = resolution.notices
        assert organizer_notice.recipient == ALICE
        assert organizer_notice.kind == InvitationKind.INFORMATIONAL
        assert organizer_notice.status == InvitationStatus.ACCEPTED
        assert organizer_notice.message.startswith(
            "Bob Green has accepted your invitation for Discussion Room C on "
        )
        assert organizer_notice.message.endswith("at 08:00-10:00")
        assert self_notice.recipient == BOB
        assert self_notice.message.startswith("You accepted the invitation")
        assert self_notice.message.endswith("organized by Alice White")

    @pytest.mark.asyncio
    async def test_decline_below_minimum_cancels(self, unit_env, day):
        """A decline leaving two members should cancel the booking."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)
        await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)

        # Act
        resolution = await service.respond(
            invitations[CHARLIE].id, Decision.DECLINED, CHARLIE
        )

        # Assert
        assert resolution.booking.members == (BOB, DIANA)
        assert resolution.booking.status == BookingStatus.CANCELLED
        assert resolution.invitation.status == InvitationStatus.DECLINED

        # Remaining invitations can no longer be answered
        with pytest.raises(TerminalStateError):
            await service.respond(invitations[DIANA].id, Decision.ACCEPTED, DIANA)

    @pytest.mark.asyncio
    async def test_decline_keeping_minimum_stays_pending(self, unit_env, day):
        """Four members, one declines, the other three confirm."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])

        # Act
        declined = await service.respond(invitations[EVE].id, Decision.DECLINED, EVE)
        for member in GROUP:
            resolution = await service.respond(
                invitations[member].id, Decision.ACCEPTED, member
            )

        # Assert
        assert declined.booking.status == BookingStatus.PENDING
        assert declined.booking.members == tuple(GROUP)
        assert resolution.booking.status == BookingStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_decline_never_confirms(self, unit_env, day):
        """A decline should only shrink the group, keeping the status."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        for member in GROUP:
            await service.respond(invitations[member].id, Decision.ACCEPTED, member)

        # Act
        resolution = await service.respond(invitations[EVE].id, Decision.DECLINED, EVE)

        # Assert
        assert resolution.booking.members == tuple(GROUP)
        assert resolution.booking.status == BookingStatus.PENDING

    @pytest.mark.asyncio
    async def test_answering_twice_fails(self, unit_env, day):
        """A second answer should fail and write nothing."""
        # Arrange
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(ConsensusStore)
        booking, invitations = await create_booking(unit_env, day)
        await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)
        before = await store.list_invitations()

        # Act & Assert
        with pytest.raises(AlreadyResolvedError):
            await service.respond(invitations[BOB].id, Decision.DECLINED, BOB)

        assert await store.list_invitations() == before
        assert (await store.get_booking(booking.id)).members == tuple(GROUP)

    @pytest.mark.asyncio
    async def test_notices_cannot_be_answered(self, unit_env, day):
        """Informational records should be rejected as already resolved."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)
        resolution = await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)

        # Act & Assert
        with pytest.raises(AlreadyResolvedError):
            await service.respond(resolution.notices[0].id, Decision.ACCEPTED, ALICE)

    @pytest.mark.asyncio
    async def test_unknown_invitation(self, unit_env):
        """Answering an unknown invitation should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(InvitationService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Invitation"):
            await service.respond(uuid4(), Decision.ACCEPTED, BOB)

    @pytest.mark.asyncio
    async def test_someone_elses_invitation(self, unit_env, day):
        """Only the recipient may answer an invitation."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)

        # Act & Assert
        with pytest.raises(NotRecipientError):
            await service.respond(invitations[BOB].id, Decision.ACCEPTED, CHARLIE)

    @pytest.mark.asyncio
    async def test_member_who_left_cannot_answer(self, unit_env, day):
        """A member who left should not answer their old invitation."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        await service.leave_booking(booking.id, EVE)

        # Act & Assert
        with pytest.raises(NotAMemberError):
            await service.respond(invitations[EVE].id, Decision.ACCEPTED, EVE)

    @pytest.mark.asyncio
    async def test_member_who_left_no_longer_blocks_quorum(self, unit_env, day):
        """Acceptances of the remaining members should confirm."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        await service.leave_booking(booking.id, EVE)

        # Act
        for member in GROUP:
            resolution = await service.respond(
                invitations[member].id, Decision.ACCEPTED, member
            )

        # Assert
        assert resolution.booking.status == BookingStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_concurrent_answers_to_one_invitation(self, unit_env, day):
        """Concurrent answers to one invitation should admit exactly one."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)

        # Act
        results = await asyncio.gather(
            service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB),
            service.respond(invitations[BOB].id, Decision.DECLINED, BOB),
            return_exceptions=True,
        )

        # Assert
        succeeded = [r for r in results if not isinstance(r, Exception)]
        failed = [r for r in results if isinstance(r, AlreadyResolvedError)]
        assert len(succeeded) == 1
        assert len(failed) == 1

    @pytest.mark.asyncio
    async def test_concurrent_acceptances_confirm(self, unit_env, day):
        """Concurrent acceptances of every member should confirm."""
        # Arrange
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(ConsensusStore)
        booking, invitations = await create_booking(unit_env, day)

        # Act
        await asyncio.gather(
            *(
                service.respond(invitations[m].id, Decision.ACCEPTED, m)
                for m in GROUP
            )
        )

        # Assert
        stored = await store.get_booking(booking.id)
        assert stored.status == BookingStatus.CONFIRMED


class TestCancelBooking:
    """Tests for cancel_booking method."""

    @pytest.mark.asyncio
    async def test_cancel_confirmed_booking_notifies_members(self, unit_env, day):
        """Every member should get exactly one cancellation notice."""
        # Arrange
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(ConsensusStore)
        booking, invitations = await create_booking(unit_env, day)
        for member in GROUP:
            await service.respond(invitations[member].id, Decision.ACCEPTED, member)

        # Act
        cancelled = await service.cancel_booking(booking.id, ALICE)

        # Assert
        assert cancelled.status == BookingStatus.CANCELLED
        for member in GROUP:
            notices = [
                inv
                for inv in await store.list_invitations(recipient=member)
                if "has cancelled the booking" in inv.message
            ]
            assert len(notices) == 1
            assert notices[0].kind == InvitationKind.INFORMATIONAL

    @pytest.mark.asyncio
    async def test_only_organizer_may_cancel(self, unit_env, day):
        """A member cancelling should raise NotOrganizerError."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)

        # Act & Assert
        with pytest.raises(NotOrganizerError):
            await service.cancel_booking(booking.id, BOB)

    @pytest.mark.asyncio
    async def test_cancel_twice(self, unit_env, day):
        """Cancelling a cancelled booking should raise TerminalStateError."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)
        await service.cancel_booking(booking.id, ALICE)

        # Act & Assert
        with pytest.raises(TerminalStateError):
            await service.cancel_booking(booking.id, ALICE)

    @pytest.mark.asyncio
    async def test_terminal_state_reported_before_authorization(self, unit_env, day):
        """A cancelled booking is reported before the organizer check."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)
        await service.cancel_booking(booking.id, ALICE)

        # Act & Assert
        with pytest.raises(TerminalStateError):
            await service.cancel_booking(booking.id, BOB)

    @pytest.mark.asyncio
    async def test_cancel_unknown_booking(self, unit_env):
        """Cancelling an unknown booking should raise NotFoundError."""
        # Arrange
        service = await unit_env.get(InvitationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.cancel_booking(uuid4(), ALICE)


class TestLeaveBooking:
    """Tests for leave_booking method."""

    @pytest.mark.asyncio
    async def test_leave_notifies_organizer(self, unit_env, day):
        """Leaving should remove the member and notify the organizer."""
        # Arrange
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(ConsensusStore)
        booking, _ = await create_booking(unit_env, day, [*GROUP, EVE])

        # Act
        updated = await service.leave_booking(booking.id, EVE)

        # Assert
        assert updated.members == tuple(GROUP)
        assert updated.status == BookingStatus.PENDING
        notices = await store.list_invitations(recipient=ALICE)
        assert len(notices) == 1
        assert notices[0].message.startswith("Eve Blue has left the booking")

    @pytest.mark.asyncio
    async def test_leave_below_minimum_cancels(self, unit_env, day):
        """Leaving a three member booking should cancel it."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)

        # Act
        updated = await service.leave_booking(booking.id, BOB)

        # Assert
        assert updated.status == BookingStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_last_pending_member_leaving_confirms(self, unit_env, day):
        """When everyone remaining already accepted, leaving confirms."""
        # Arrange
        service = await unit_env.get(InvitationService)
        store = await unit_env.get(ConsensusStore)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        for member in GROUP:
            await service.respond(invitations[member].id, Decision.ACCEPTED, member)

        # Act
        updated = await service.leave_booking(booking.id, EVE)

        # Assert
        assert updated.members == tuple(GROUP)
        assert updated.status == BookingStatus.CONFIRMED
        stored = await store.get_booking(booking.id)
        assert stored.status == BookingStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_leave_keeps_pending_while_answers_missing(self, unit_env, day):
        """Leaving should not confirm while a remaining member is pending."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)
        await service.respond(invitations[CHARLIE].id, Decision.ACCEPTED, CHARLIE)

        # Act
        updated = await service.leave_booking(booking.id, EVE)

        # Assert
        assert updated.status == BookingStatus.PENDING

    @pytest.mark.asyncio
    async def test_leave_twice(self, unit_env, day):
        """A second leave should raise NotAMemberError."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day, [*GROUP, EVE])
        await service.leave_booking(booking.id, EVE)

        # Act & Assert
        with pytest.raises(NotAMemberError):
            await service.leave_booking(booking.id, EVE)

    @pytest.mark.asyncio
    async def test_organizer_cannot_leave(self, unit_env, day):
        """The organizer is not a member and cannot leave."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)

        # Act & Assert
        with pytest.raises(NotAMemberError):
            await service.leave_booking(booking.id, ALICE)

    @pytest.mark.asyncio
    async def test_leave_cancelled_booking(self, unit_env, day):
        """Leaving a cancelled booking should raise TerminalStateError."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, _ = await create_booking(unit_env, day)
        await service.cancel_booking(booking.id, ALICE)

        # Act & Assert
        with pytest.raises(TerminalStateError):
            await service.leave_booking(booking.id, BOB)


class TestListInvitations:
    """Tests for list_invitations and member_answers methods."""

    @pytest.mark.asyncio
    async def test_answered_invitation_is_processed(self, unit_env, day):
        """Answered invitations and notices should be processed."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)
        await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)

        # Act
        bob = await service.list_invitations(BOB)
        charlie = await service.list_invitations(CHARLIE)

        # Assert
        assert bob.pending == ()
        assert len(bob.processed) == 2  # answered invitation + self confirmation
        assert [inv.id for inv in charlie.pending] == [invitations[CHARLIE].id]

    @pytest.mark.asyncio
    async def test_invitations_of_cancelled_booking_are_processed(
        self, unit_env, day
    ):
        """Pending invitations of a cancelled booking cannot be answered."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)
        await service.cancel_booking(booking.id, ALICE)

        # Act
        inbox = await service.list_invitations(BOB)

        # Assert
        assert inbox.pending == ()
        assert invitations[BOB].id in [inv.id for inv in inbox.processed]

    @pytest.mark.asyncio
    async def test_invitation_of_member_who_left_is_processed(self, unit_env, day):
        """A member who left should no longer see the invitation as pending."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day, [*GROUP, EVE])
        await service.leave_booking(booking.id, EVE)

        # Act
        inbox = await service.list_invitations(EVE)

        # Assert
        assert inbox.pending == ()
        assert [inv.id for inv in inbox.processed] == [invitations[EVE].id]

    @pytest.mark.asyncio
    async def test_member_answers(self, unit_env, day):
        """Member answers should report every current member in order."""
        # Arrange
        service = await unit_env.get(InvitationService)
        booking, invitations = await create_booking(unit_env, day)
        await service.respond(invitations[BOB].id, Decision.ACCEPTED, BOB)

        # Act
        answers = await service.member_answers(booking)

        # Assert
        assert answers == {
            BOB: InvitationStatus.ACCEPTED,
            CHARLIE: InvitationStatus.PENDING,
            DIANA: InvitationStatus.PENDING,
        }
