"""Unit tests for domain error to HTTP mapping."""

import pytest

from huddle.domain.error import (
    AlreadyResolvedError,
    DomainError,
    GroupAlreadyBookedError,
    InvalidParticipantsError,
    InvalidSlotError,
    NotAMemberError,
    NotFoundError,
    NotOrganizerError,
    NotRecipientError,
    SlotUnavailableError,
    TerminalStateError,
)
from huddle.interface.error import to_http_exception


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("Booking", "x"), 404),
        (NotOrganizerError("b", "p"), 403),
        (NotAMemberError("b", "p"), 403),
        (NotRecipientError("i", "p"), 403),
        (SlotUnavailableError("room-1", "2025-09-20", "08:00-10:00"), 409),
        (GroupAlreadyBookedError("2025-09-20", ["p"]), 409),
        (AlreadyResolvedError("i"), 409),
        (TerminalStateError("b"), 409),
        (InvalidParticipantsError("too few"), 400),
        (InvalidSlotError("bogus"), 400),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    """Each domain error should map to its HTTP status with its message."""
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == str(error)
