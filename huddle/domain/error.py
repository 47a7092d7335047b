"""Domain layer errors.

Every rejection of a booking or invitation operation is classified by one of
these errors. They are raised before anything is written, so a failed
operation never leaves partial state behind.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidParticipantsError(ValidationError):
    """Raised for duplicate participants, an organizer listed as member,
    or a member count outside the allowed range."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidSlotError(ValidationError):
    """Raised when a time slot is not one of the catalog's slots."""

    def __init__(self, slot: str):
        self.slot = slot
        super().__init__(f"Unknown time slot: {slot}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Operation conflicts with the current state."""

    pass


class SlotUnavailableError(ConflictError):
    """Raised when the resource is already booked for the date and slot."""

    def __init__(self, resource_id: str, day: str, slot: str):
        super().__init__(
            f"Time slot {slot} on {day} is no longer available for {resource_id}"
        )


class GroupAlreadyBookedError(ConflictError):
    """Raised when a participant already takes part in a booking that day."""

    def __init__(self, day: str, participants: list[str]):
        self.participants = participants
        super().__init__(
            f"This group has already booked a room for {day}: "
            f"{', '.join(participants)}"
        )


class AlreadyResolvedError(ConflictError):
    """Raised when answering an invitation that is not pending."""

    def __init__(self, invitation_id: str):
        super().__init__(f"Invitation {invitation_id} has already been answered")


class TerminalStateError(ConflictError):
    """Raised when mutating a cancelled booking."""

    def __init__(self, booking_id: str):
        super().__init__(f"Booking {booking_id} is cancelled")


class NotAuthorizedError(DomainError):
    """Actor is not allowed to perform the operation."""

    pass


class NotAMemberError(NotAuthorizedError):
    """Raised when the actor is not a current member of the booking."""

    def __init__(self, booking_id: str, participant: str):
        super().__init__(f"{participant} is not a member of booking {booking_id}")


class NotOrganizerError(NotAuthorizedError):
    """Raised when someone other than the organizer cancels a booking."""

    def __init__(self, booking_id: str, participant: str):
        super().__init__(
            f"{participant} is not the organizer of booking {booking_id}"
        )


class NotRecipientError(NotAuthorizedError):
    """Raised when answering someone else's invitation."""

    def __init__(self, invitation_id: str, participant: str):
        super().__init__(
            f"Invitation {invitation_id} is not addressed to {participant}"
        )
