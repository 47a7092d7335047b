"""Booking use cases."""

from huddle.application.usecase.booking.cancel_booking import (
    CancelBookingRequest,
    CancelBookingUseCase,
)
from huddle.application.usecase.booking.create_booking import (
    CreateBookingRequest,
    CreateBookingUseCase,
)
from huddle.application.usecase.booking.get_booking import (
    GetBookingRequest,
    GetBookingUseCase,
)
from huddle.application.usecase.booking.get_schedule import (
    GetScheduleRequest,
    GetScheduleResponse,
    GetScheduleUseCase,
)
from huddle.application.usecase.booking.items import BookingItem, MemberAnswer
from huddle.application.usecase.booking.leave_booking import (
    LeaveBookingRequest,
    LeaveBookingUseCase,
)
from huddle.application.usecase.booking.list_bookings import (
    ListBookingsRequest,
    ListBookingsResponse,
    ListBookingsUseCase,
)

__all__ = [
    "BookingItem",
    "CancelBookingRequest",
    "CancelBookingUseCase",
    "CreateBookingRequest",
    "CreateBookingUseCase",
    "GetBookingRequest",
    "GetBookingUseCase",
    "GetScheduleRequest",
    "GetScheduleResponse",
    "GetScheduleUseCase",
    "LeaveBookingRequest",
    "LeaveBookingUseCase",
    "ListBookingsRequest",
    "ListBookingsResponse",
    "ListBookingsUseCase",
    "MemberAnswer",
]
