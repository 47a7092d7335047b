"""Booking routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from huddle.application.usecase.booking import (
    BookingItem,
    CancelBookingRequest,
    CancelBookingUseCase,
    CreateBookingRequest,
    CreateBookingUseCase,
    GetBookingRequest,
    GetBookingUseCase,
    LeaveBookingRequest,
    LeaveBookingUseCase,
    ListBookingsRequest,
    ListBookingsResponse,
    ListBookingsUseCase,
)
from huddle.domain.error import DomainError
from huddle.domain.value import BookingStatus, MembershipRole
from huddle.interface.api.routes.participant import current_participant
from huddle.interface.error import bad_request, to_http_exception

router = APIRouter(prefix="/bookings", tags=["bookings"], route_class=DishkaRoute)


class CreateBookingAPIRequest(BaseModel):
    """API request for creating a booking."""

    resource_id: str
    date: date
    slot: str
    members: list[str] = Field(max_length=20)


@router.post("", response_model=BookingItem, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: CreateBookingAPIRequest,
    create_booking_use_case: FromDishka[CreateBookingUseCase],
    participant: str = Depends(current_participant),
) -> BookingItem:
    """Book a room for a slot and invite the group.

    The booking stays pending until every member accepted.

    Args:
        request: Room, day, slot and members to invite
        create_booking_use_case: Create booking use case from DI
        participant: Organizer, from the X-Participant header

    Returns:
        The pending booking

    Raises:
        HTTPException: If a booking rule is violated
    """
    try:
        return await create_booking_use_case.execute(
            CreateBookingRequest(
                organizer=participant,
                resource_id=request.resource_id,
                date=request.date,
                slot=request.slot,
                members=request.members,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=ListBookingsResponse)
async def list_bookings(
    list_bookings_use_case: FromDishka[ListBookingsUseCase],
    participant: str = Depends(current_participant),
    role: MembershipRole = Query(default=MembershipRole.ANY),
    status_filter: BookingStatus | None = Query(default=None, alias="status"),
    today: date | None = Query(default=None),
) -> ListBookingsResponse:
    """List the caller's bookings, split into upcoming and past.

    Args:
        list_bookings_use_case: List bookings use case from DI
        participant: Caller, from the X-Participant header
        role: organizer, member or any
        status_filter: Optional booking status
        today: Reference day for upcoming/past (defaults to the current date)

    Returns:
        Upcoming and past bookings
    """
    return await list_bookings_use_case.execute(
        ListBookingsRequest(
            participant=participant,
            role=role,
            status=status_filter,
            today=today,
        )
    )


@router.get("/{booking_id}", response_model=BookingItem)
async def get_booking(
    booking_id: str,
    get_booking_use_case: FromDishka[GetBookingUseCase],
    participant: str = Depends(current_participant),
) -> BookingItem:
    """Get a booking.

    The organizer also sees every member's answer.

    Raises:
        HTTPException: If the booking ID is malformed or unknown
    """
    try:
        return await get_booking_use_case.execute(
            GetBookingRequest(booking_id=booking_id, viewer=participant)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/{booking_id}/cancel", response_model=BookingItem)
async def cancel_booking(
    booking_id: str,
    cancel_booking_use_case: FromDishka[CancelBookingUseCase],
    participant: str = Depends(current_participant),
) -> BookingItem:
    """Cancel a booking. Only the organizer may cancel.

    Raises:
        HTTPException: If the booking is unknown, already cancelled, or the
            caller is not the organizer
    """
    try:
        return await cancel_booking_use_case.execute(
            CancelBookingRequest(booking_id=booking_id, actor=participant)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/{booking_id}/leave", response_model=BookingItem)
async def leave_booking(
    booking_id: str,
    leave_booking_use_case: FromDishka[LeaveBookingUseCase],
    participant: str = Depends(current_participant),
) -> BookingItem:
    """Leave a booking as a member.

    Raises:
        HTTPException: If the booking is unknown, cancelled, or the caller
            is not a member
    """
    try:
        return await leave_booking_use_case.execute(
            LeaveBookingRequest(booking_id=booking_id, actor=participant)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)
