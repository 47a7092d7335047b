"""Daily schedule routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from huddle.application.usecase.booking import (
    GetScheduleRequest,
    GetScheduleResponse,
    GetScheduleUseCase,
)
from huddle.domain.error import DomainError
from huddle.interface.error import bad_request, to_http_exception

router = APIRouter(prefix="/schedule", tags=["schedule"], route_class=DishkaRoute)


@router.get("", response_model=GetScheduleResponse)
async def get_schedule(
    get_schedule_use_case: FromDishka[GetScheduleUseCase],
    day: date = Query(alias="date"),
    slot: str | None = Query(default=None),
    resource_id: str | None = Query(default=None),
) -> GetScheduleResponse:
    """Occupancy of every room on a day.

    Args:
        get_schedule_use_case: Get schedule use case from DI
        day: Calendar day (YYYY-MM-DD)
        slot: Optional slot to restrict the overview to
        resource_id: Optional room whose free slots are also reported

    Returns:
        Per-room slot occupancy with summary counters

    Raises:
        HTTPException: If the slot is malformed or the room is unknown
    """
    try:
        return await get_schedule_use_case.execute(
            GetScheduleRequest(date=day, slot=slot, resource_id=resource_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)
