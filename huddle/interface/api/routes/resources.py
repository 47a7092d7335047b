"""Resource catalog routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from huddle.application.usecase.catalog import (
    ListResourcesResponse,
    ListResourcesUseCase,
)

router = APIRouter(prefix="/resources", tags=["resources"], route_class=DishkaRoute)


@router.get("", response_model=ListResourcesResponse)
async def list_resources(
    list_resources_use_case: FromDishka[ListResourcesUseCase],
) -> ListResourcesResponse:
    """List bookable rooms and the fixed time slots."""
    return await list_resources_use_case.execute()
