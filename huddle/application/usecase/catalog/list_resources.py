"""List resources use case."""

from pydantic import BaseModel

from huddle.domain.service import ResourceCatalog


class ResourceItem(BaseModel):
    """Resource item in response."""

    resource_id: str
    name: str
    capacity: int


class ListResourcesResponse(BaseModel):
    """Bookable resources and time slots."""

    resources: list[ResourceItem]
    slots: list[str]


class ListResourcesUseCase:
    """Use case for listing what can be booked."""

    def __init__(self, catalog: ResourceCatalog) -> None:
        self.catalog = catalog

    async def execute(self) -> ListResourcesResponse:
        """List resources and the fixed slots."""
        return ListResourcesResponse(
            resources=[
                ResourceItem(resource_id=r.id, name=r.name, capacity=r.capacity)
                for r in self.catalog.list_resources()
            ],
            slots=[slot.root for slot in self.catalog.list_slots()],
        )
