"""Resource entity."""

from pydantic import Field

from huddle.domain.model.common import DomainModel
from huddle.domain.value import ResourceId


class Resource(DomainModel):
    """A bookable discussion room.

    Supplied by the resource catalog. Capacity is informational only;
    bookings are limited by slot exclusivity, not by head count.
    """

    id: ResourceId
    name: str
    capacity: int = Field(ge=1)
