"""Resource catalog interface."""

from huddle.domain.model import Resource
from huddle.domain.value import ResourceId, TimeSlot


class ResourceCatalog:
    """Read-only source of bookable resources and the fixed slot list."""

    def list_resources(self) -> list[Resource]:
        """List all bookable resources.

        Returns:
            Resources in display order
        """
        raise NotImplementedError

    def get_resource(self, resource_id: ResourceId) -> Resource | None:
        """Find a resource by ID.

        Args:
            resource_id: Resource identifier

        Returns:
            The resource if known, None otherwise
        """
        raise NotImplementedError

    def list_slots(self) -> list[TimeSlot]:
        """List the fixed time slots in chronological order."""
        raise NotImplementedError

    def has_slot(self, slot: str) -> bool:
        """Check whether a slot belongs to the fixed slot list."""
        return any(known.root == slot for known in self.list_slots())
