"""Static resource catalog built from settings."""

import logfire
from pydantic import ValidationError

from huddle.adapter.error import CatalogConfigurationError
from huddle.config import CatalogSettings
from huddle.domain.model import Resource
from huddle.domain.service.catalog import ResourceCatalog
from huddle.domain.value import ResourceId, TimeSlot


class StaticResourceCatalog(ResourceCatalog):
    """Resource catalog backed by the configured room and slot lists.

    The lists are validated once at construction and never change.
    """

    def __init__(self, settings: CatalogSettings) -> None:
        """Initialize catalog.

        Args:
            settings: Catalog settings

        Raises:
            CatalogConfigurationError: If a slot is malformed or a resource
                identifier is duplicated
        """
        try:
            self._resources = [
                Resource(id=ResourceId(r.id), name=r.name, capacity=r.capacity)
                for r in settings.resources
            ]
            self._slots = [TimeSlot(slot) for slot in settings.slots]
        except ValidationError as e:
            raise CatalogConfigurationError(f"Invalid catalog: {e}") from e

        ids = [resource.id for resource in self._resources]
        if len(set(ids)) != len(ids):
            raise CatalogConfigurationError("Duplicate resource identifiers")
        if len(set(self._slots)) != len(self._slots):
            raise CatalogConfigurationError("Duplicate time slots")

        self._slots.sort(key=lambda slot: slot.start)
        self._by_id = {resource.id: resource for resource in self._resources}

        logfire.info(
            "Resource catalog loaded",
            resource_count=len(self._resources),
            slot_count=len(self._slots),
        )

    def list_resources(self) -> list[Resource]:
        """List all bookable resources."""
        return list(self._resources)

    def get_resource(self, resource_id: ResourceId) -> Resource | None:
        """Find a resource by ID."""
        return self._by_id.get(resource_id)

    def list_slots(self) -> list[TimeSlot]:
        """List the fixed time slots in chronological order."""
        return list(self._slots)
