"""Unit tests for StaticResourceCatalog."""

import pytest

from huddle.adapter.catalog import StaticResourceCatalog
from huddle.adapter.error import CatalogConfigurationError
from huddle.config import CatalogSettings, ResourceSettings
from huddle.domain.value import TimeSlot


class TestStaticResourceCatalog:
    """Tests for the settings-backed catalog."""

    def test_default_catalog(self):
        """Default settings should give three rooms and the standard slots."""
        catalog = StaticResourceCatalog(CatalogSettings())

        assert [r.name for r in catalog.list_resources()] == [
            "Discussion Room A",
            "Discussion Room B",
            "Discussion Room C",
        ]
        assert catalog.get_resource("room-2").name == "Discussion Room B"
        assert catalog.get_resource("room-9") is None
        assert catalog.has_slot("12:00-14:00")
        assert not catalog.has_slot("12:00-13:00")

    def test_slots_sorted_chronologically(self):
        """Configured slots should be listed in time order."""
        catalog = StaticResourceCatalog(
            CatalogSettings(slots=["14:00-16:00", "08:00-10:00"])
        )

        assert catalog.list_slots() == [
            TimeSlot("08:00-10:00"),
            TimeSlot("14:00-16:00"),
        ]

    def test_malformed_slot(self):
        """A malformed slot should fail catalog construction."""
        with pytest.raises(CatalogConfigurationError, match="Invalid catalog"):
            StaticResourceCatalog(CatalogSettings(slots=["8am-10am"]))

    def test_invalid_capacity(self):
        """A room without capacity should be rejected."""
        with pytest.raises(CatalogConfigurationError):
            StaticResourceCatalog(
                CatalogSettings(
                    resources=[ResourceSettings(id="r", name="Room", capacity=0)]
                )
            )

    def test_duplicate_resource_ids(self):
        """Resource IDs must be unique."""
        with pytest.raises(CatalogConfigurationError, match="Duplicate resource"):
            StaticResourceCatalog(
                CatalogSettings(
                    resources=[
                        ResourceSettings(id="r", name="One"),
                        ResourceSettings(id="r", name="Two"),
                    ]
                )
            )

    def test_duplicate_slots(self):
        """Time slots must be unique."""
        with pytest.raises(CatalogConfigurationError, match="Duplicate time slots"):
            StaticResourceCatalog(
                CatalogSettings(slots=["08:00-10:00", "08:00-10:00"])
            )
