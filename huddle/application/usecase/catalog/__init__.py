"""Catalog use cases."""

from huddle.application.usecase.catalog.list_resources import (
    ListResourcesResponse,
    ListResourcesUseCase,
    ResourceItem,
)

__all__ = [
    "ListResourcesResponse",
    "ListResourcesUseCase",
    "ResourceItem",
]
