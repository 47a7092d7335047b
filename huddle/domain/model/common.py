"""Base model for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    State changes produce a new instance through evolve(); the consensus
    store swaps the new instance in as a whole.
    """

    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> Self:
        """Copy of the entity with the given fields replaced.

        Changed values are validated against the field types.
        """
        return self.model_validate({**self.model_dump(), **changes})
