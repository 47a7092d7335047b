"""Repository interfaces for Huddle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from huddle.domain.repository.consensus import (
    ConsensusChange,
    ConsensusStore,
    CreationGuard,
    Transaction,
)

__all__ = [
    "ConsensusChange",
    "ConsensusStore",
    "CreationGuard",
    "Transaction",
]
