"""Consensus store implementations."""

from .inmemory import InMemoryConsensusStore

__all__ = [
    "InMemoryConsensusStore",
]
