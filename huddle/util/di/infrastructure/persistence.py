"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from huddle.domain.repository import ConsensusStore
from huddle.persistence.store import InMemoryConsensusStore
from huddle.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Consensus store provider - concrete, no mocks needed.

    The store is APP-scoped: every request of a container works on the
    same bookings and invitations. Each container owns its own store.
    """

    @provide(scope=Scope.APP)
    def get_consensus_store(self) -> ConsensusStore:
        """Provide the consensus store."""
        logfire.info("Consensus store initialized", backend="memory")
        return InMemoryConsensusStore()
