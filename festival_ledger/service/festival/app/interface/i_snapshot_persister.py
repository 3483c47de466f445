from abc import ABC, abstractmethod

from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)


class ISnapshotPersister(ABC):
    """Reads and writes the snapshot document."""

    @abstractmethod
    def load(self) -> FestivalStore:
        """
        Load the persisted snapshot

        A missing document seeds default reference data; a corrupt one is logged
        and replaced by the seed. Never raises for either case.
        """
        pass

    @abstractmethod
    def save(self, *, store: FestivalStore) -> None:
        """Write the whole snapshot. Raises PersistenceError on failure."""
        pass

    @abstractmethod
    def encode(self, *, store: FestivalStore) -> bytes:
        """Serialise a store to the snapshot document (backup export)."""
        pass

    @abstractmethod
    def decode(self, *, data: bytes) -> FestivalStore:
        """Parse a snapshot document. Raises PersistenceError when malformed."""
        pass
