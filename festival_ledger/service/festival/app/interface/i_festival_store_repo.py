"""
Festival Store Repository Interface

Single mutation entry point for the whole ledger.

[Design Principles]
- The store is one immutable snapshot; readers get the current one
- Commands run a pure function against the snapshot and the repo swaps in the result
- Commands are serialised, so read-check-replace (e.g. a sale) is atomic
- Persistence follows every swap and never blocks or fails the command
"""

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)


T = TypeVar('T')


class IFestivalStoreRepo(ABC):
    @abstractmethod
    def get(self) -> FestivalStore:
        """Return the current snapshot."""
        pass

    @abstractmethod
    async def transact(self, fn: Callable[[FestivalStore], tuple[FestivalStore, T]]) -> T:
        """
        Run ``fn`` against the current snapshot under the command lock

        Args:
            fn: Pure function returning (next snapshot, result)

        Returns:
            The result produced by ``fn``. The snapshot is only replaced (and
            persisted) when ``fn`` returned a different store.
        """
        pass

    @abstractmethod
    async def replace_all(self, *, store: FestivalStore) -> None:
        """Replace the whole snapshot (backup restore, last write wins)."""
        pass
