"""
Festival Store Repository Implementation

In-memory snapshot plus a snapshot persister.

[Concurrency]
- transact() holds one anyio.Lock for read-compute-swap, so two sales racing for
  the last seats are serialised and the second sees the first one's tickets
- Writes hold their own lock and always write the newest snapshot, so a slow
  write can never overwrite a newer one

[Persistence]
- With a task group (FastAPI lifespan) the write runs in a worker thread and the
  command returns immediately; without one it runs inline
- A failed write is logged as a warning and never fails the command
"""

from typing import Callable, Optional, TypeVar

import anyio
from anyio.abc import TaskGroup

from festival_ledger.platform.exception.exceptions import PersistenceError
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.app.interface.i_snapshot_persister import (
    ISnapshotPersister,
)
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)


T = TypeVar('T')


class FestivalStoreRepoImpl(IFestivalStoreRepo):
    def __init__(
        self,
        *,
        persister: ISnapshotPersister,
        task_group_provider: Optional[Callable[[], Optional[TaskGroup]]] = None,
    ) -> None:
        self.persister = persister
        self.task_group_provider = task_group_provider
        self._store = persister.load()
        self._command_lock = anyio.Lock()
        self._write_lock = anyio.Lock()

    def get(self) -> FestivalStore:
        return self._store

    @Logger.io
    async def transact(self, fn: Callable[[FestivalStore], tuple[FestivalStore, T]]) -> T:
        async with self._command_lock:
            next_store, result = fn(self._store)
            if next_store is self._store:
                return result
            self._store = next_store

        await self._schedule_persist()
        return result

    @Logger.io
    async def replace_all(self, *, store: FestivalStore) -> None:
        async with self._command_lock:
            self._store = store
        await self._schedule_persist()

    async def _schedule_persist(self) -> None:
        task_group = self.task_group_provider() if self.task_group_provider else None
        if task_group is None:
            await self._persist_latest(in_thread=False)
        else:
            task_group.start_soon(self._persist_latest, True)

    async def _persist_latest(self, in_thread: bool) -> None:
        async with self._write_lock:
            store = self._store
            try:
                if in_thread:
                    await anyio.to_thread.run_sync(lambda: self.persister.save(store=store))
                else:
                    self.persister.save(store=store)
            except PersistenceError as e:
                Logger.base.warning(f'⚠️ [PERSIST] Snapshot write failed, change kept in memory: {e.message}')
