from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
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


class RestoreBackupUseCase:
    def __init__(
        self, *, festival_store_repo: IFestivalStoreRepo, snapshot_persister: ISnapshotPersister
    ) -> None:
        self.festival_store_repo = festival_store_repo
        self.snapshot_persister = snapshot_persister

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        snapshot_persister: ISnapshotPersister = Depends(Provide[Container.snapshot_persister]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, snapshot_persister=snapshot_persister)

    @Logger.io
    async def execute(self, *, document: bytes) -> FestivalStore:
        """
        Replace the whole store with a backup document (last write wins).

        Raises:
            PersistenceError: document is not a valid snapshot; the store is untouched
        """
        store = self.snapshot_persister.decode(data=document)
        await self.festival_store_repo.replace_all(store=store)
        Logger.base.info(
            f'♻️ [RESTORE] Backup restored: {len(store.tickets)} tickets, '
            f'{len(store.shows)} shows, {len(store.sales)} sales'
        )
        return store
