from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.app.interface.i_snapshot_persister import (
    ISnapshotPersister,
)


class ExportBackupUseCase:
    def __init__(
        self,
        *,
        festival_store_repo: IFestivalStoreRepo,
        snapshot_persister: ISnapshotPersister,
        clock: IClock,
    ) -> None:
        self.festival_store_repo = festival_store_repo
        self.snapshot_persister = snapshot_persister
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        snapshot_persister: ISnapshotPersister = Depends(Provide[Container.snapshot_persister]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            festival_store_repo=festival_store_repo,
            snapshot_persister=snapshot_persister,
            clock=clock,
        )

    @Logger.io
    async def execute(self) -> tuple[str, bytes]:
        """Return (file name, snapshot document) for the current store."""
        document = self.snapshot_persister.encode(store=self.festival_store_repo.get())
        filename = f'MSDAS_BACKUP_{self.clock.today()}.json'
        Logger.base.info(f'💾 [BACKUP] Exported {filename} ({len(document)} bytes)')
        return filename, document
