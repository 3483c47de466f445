from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.checkin_domain import recent_scans
from festival_ledger.service.festival.domain.entity.scan_entity import Scan


class ListRecentScansUseCase:
    def __init__(self, *, festival_store_repo: IFestivalStoreRepo, default_limit: int) -> None:
        self.festival_store_repo = festival_store_repo
        self.default_limit = default_limit

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        default_limit: int = Depends(
            Provide[Container.config_service.provided.RECENT_SCANS_LIMIT]
        ),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, default_limit=default_limit)

    @Logger.io
    async def execute(self, *, limit: Optional[int] = None) -> list[Scan]:
        return recent_scans(self.festival_store_repo.get(), limit or self.default_limit)
