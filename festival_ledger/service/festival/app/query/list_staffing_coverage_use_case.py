from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.staffing_domain import coverage
from festival_ledger.service.festival.domain.value_object.staffing_coverage import ShiftCoverage


class ListStaffingCoverageUseCase:
    def __init__(self, *, festival_store_repo: IFestivalStoreRepo) -> None:
        self.festival_store_repo = festival_store_repo

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo)

    @Logger.io
    async def execute(self) -> list[ShiftCoverage]:
        rows = coverage(self.festival_store_repo.get())
        if overstaffed := [row.shift.shift_id for row in rows if row.overstaffed]:
            Logger.base.warning(f'⚠️ [STAFFING] Over cap: {", ".join(overstaffed)}')
        return rows
