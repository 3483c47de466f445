from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.entity.shift_entity import Shift
from festival_ledger.service.festival.domain.staffing_domain import ShiftDraft, add_shift
from festival_ledger.service.festival.domain.value_object.rejection import Rejected


class AddShiftUseCase:
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
    async def execute(self, *, draft: ShiftDraft) -> Shift | Rejected:
        result = await self.festival_store_repo.transact(lambda store: add_shift(store, draft))
        if isinstance(result, Rejected):
            Logger.base.warning(f'⚠️ [ADD_SHIFT] Rejected: {result.message}')
        else:
            Logger.base.info(
                f'🗓️ [ADD_SHIFT] {result.shift_id} {result.role} x{result.cap} at {result.venue_id}'
            )
        return result
