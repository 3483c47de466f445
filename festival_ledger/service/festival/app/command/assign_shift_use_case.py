from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.entity.shift_entity import Assignment
from festival_ledger.service.festival.domain.staffing_domain import assign
from festival_ledger.service.festival.domain.value_object.rejection import Rejected


class AssignShiftUseCase:
    """Bind a person to a shift. Headcount above the shift's cap is allowed."""

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
    async def execute(
        self, *, pid: str, shift_id: str, notes: Optional[str] = None
    ) -> Assignment | Rejected:
        result = await self.festival_store_repo.transact(
            lambda store: assign(store, pid=pid, shift_id=shift_id, notes=notes)
        )
        if isinstance(result, Rejected):
            Logger.base.warning(f'⚠️ [ASSIGN] Rejected: {result.message}')
        else:
            Logger.base.info(f'🤝 [ASSIGN] {result.pid} -> {result.shift_id}')
        return result
