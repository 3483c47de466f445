from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.capacity_domain import void_ticket
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.value_object.rejection import Rejected


class VoidTicketUseCase:
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
    async def execute(self, *, tid: str) -> Ticket | Rejected:
        """Void a SOLD ticket. Its capacity slot is released; its sale stays recorded."""
        result = await self.festival_store_repo.transact(lambda store: void_ticket(store, tid))

        if isinstance(result, Rejected):
            Logger.base.warning(f'⚠️ [VOID] {result.reason.value}: {result.message}')
        else:
            Logger.base.info(f'🗑️ [VOID] Ticket {result.tid} voided for {result.show_id}')
        return result
