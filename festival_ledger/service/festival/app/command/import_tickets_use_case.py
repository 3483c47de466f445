from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.ticket_import_domain import import_tickets
from festival_ledger.service.festival.domain.value_object.ticket_import_row import ImportOutcome


class ImportTicketsUseCase:
    """
    Bulk presale import from CSV text

    Imported tickets bypass the capacity guard. Shows pushed over capacity are
    reported in the outcome and logged, not rejected.
    """

    def __init__(self, *, festival_store_repo: IFestivalStoreRepo, clock: IClock) -> None:
        self.festival_store_repo = festival_store_repo
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, clock=clock)

    @Logger.io
    async def execute(self, *, csv_text: str) -> ImportOutcome:
        today, now = self.clock.today(), self.clock.now_time()
        outcome = await self.festival_store_repo.transact(
            lambda store: import_tickets(store, csv_text, today=today, now=now)
        )

        Logger.base.info(
            f'📥 [IMPORT] {len(outcome.imported)} tickets imported, {len(outcome.errors)} rows rejected'
        )
        for error in outcome.errors:
            Logger.base.warning(f'⚠️ [IMPORT] Line {error.line_no}: {error.message}')
        for show_id in outcome.oversold_show_ids:
            Logger.base.warning(f'🚨 [IMPORT] {show_id} is now over capacity')
        return outcome
