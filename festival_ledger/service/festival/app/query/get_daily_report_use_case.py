from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.ledger_domain import daily_report
from festival_ledger.service.festival.domain.value_object.ledger_report import DailyReport


class GetDailyReportUseCase:
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
    async def execute(self, *, date: Optional[str] = None) -> DailyReport:
        """Z-report for ``date`` (festival-local today when omitted)."""
        report = daily_report(self.festival_store_repo.get().sales, date or self.clock.today())
        Logger.base.info(
            f'🧾 [Z-REPORT] {report.date}: {len(report.lines)} shows, EUR {report.total:.2f}'
        )
        return report
