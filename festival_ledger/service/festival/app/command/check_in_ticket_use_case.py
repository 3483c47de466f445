from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.checkin_domain import check_in
from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.value_object.checkin_result import CheckinResult


class CheckInTicketUseCase:
    def __init__(
        self, *, festival_store_repo: IFestivalStoreRepo, clock: IClock, default_gate: str
    ) -> None:
        self.festival_store_repo = festival_store_repo
        self.clock = clock
        self.default_gate = default_gate

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
        default_gate: str = Depends(Provide[Container.config_service.provided.DEFAULT_GATE]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, clock=clock, default_gate=default_gate)

    @Logger.io
    async def execute(self, *, tid: str, gate: Optional[str] = None) -> CheckinResult:
        """
        Redeem a presented ticket id at the door.

        Never raises for business outcomes: DUPLICATE, VOID_INVALID and NOT_FOUND
        come back as the result, and every attempt lands in the door log.
        """
        when, time = self.clock.today(), self.clock.now_time()
        result = await self.festival_store_repo.transact(
            lambda store: check_in(store, tid, gate=gate or self.default_gate, when=when, time=time)
        )

        if result.outcome is CheckinOutcome.OK:
            Logger.base.info(f'✅ [CHECKIN] {result.scan.tid} admitted at {result.scan.gate}')
        else:
            Logger.base.warning(
                f'🚫 [CHECKIN] {result.scan.tid} refused at {result.scan.gate}: {result.outcome.value}'
            )
        return result
