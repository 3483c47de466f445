from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.capacity_domain import SaleRequest, sell
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)
from festival_ledger.service.festival.domain.value_object.sale_batch import SaleBatch


class SellTicketsUseCase:
    """
    On-site box office sale

    The capacity check and the append of tickets and sales happen inside one
    repo transaction, so concurrent sales for the last seats cannot both pass.
    """

    def __init__(
        self,
        *,
        festival_store_repo: IFestivalStoreRepo,
        clock: IClock,
        festival_year: int,
    ) -> None:
        self.festival_store_repo = festival_store_repo
        self.clock = clock
        self.festival_year = festival_year

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
        festival_year: int = Depends(Provide[Container.config_service.provided.FESTIVAL_YEAR]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, clock=clock, festival_year=festival_year)

    @Logger.io
    async def execute(self, *, request: SaleRequest) -> SaleBatch | Rejected:
        sold_at, sold_time = self.clock.today(), self.clock.now_time()
        result = await self.festival_store_repo.transact(
            lambda store: sell(
                store,
                request,
                sold_at=sold_at,
                sold_time=sold_time,
                festival_year=self.festival_year,
            )
        )

        if isinstance(result, Rejected):
            if result.reason is RejectionReason.CAPACITY_EXCEEDED:
                Logger.base.warning(f'🚫 [SELL] {result.message}')
            else:
                Logger.base.warning(f'⚠️ [SELL] Rejected {result.reason.value}: {result.message}')
            return result

        Logger.base.info(
            f'🎟️ [SELL] {result.quantity} x {request.type.value} for {request.show_id} '
            f'({request.method.value} EUR {result.amount:.2f}), {result.remaining} remaining'
        )
        return result
