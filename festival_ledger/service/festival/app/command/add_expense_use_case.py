from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.entity.expense_entity import Expense
from festival_ledger.service.festival.domain.staffing_domain import ExpenseDraft, add_expense
from festival_ledger.service.festival.domain.value_object.rejection import Rejected


class AddExpenseUseCase:
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
    async def execute(self, *, draft: ExpenseDraft) -> Expense | Rejected:
        result = await self.festival_store_repo.transact(lambda store: add_expense(store, draft))
        if isinstance(result, Rejected):
            Logger.base.warning(f'⚠️ [EXPENSE] Rejected: {result.message}')
        else:
            Logger.base.info(
                f'💶 [EXPENSE] {result.eid} {result.cat} EUR {result.amount:.2f} to {result.payee}'
            )
        return result
