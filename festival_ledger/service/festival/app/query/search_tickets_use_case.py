from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.capacity_domain import search_tickets
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket


class SearchTicketsUseCase:
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
    async def execute(self, *, query: str = '', limit: int = 100) -> list[Ticket]:
        """Newest tickets first; an empty query lists everything."""
        tickets = search_tickets(self.festival_store_repo.get(), query)
        return list(reversed(tickets))[:limit]
