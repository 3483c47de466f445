from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.capacity_domain import remaining_capacity, sold_count
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.entity.venue_entity import Venue
from festival_ledger.service.festival.domain.schedule_domain import (
    conflicts_of,
    search_shows,
    sorted_schedule,
)


@attrs.frozen
class ScheduleEntry:
    show: Show
    venue: Venue | None
    conflicts: tuple[Show, ...]
    sold: int
    remaining: int


class ListScheduleUseCase:
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
    async def list_all(self, *, query: str = '') -> list[ScheduleEntry]:
        """
        Shows ordered by date and start, each with its venue conflicts and seats left.

        query narrows the listed shows; conflicts still consider the whole schedule.
        """
        store = self.festival_store_repo.get()
        return [
            ScheduleEntry(
                show=show,
                venue=store.find_venue(show.venue_id),
                conflicts=tuple(conflicts_of(show, store.shows)),
                sold=sold_count(store, show.show_id),
                remaining=remaining_capacity(store, show),
            )
            for show in sorted_schedule(search_shows(store.shows, query))
        ]
