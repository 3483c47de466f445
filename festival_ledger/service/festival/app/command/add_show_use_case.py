from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.schedule_domain import ShowDraft, add_show
from festival_ledger.service.festival.domain.value_object.rejection import Rejected


class AddShowUseCase:
    def __init__(self, *, festival_store_repo: IFestivalStoreRepo, show_id_prefix: str) -> None:
        self.festival_store_repo = festival_store_repo
        self.show_id_prefix = show_id_prefix

    @classmethod
    @inject
    def depends(
        cls,
        festival_store_repo: IFestivalStoreRepo = Depends(Provide[Container.festival_store_repo]),
        show_id_prefix: str = Depends(Provide[Container.config_service.provided.SHOW_ID_PREFIX]),
    ) -> Self:
        return cls(festival_store_repo=festival_store_repo, show_id_prefix=show_id_prefix)

    @Logger.io
    async def execute(self, *, draft: ShowDraft) -> Show | Rejected:
        """
        Add a show to the schedule.

        A rejected draft leaves the store untouched; the caller keeps the draft
        for correction. Overlaps with existing shows are allowed and reported by
        the schedule view.
        """
        result = await self.festival_store_repo.transact(
            lambda store: add_show(store, draft, show_prefix=self.show_id_prefix)
        )

        if isinstance(result, Rejected):
            Logger.base.warning(f'⚠️ [ADD_SHOW] Rejected: {result.message}')
        else:
            Logger.base.info(
                f'🎭 [ADD_SHOW] {result.show_id} "{result.title}" at {result.venue_id} '
                f'{result.date} {result.start}-{result.end}'
            )
        return result
