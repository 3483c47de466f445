from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from festival_ledger.platform.config.di import Container
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.domain.enum.locale import Locale


class ToggleLocaleUseCase:
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
    async def execute(self) -> Locale:
        def toggle(store):
            locale = store.locale.toggled()
            return attrs.evolve(store, locale=locale), locale

        locale = await self.festival_store_repo.transact(toggle)
        Logger.base.info(f'🌐 [LOCALE] Switched to {locale.value}')
        return locale
