"""
Unit tests for FestivalStoreRepoImpl

Test Coverage:
1. transact swaps the snapshot only when the command returns a new store
2. Persistence failures are logged and never fail the command
3. Concurrent sales for the last seats are serialised
4. Task-group mode writes the newest snapshot in the background
"""

from unittest.mock import MagicMock

import anyio
import pytest

from festival_ledger.platform.exception.exceptions import PersistenceError
from festival_ledger.service.festival.app.interface.i_snapshot_persister import (
    ISnapshotPersister,
)
from festival_ledger.service.festival.domain.capacity_domain import SaleRequest, sell
from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.ticket_status import TicketType
from festival_ledger.service.festival.domain.value_object.sale_batch import SaleBatch
from festival_ledger.service.festival.driven_adapter.repo.festival_store_repo_impl import (
    FestivalStoreRepoImpl,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_persister(seed):
    persister = MagicMock(spec=ISnapshotPersister)
    persister.load.return_value = seed
    return persister


def _sell_one(show_id: str = 'IMP25-S01'):
    request = SaleRequest(
        show_id=show_id, type=TicketType.GA, price=15.0, quantity=1, method=PaymentMethod.CASH
    )

    def command(store):
        return sell(store, request, sold_at='2025-10-16', sold_time='19:00', festival_year=2025)

    return command


class TestTransact:
    def setup_method(self):
        self.unchanged = lambda store: (store, 'nothing to do')

    @pytest.mark.asyncio
    async def test_new_store_is_swapped_in_and_saved(self, mock_persister, seed):
        # Given
        repo = FestivalStoreRepoImpl(persister=mock_persister)

        # When
        result = await repo.transact(_sell_one())

        # Then
        assert isinstance(result, SaleBatch)
        assert repo.get().tickets == result.tickets
        mock_persister.save.assert_called_once_with(store=repo.get())

    @pytest.mark.asyncio
    async def test_unchanged_store_is_not_saved(self, mock_persister, seed):
        repo = FestivalStoreRepoImpl(persister=mock_persister)

        result = await repo.transact(self.unchanged)

        assert result == 'nothing to do'
        assert repo.get() is seed
        mock_persister.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_command_is_not_saved(self, mock_persister, seed):
        repo = FestivalStoreRepoImpl(persister=mock_persister)

        await repo.transact(_sell_one(show_id='IMP25-S99'))

        assert repo.get() is seed
        mock_persister.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_write_keeps_the_change_in_memory(self, mock_persister):
        mock_persister.save.side_effect = PersistenceError('disk full')
        repo = FestivalStoreRepoImpl(persister=mock_persister)

        result = await repo.transact(_sell_one())

        assert isinstance(result, SaleBatch)
        assert len(repo.get().tickets) == 1

    @pytest.mark.asyncio
    async def test_exceptions_from_the_command_propagate(self, mock_persister, seed):
        repo = FestivalStoreRepoImpl(persister=mock_persister)

        def broken(store):
            raise RuntimeError('boom')

        with pytest.raises(RuntimeError):
            await repo.transact(broken)
        assert repo.get() is seed


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_racing_sales_never_oversell(self, mock_persister, seed):
        """
        Given: a show with 180 seats
        When: 200 single-ticket sales race
        Then: exactly 180 succeed
        """
        repo = FestivalStoreRepoImpl(persister=mock_persister)
        results = []

        async def attempt():
            results.append(await repo.transact(_sell_one()))

        async with anyio.create_task_group() as tg:
            for _ in range(200):
                tg.start_soon(attempt)

        assert sum(isinstance(r, SaleBatch) for r in results) == 180
        assert len(repo.get().tickets_for_show('IMP25-S01')) == 180
        assert len({t.tid for t in repo.get().tickets}) == 180


class TestBackgroundPersistence:
    @pytest.mark.asyncio
    async def test_task_group_writes_latest_snapshot(self, mock_persister):
        async with anyio.create_task_group() as tg:
            repo = FestivalStoreRepoImpl(persister=mock_persister, task_group_provider=lambda: tg)
            for _ in range(3):
                await repo.transact(_sell_one())

        last_saved = mock_persister.save.call_args.kwargs['store']
        assert last_saved is repo.get()
        assert len(last_saved.tickets) == 3

    @pytest.mark.asyncio
    async def test_background_failure_does_not_cancel_the_task_group(self, mock_persister):
        mock_persister.save.side_effect = PersistenceError('read-only filesystem')

        async with anyio.create_task_group() as tg:
            repo = FestivalStoreRepoImpl(persister=mock_persister, task_group_provider=lambda: tg)
            await repo.transact(_sell_one())

        assert len(repo.get().tickets) == 1

    @pytest.mark.asyncio
    async def test_replace_all_swaps_and_saves(self, mock_persister, seed):
        repo = FestivalStoreRepoImpl(persister=mock_persister)
        restored = seed.with_seq({'TICKET': 99})

        await repo.replace_all(store=restored)

        assert repo.get() is restored
        mock_persister.save.assert_called_once_with(store=restored)
