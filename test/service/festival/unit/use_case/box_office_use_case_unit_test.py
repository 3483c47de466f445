"""
Unit tests for the box office use cases

Test Coverage:
1. Sell stamps the festival-local clock and persists the new snapshot
2. Rejections come back as values and leave the snapshot untouched
3. Void releases a seat, search lists newest first
4. CSV import reports errors and oversold shows
"""

import pytest

from festival_ledger.service.festival.app.command.import_tickets_use_case import (
    ImportTicketsUseCase,
)
from festival_ledger.service.festival.app.command.sell_tickets_use_case import SellTicketsUseCase
from festival_ledger.service.festival.app.command.void_ticket_use_case import VoidTicketUseCase
from festival_ledger.service.festival.app.query.search_tickets_use_case import (
    SearchTicketsUseCase,
)
from festival_ledger.service.festival.domain.capacity_domain import SaleRequest
from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.ticket_status import TicketStatus, TicketType
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)
from festival_ledger.service.festival.domain.value_object.sale_batch import SaleBatch


pytestmark = pytest.mark.unit


def _request(quantity: int, show_id: str = 'IMP25-S02') -> SaleRequest:
    return SaleRequest(
        show_id=show_id, type=TicketType.GA, price=20.0, quantity=quantity, method=PaymentMethod.CARD
    )


@pytest.fixture
def sell_use_case(repo, clock):
    return SellTicketsUseCase(festival_store_repo=repo, clock=clock, festival_year=2025)


class TestSellTickets:
    @pytest.mark.asyncio
    async def test_sale_is_stamped_and_persisted(self, sell_use_case, repo, persister):
        # When
        batch = await sell_use_case.execute(request=_request(2))

        # Then
        assert isinstance(batch, SaleBatch)
        assert [t.tid for t in batch.tickets] == ['25-2-000001', '25-2-000002']
        assert all(t.sold_at == '2025-10-16' and t.sold_time == '18:30' for t in batch.tickets)
        assert batch.remaining == 218
        assert persister.load() == repo.get()

    @pytest.mark.asyncio
    async def test_capacity_rejection_leaves_the_store_alone(self, sell_use_case, repo):
        before = repo.get()

        result = await sell_use_case.execute(request=_request(221))

        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.CAPACITY_EXCEEDED
        assert repo.get() is before

    @pytest.mark.asyncio
    async def test_unknown_show(self, sell_use_case):
        result = await sell_use_case.execute(request=_request(1, show_id='IMP25-S42'))

        assert result.reason is RejectionReason.SHOW_NOT_FOUND


class TestVoidAndSearch:
    @pytest.mark.asyncio
    async def test_void_then_search(self, sell_use_case, repo):
        batch = await sell_use_case.execute(request=_request(3))
        void_use_case = VoidTicketUseCase(festival_store_repo=repo)
        search_use_case = SearchTicketsUseCase(festival_store_repo=repo)

        voided = await void_use_case.execute(tid=batch.tickets[0].tid.lower())
        found = await search_use_case.execute(query='25-2', limit=2)

        assert voided.status is TicketStatus.VOID
        assert [t.tid for t in found] == ['25-2-000003', '25-2-000002']
        assert len(repo.get().sales) == 3

    @pytest.mark.asyncio
    async def test_void_twice_is_rejected(self, sell_use_case, repo):
        batch = await sell_use_case.execute(request=_request(1))
        void_use_case = VoidTicketUseCase(festival_store_repo=repo)

        await void_use_case.execute(tid=batch.tickets[0].tid)
        again = await void_use_case.execute(tid=batch.tickets[0].tid)

        assert again.reason is RejectionReason.ALREADY_VOID


class TestImportTickets:
    @pytest.mark.asyncio
    async def test_import_reports_errors_and_keeps_good_rows(self, repo, clock):
        use_case = ImportTicketsUseCase(festival_store_repo=repo, clock=clock)

        outcome = await use_case.execute(
            csv_text='tid,show_id,price\nPX-1,IMP25-S01,10\nPX-2,IMP25-S77,10\n'
        )

        assert [t.tid for t in outcome.imported] == ['PX-1']
        assert [e.line_no for e in outcome.errors] == [3]
        assert repo.get().find_ticket('px-1').sold_at == '2025-10-16'
