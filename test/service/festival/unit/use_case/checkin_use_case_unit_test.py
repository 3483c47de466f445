import pytest
import pytest_asyncio

from festival_ledger.service.festival.app.command.check_in_ticket_use_case import (
    CheckInTicketUseCase,
)
from festival_ledger.service.festival.app.command.toggle_locale_use_case import (
    ToggleLocaleUseCase,
)
from festival_ledger.service.festival.app.query.list_recent_scans_use_case import (
    ListRecentScansUseCase,
)
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.ticket_status import TicketType


pytestmark = pytest.mark.unit


@pytest_asyncio.fixture
async def stocked_repo(repo):
    ticket = Ticket(tid='PX-1', show_id='IMP25-S01', type=TicketType.GA, price=18)
    await repo.transact(lambda store: (store.appended(tickets=(ticket,)), None))
    return repo


class TestCheckIn:
    @pytest.mark.asyncio
    async def test_first_scan_admits_second_is_duplicate(self, stocked_repo, clock):
        use_case = CheckInTicketUseCase(
            festival_store_repo=stocked_repo, clock=clock, default_gate='Main'
        )

        first = await use_case.execute(tid='px-1')
        second = await use_case.execute(tid='PX-1', gate='Side')

        assert first.outcome is CheckinOutcome.OK
        assert first.scan.gate == 'Main'
        assert (first.scan.when, first.scan.time) == ('2025-10-16', '18:30')
        assert second.outcome is CheckinOutcome.DUPLICATE
        assert second.scan.gate == 'Side'

    @pytest.mark.asyncio
    async def test_recent_scans_include_refusals(self, stocked_repo, clock):
        use_case = CheckInTicketUseCase(
            festival_store_repo=stocked_repo, clock=clock, default_gate='Main'
        )
        scans_use_case = ListRecentScansUseCase(festival_store_repo=stocked_repo, default_limit=20)

        await use_case.execute(tid='PX-1')
        await use_case.execute(tid='nobody')

        scans = await scans_use_case.execute()
        assert [(s.tid, s.ok) for s in scans] == [('nobody', False), ('PX-1', True)]
        assert [s.tid for s in await scans_use_case.execute(limit=1)] == ['nobody']


class TestLocale:
    @pytest.mark.asyncio
    async def test_toggle_flips_and_persists(self, repo, persister, clock):
        use_case = ToggleLocaleUseCase(festival_store_repo=repo)

        assert await use_case.execute() is Locale.DE
        assert persister.load().locale is Locale.DE

        checkin = CheckInTicketUseCase(festival_store_repo=repo, clock=clock, default_gate='Main')
        result = await checkin.execute(tid='ghost')
        assert result.locale is Locale.DE

        assert await use_case.execute() is Locale.EN
