"""
Check-in engine

Key points:
1. Exactly-once redemption: SOLD -> USED, any later scan is DUPLICATE
2. VOID and unknown tickets are refused and never mutated
3. Every attempt, admitted or not, is appended to the door log
"""

import pytest

from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.checkin_domain import check_in, recent_scans
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.ticket_status import TicketStatus, TicketType


def _store(status: TicketStatus = TicketStatus.SOLD) -> FestivalStore:
    return FestivalStore(
        tickets=(Ticket(tid='T1', show_id='IMP25-S01', type=TicketType.GA, price=18, status=status),)
    )


def _scan(store: FestivalStore, tid: str):
    return check_in(store, tid, gate='GateA', when='2025-10-16', time='19:05')


class TestCheckIn:
    def test_lowercase_scan_admits_then_duplicate(self):
        """
        Given: ticket T1 is SOLD
        When: 't1' is scanned, then 'T1'
        Then: OK and the ticket is USED, then DUPLICATE
        """
        store, first = _scan(_store(), 't1')

        assert first.outcome is CheckinOutcome.OK
        assert store.find_ticket('T1').status is TicketStatus.USED

        store, second = _scan(store, 'T1')

        assert second.outcome is CheckinOutcome.DUPLICATE
        assert store.find_ticket('T1').status is TicketStatus.USED

    def test_duplicate_is_stable_across_retries(self):
        store, _ = _scan(_store(), 'T1')

        for _ in range(3):
            store, result = _scan(store, 'T1')
            assert result.outcome is CheckinOutcome.DUPLICATE

    def test_void_ticket_is_refused_and_left_void(self):
        store, result = _scan(_store(TicketStatus.VOID), 'T1')

        assert result.outcome is CheckinOutcome.VOID_INVALID
        assert not result.admitted
        assert store.find_ticket('T1').status is TicketStatus.VOID

    def test_unknown_ticket_records_the_presented_id(self):
        store, result = _scan(_store(), '  ghost-7 ')

        assert result.outcome is CheckinOutcome.NOT_FOUND
        assert result.ticket is None
        assert store.scans[-1].tid == 'ghost-7'
        assert store.tickets == _store().tickets

    @pytest.mark.parametrize(
        'status, outcome',
        [
            (TicketStatus.SOLD, CheckinOutcome.OK),
            (TicketStatus.USED, CheckinOutcome.DUPLICATE),
            (TicketStatus.VOID, CheckinOutcome.VOID_INVALID),
        ],
    )
    def test_every_attempt_is_audited(self, status, outcome):
        store, result = _scan(_store(status), 'T1')

        assert len(store.scans) == 1
        scan = store.scans[0]
        assert scan == result.scan
        assert scan.scan_id == 'SCAN-000001'
        assert scan.tid == 'T1'
        assert scan.gate == 'GateA'
        assert (scan.when, scan.time) == ('2025-10-16', '19:05')
        assert scan.ok is (outcome is CheckinOutcome.OK)
        assert scan.msg == outcome.value

    def test_scan_ids_are_unique(self):
        store = _store()
        for tid in ['T1', 'T1', 'nope']:
            store, _ = _scan(store, tid)

        assert [s.scan_id for s in store.scans] == ['SCAN-000001', 'SCAN-000002', 'SCAN-000003']

    def test_result_carries_the_active_locale(self):
        store = _store()
        german = FestivalStore(tickets=store.tickets, locale=Locale.DE)

        _, result = _scan(german, 'T1')

        assert result.locale is Locale.DE


def test_recent_scans_are_newest_first():
    store = _store()
    for tid in ['a', 'b', 'c']:
        store, _ = _scan(store, tid)

    assert [s.tid for s in recent_scans(store, 2)] == ['c', 'b']


class TestTicketTransitions:
    @pytest.mark.parametrize(
        'status, terminal',
        [(TicketStatus.SOLD, False), (TicketStatus.USED, True), (TicketStatus.VOID, True)],
    )
    def test_only_sold_is_open(self, status, terminal):
        assert status.is_terminal is terminal

    @pytest.mark.parametrize('status', [TicketStatus.USED, TicketStatus.VOID])
    def test_terminal_tickets_cannot_move(self, status):
        [ticket] = _store(status).tickets

        with pytest.raises(ValueError):
            ticket.use()
        with pytest.raises(ValueError):
            ticket.void()
