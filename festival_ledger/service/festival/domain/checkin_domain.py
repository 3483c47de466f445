"""
Check-in Engine

SOLD --scan--> USED (OK)
USED --scan--> DUPLICATE
VOID --scan--> VOID_INVALID
unknown --scan--> NOT_FOUND

Every attempt appends a Scan to the door log; only OK touches the ticket.
"""

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.scan_entity import Scan
from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.ticket_status import TicketStatus
from festival_ledger.service.festival.domain.sequence_domain import next_id
from festival_ledger.service.festival.domain.value_object.checkin_result import CheckinResult


_OUTCOME_BY_STATUS = {
    TicketStatus.SOLD: CheckinOutcome.OK,
    TicketStatus.USED: CheckinOutcome.DUPLICATE,
    TicketStatus.VOID: CheckinOutcome.VOID_INVALID,
}


@Logger.io
def check_in(
    store: FestivalStore, presented_tid: str, *, gate: str, when: str, time: str
) -> tuple[FestivalStore, CheckinResult]:
    ticket = store.find_ticket(presented_tid)
    outcome = _OUTCOME_BY_STATUS[ticket.status] if ticket else CheckinOutcome.NOT_FOUND

    scan_id, seq = next_id(store.seq, SequenceKind.SCAN, taken={s.scan_id for s in store.scans})
    scan = Scan(
        scan_id=scan_id,
        tid=ticket.tid if ticket else presented_tid.strip(),
        when=when,
        time=time,
        gate=gate,
        ok=outcome.admitted,
        msg=outcome.value,
    )

    next_store = store.appended(scans=(scan,)).with_seq(seq)
    if ticket and outcome is CheckinOutcome.OK:
        ticket = ticket.use()
        next_store = next_store.with_tickets_replaced(ticket)

    return next_store, CheckinResult(
        outcome=outcome, scan=scan, ticket=ticket, locale=store.locale
    )


def recent_scans(store: FestivalStore, limit: int) -> list[Scan]:
    return list(reversed(store.scans))[:limit]
