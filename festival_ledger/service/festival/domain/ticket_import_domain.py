"""
Bulk presale import

Best-effort comma splitter: blank lines dropped, cells trimmed, no quoting. The
header row names the columns; unknown columns are ignored and missing ones
fall back to defaults (generated tid, first show, GA, SOLD, price 0, today, now).

Each data row becomes either a ParsedTicketRow or an ImportRowError. Errors are
collected per row, valid rows are still imported.

Imported tickets are PRESALE and skip the capacity guard, so a show can end up
oversold; the outcome lists those shows.
"""

from typing import Optional

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.capacity_domain import oversold_shows
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.ticket_status import (
    SalesChannel,
    TicketStatus,
    TicketType,
)
from festival_ledger.service.festival.domain.money import is_valid_amount
from festival_ledger.service.festival.domain.sequence_domain import next_id
from festival_ledger.service.festival.domain.value_object.ticket_import_row import (
    ImportOutcome,
    ImportRowError,
    ParsedTicketRow,
)


IMPORT_COLUMNS = (
    'tid',
    'show_id',
    'type',
    'buyer',
    'email',
    'status',
    'price',
    'sold_at',
    'sold_time',
)

ParsedRow = ParsedTicketRow | ImportRowError


def split_rows(text: str) -> list[tuple[int, list[str]]]:
    """Split into (line number, cells), skipping blank lines."""
    return [
        (line_no, [cell.strip() for cell in line.split(',')])
        for line_no, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def _enum_or_none(enum_cls, raw: str):
    try:
        return enum_cls(raw.upper())
    except ValueError:
        return None


def _parse_price(raw: str) -> Optional[float]:
    try:
        price = float(raw)
    except ValueError:
        return None
    return price if is_valid_amount(price) else None


@Logger.io
def parse_ticket_rows(
    store: FestivalStore, text: str, *, today: str, now: str
) -> tuple[dict[str, int], list[ParsedRow]]:
    """Parse the CSV text against the current store.

    Returns the advanced sequence map (generated tids consume IMPORT numbers) and
    one parsed row or error per data line.
    """
    rows = split_rows(text)
    if not rows:
        return dict(store.seq), [ImportRowError(line_no=1, message='Header row required')]

    header_line, header = rows[0]
    index = {name.lower(): i for i, name in enumerate(header)}
    if not any(column in index for column in IMPORT_COLUMNS):
        return dict(store.seq), [
            ImportRowError(
                line_no=header_line,
                message=f'Header row names none of: {", ".join(IMPORT_COLUMNS)}',
                raw=tuple(header),
            )
        ]

    default_show_id = store.shows[0].show_id if store.shows else ''
    taken = {t.tid.upper() for t in store.tickets}
    seq: dict[str, int] = dict(store.seq)
    parsed: list[ParsedRow] = []

    for line_no, cells in rows[1:]:
        if len(cells) > len(header):
            parsed.append(
                ImportRowError(
                    line_no=line_no,
                    message=f'Expected at most {len(header)} columns, got {len(cells)}',
                    raw=tuple(cells),
                )
            )
            continue

        def cell(column: str) -> str:
            i = index.get(column)
            return cells[i] if i is not None and i < len(cells) else ''

        problems = []
        ticket_type = _enum_or_none(TicketType, cell('type') or TicketType.GA.value)
        if ticket_type is None:
            problems.append(f'unknown type {cell("type")!r}')
        status = _enum_or_none(TicketStatus, cell('status') or TicketStatus.SOLD.value)
        if status is None:
            problems.append(f'unknown status {cell("status")!r}')
        price = _parse_price(cell('price') or '0')
        if price is None:
            problems.append(f'bad price {cell("price")!r}')
        show_id = cell('show_id') or default_show_id
        if store.find_show(show_id) is None:
            problems.append(f'unknown show {show_id!r}' if show_id else 'no show to import into')

        tid = cell('tid')
        if tid and tid.upper() in taken:
            problems.append(f'duplicate tid {tid!r}')

        if problems:
            parsed.append(
                ImportRowError(line_no=line_no, message='; '.join(problems), raw=tuple(cells))
            )
            continue

        if not tid:
            tid, seq = next_id(seq, SequenceKind.IMPORT, taken=taken)
        taken.add(tid.upper())

        parsed.append(
            ParsedTicketRow(
                line_no=line_no,
                ticket=Ticket(
                    tid=tid,
                    show_id=show_id,
                    type=ticket_type,
                    price=price,
                    status=status,
                    channel=SalesChannel.PRESALE,
                    sold_at=cell('sold_at') or today,
                    sold_time=cell('sold_time') or now,
                    buyer=cell('buyer'),
                    email=cell('email'),
                ),
            )
        )

    return seq, parsed


@Logger.io
def import_tickets(
    store: FestivalStore, text: str, *, today: str, now: str
) -> tuple[FestivalStore, ImportOutcome]:
    seq, parsed = parse_ticket_rows(store, text, today=today, now=now)
    imported = tuple(row.ticket for row in parsed if isinstance(row, ParsedTicketRow))
    errors = tuple(row for row in parsed if isinstance(row, ImportRowError))

    if not imported:
        return store, ImportOutcome(imported=(), errors=errors)

    next_store = store.appended(tickets=imported).with_seq(seq)
    touched = {t.show_id for t in imported}
    oversold = tuple(s.show_id for s in oversold_shows(next_store) if s.show_id in touched)
    return next_store, ImportOutcome(imported=imported, errors=errors, oversold_show_ids=oversold)
