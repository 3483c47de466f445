"""
Identifier & Sequence Service

Counters live in the store's ``seq`` map and are advanced copy-on-write: every function
returns the issued value together with the next map, never mutating the one passed in.
A counter holds the next value to hand out and starts at 1.

Identifiers are counter based (prefix + zero padded number), never clock based, so two
calls in the same tick always differ. Ticket ids are partitioned by show:
``{yy}-{last char of show id}-{seq:06}``.
"""

from typing import Callable, Collection, Mapping

from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind


_ID_FORMATS: dict[SequenceKind, str] = {
    SequenceKind.SALE: 'SID-{n:06d}',
    SequenceKind.SCAN: 'SCAN-{n:06d}',
    SequenceKind.EXP: 'EXP-{n:04d}',
    SequenceKind.SHIFT: 'SH-{n:04d}',
    SequenceKind.ASSIGN: 'AS-{n:04d}',
    SequenceKind.PERSON: 'P{n:04d}',
    SequenceKind.SHOW: '{prefix}-S{n:02d}',
    SequenceKind.IMPORT: 'TID-{n:06d}',
}


def _current(seq: Mapping[str, int], kind: SequenceKind) -> int:
    return max(1, int(seq.get(kind.value, 1)))


def next_sequence(seq: Mapping[str, int], kind: SequenceKind) -> tuple[int, dict[str, int]]:
    return reserve_block(seq, kind, 1)


def reserve_block(
    seq: Mapping[str, int], kind: SequenceKind, quantity: int, *, start_at: int | None = None
) -> tuple[int, dict[str, int]]:
    """Reserve ``quantity`` consecutive numbers in one step and return the first one."""
    if quantity < 1:
        raise ValueError('quantity must be at least 1')
    first = max(_current(seq, kind), start_at or 0)
    advanced = dict(seq)
    advanced[kind.value] = first + quantity
    return first, advanced


def format_id(kind: SequenceKind, n: int, *, show_prefix: str = 'SHOW') -> str:
    if kind is SequenceKind.TICKET:
        raise ValueError('Ticket ids are partitioned by show, use format_ticket_id')
    return _ID_FORMATS[kind].format(n=n, prefix=show_prefix)


def next_id(
    seq: Mapping[str, int],
    kind: SequenceKind,
    *,
    taken: Collection[str] = (),
    show_prefix: str = 'SHOW',
) -> tuple[str, dict[str, int]]:
    """Issue the next identifier of ``kind`` that is not already in ``taken``.

    ``taken`` covers ids that entered the store without going through the counter
    (seed data, restored backups).
    """
    ids, advanced = reserve_ids(
        seq, kind, 1, taken={t.upper() for t in taken}, show_prefix=show_prefix
    )
    return ids[0], advanced


def format_ticket_id(*, festival_year: int, show_id: str, n: int) -> str:
    partition = show_id[-1:] or 'X'
    return f'{str(festival_year)[-2:]}-{partition}-{n:06d}'


def _free_block(
    start: int, quantity: int, make_id: Callable[[int], str], taken: Collection[str]
) -> tuple[int, list[str]]:
    while True:
        ids = [make_id(n) for n in range(start, start + quantity)]
        collision = next((i for i, id_ in enumerate(ids) if id_.upper() in taken), None)
        if collision is None:
            return start, ids
        start += collision + 1


def reserve_ids(
    seq: Mapping[str, int],
    kind: SequenceKind,
    quantity: int,
    *,
    taken: Collection[str] = (),
    show_prefix: str = 'SHOW',
) -> tuple[list[str], dict[str, int]]:
    """Reserve ``quantity`` consecutive identifiers of ``kind`` in one step.

    ``taken`` holds upper-cased ids already in the store.
    """
    start, ids = _free_block(
        _current(seq, kind),
        quantity,
        lambda n: format_id(kind, n, show_prefix=show_prefix),
        taken,
    )
    _, advanced = reserve_block(seq, kind, quantity, start_at=start)
    return ids, advanced


def reserve_ticket_ids(
    seq: Mapping[str, int],
    *,
    show_id: str,
    quantity: int,
    festival_year: int,
    taken: Collection[str] = (),
) -> tuple[list[str], dict[str, int]]:
    """Reserve a block of ``quantity`` consecutive ticket numbers.

    The block starts at the lowest counter value whose ids are all free; the counter
    then moves past the block, so numbers are never handed out twice.
    """
    start, tids = _free_block(
        _current(seq, SequenceKind.TICKET),
        quantity,
        lambda n: format_ticket_id(festival_year=festival_year, show_id=show_id, n=n),
        taken,
    )
    _, advanced = reserve_block(seq, SequenceKind.TICKET, quantity, start_at=start)
    return tids, advanced
