"""
Schedule Engine

Two shows conflict when they share venue and date and their [start, end) windows
overlap. Times are zero padded HH:MM strings, so string comparison orders them.

Conflicts are computed pairwise for every show on the schedule view. O(n²) is fine
at festival scale (a few hundred shows); no venue/date index is kept.
"""

from typing import Iterable, Optional

import attrs

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.show_category import ShowCategory
from festival_ledger.service.festival.domain.sequence_domain import next_id
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)


REQUIRED_SHOW_FIELDS = ('title', 'venue_id', 'date', 'start', 'end', 'capacity')


@attrs.frozen
class ShowDraft:
    """Field values gathered by the caller; kept intact on rejection for correction."""

    title: Optional[str] = None
    venue_id: Optional[str] = None
    date: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    capacity: Optional[int] = None
    category: ShowCategory = ShowCategory.SHOW
    headliner: Optional[str] = None
    tech_notes: Optional[str] = None


def overlaps(a_start: str, a_end: str, b_start: str, b_end: str) -> bool:
    """Half-open interval overlap: touching boundaries do not overlap."""
    return not (a_end <= b_start or a_start >= b_end)


def is_conflict(a: Show, b: Show) -> bool:
    return (
        a.show_id != b.show_id
        and a.venue_id == b.venue_id
        and a.date == b.date
        and overlaps(a.start, a.end, b.start, b.end)
    )


def conflicts_of(show: Show, all_shows: Iterable[Show]) -> list[Show]:
    return [other for other in all_shows if is_conflict(show, other)]


def _missing_fields(draft: ShowDraft) -> list[str]:
    missing = []
    for name in REQUIRED_SHOW_FIELDS:
        value = getattr(draft, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


@Logger.io
def validate_show_draft(store: FestivalStore, draft: ShowDraft) -> Optional[Rejected]:
    if missing := _missing_fields(draft):
        return Rejected.missing(*missing)
    if draft.capacity is None or draft.capacity <= 0:
        return Rejected.invalid('capacity', 'Capacity must be greater than 0')
    if store.find_venue(draft.venue_id or '') is None:
        return Rejected(
            reason=RejectionReason.UNKNOWN_REFERENCE,
            message=f'Unknown venue: {draft.venue_id}',
            fields=('venue_id',),
        )
    if (draft.end or '') <= (draft.start or ''):
        return Rejected.invalid('end', 'Show must end after it starts')
    return None


@Logger.io
def add_show(
    store: FestivalStore, draft: ShowDraft, *, show_prefix: str
) -> tuple[FestivalStore, Show | Rejected]:
    """Validate the draft and append a new show with a fresh show id.

    On rejection the store is returned unchanged.
    """
    if rejection := validate_show_draft(store, draft):
        return store, rejection

    show_id, seq = next_id(
        store.seq,
        SequenceKind.SHOW,
        taken={s.show_id for s in store.shows},
        show_prefix=show_prefix,
    )
    show = Show(
        show_id=show_id,
        title=(draft.title or '').strip(),
        venue_id=draft.venue_id or '',
        date=draft.date or '',
        start=draft.start or '',
        end=draft.end or '',
        capacity=int(draft.capacity or 0),
        category=draft.category,
        headliner=draft.headliner or None,
        tech_notes=draft.tech_notes or None,
    )
    return store.appended(shows=(show,)).with_seq(seq), show


def sorted_schedule(shows: Iterable[Show]) -> list[Show]:
    return sorted(shows, key=lambda s: s.sort_key)


def search_shows(shows: Iterable[Show], query: str) -> list[Show]:
    """Case-insensitive substring match on id, title and venue id; blank matches all."""
    return [s for s in shows if s.matches(query)]
