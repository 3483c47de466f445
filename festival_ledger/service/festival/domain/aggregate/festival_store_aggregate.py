"""
Festival Store Aggregate - the single aggregate root of the ledger

[Design]
- Immutable snapshot: every command computes the next FestivalStore and the repo swaps it whole
- Entities reference each other by identifier only, so a snapshot serialises wholesale
- Sequence counters live next to the entities and travel with every snapshot

[Business Invariants]
- tid / show_id / venue_id / sid / scan_id are unique within the store
- Non-void tickets of a show never exceed its capacity at the moment of sale
"""

from typing import Mapping, Optional

import attrs

from festival_ledger.service.festival.domain.entity.expense_entity import Expense
from festival_ledger.service.festival.domain.entity.person_entity import Person
from festival_ledger.service.festival.domain.entity.sale_entity import Sale
from festival_ledger.service.festival.domain.entity.scan_entity import Scan
from festival_ledger.service.festival.domain.entity.shift_entity import Assignment, Shift
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.entity.venue_entity import Venue
from festival_ledger.service.festival.domain.enum.locale import Locale


@attrs.frozen
class FestivalStore:
    tickets: tuple[Ticket, ...] = attrs.field(default=(), converter=tuple)
    shows: tuple[Show, ...] = attrs.field(default=(), converter=tuple)
    venues: tuple[Venue, ...] = attrs.field(default=(), converter=tuple)
    persons: tuple[Person, ...] = attrs.field(default=(), converter=tuple)
    shifts: tuple[Shift, ...] = attrs.field(default=(), converter=tuple)
    assigns: tuple[Assignment, ...] = attrs.field(default=(), converter=tuple)
    sales: tuple[Sale, ...] = attrs.field(default=(), converter=tuple)
    expenses: tuple[Expense, ...] = attrs.field(default=(), converter=tuple)
    scans: tuple[Scan, ...] = attrs.field(default=(), converter=tuple)
    seq: dict[str, int] = attrs.field(factory=dict, converter=dict, hash=False)
    locale: Locale = Locale.EN

    # ------------------------------------------------------------------ lookups

    def find_show(self, show_id: str) -> Optional[Show]:
        return next((s for s in self.shows if s.show_id == show_id), None)

    def find_venue(self, venue_id: str) -> Optional[Venue]:
        return next((v for v in self.venues if v.venue_id == venue_id), None)

    def find_ticket(self, presented_tid: str) -> Optional[Ticket]:
        """Case-insensitive ticket lookup."""
        return next((t for t in self.tickets if t.matches_tid(presented_tid)), None)

    def find_person(self, pid: str) -> Optional[Person]:
        return next((p for p in self.persons if p.pid == pid), None)

    def find_shift(self, shift_id: str) -> Optional[Shift]:
        return next((s for s in self.shifts if s.shift_id == shift_id), None)

    def tickets_for_show(self, show_id: str) -> list[Ticket]:
        return [t for t in self.tickets if t.show_id == show_id]

    # ---------------------------------------------------------------- mutations

    def with_tickets_replaced(self, *updated: Ticket) -> 'FestivalStore':
        by_tid = {t.tid: t for t in updated}
        return attrs.evolve(
            self, tickets=tuple(by_tid.get(t.tid, t) for t in self.tickets)
        )

    def appended(self, **collections: tuple) -> 'FestivalStore':
        """Return a new store with the given entities appended to their collections."""
        changes = {name: getattr(self, name) + tuple(rows) for name, rows in collections.items()}
        return attrs.evolve(self, **changes)

    def with_seq(self, seq: Mapping[str, int]) -> 'FestivalStore':
        return attrs.evolve(self, seq=seq)
