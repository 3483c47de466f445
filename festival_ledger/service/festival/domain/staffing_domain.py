"""
People, volunteer shifts and expenses.

Shift ``cap`` is the headcount needed. Assigning beyond it is allowed; coverage()
makes over- and under-staffing visible instead of rejecting it.
"""

from typing import Optional

import attrs

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.expense_entity import Expense
from festival_ledger.service.festival.domain.entity.person_entity import Person
from festival_ledger.service.festival.domain.entity.shift_entity import Assignment, Shift
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.staffing import AssignmentStatus, PersonRole
from festival_ledger.service.festival.domain.money import is_valid_amount
from festival_ledger.service.festival.domain.sequence_domain import next_id
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)
from festival_ledger.service.festival.domain.value_object.staffing_coverage import ShiftCoverage


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@attrs.frozen
class PersonDraft:
    role: PersonRole
    first: Optional[str] = None
    last: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    lang: Locale = Locale.EN
    notes: Optional[str] = None


@attrs.frozen
class ShiftDraft:
    venue_id: Optional[str] = None
    date: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    role: Optional[str] = None
    cap: int = 1


@attrs.frozen
class ExpenseDraft:
    date: Optional[str] = None
    cat: Optional[str] = None
    payee: Optional[str] = None
    amount: Optional[float] = None
    memo: Optional[str] = None
    paid: bool = False


@Logger.io
def add_person(store: FestivalStore, draft: PersonDraft) -> tuple[FestivalStore, Person | Rejected]:
    if missing := [name for name in ('first', 'last') if _blank(getattr(draft, name))]:
        return store, Rejected.missing(*missing)

    pid, seq = next_id(store.seq, SequenceKind.PERSON, taken={p.pid for p in store.persons})
    person = Person(
        pid=pid,
        role=draft.role.value,
        first=(draft.first or '').strip(),
        last=(draft.last or '').strip(),
        email=draft.email or None,
        phone=draft.phone or None,
        team=draft.team or None,
        lang=draft.lang,
        notes=draft.notes or None,
    )
    return store.appended(persons=(person,)).with_seq(seq), person


def search_people(store: FestivalStore, query: str) -> list[Person]:
    return [p for p in store.persons if p.matches(query)]


@Logger.io
def add_shift(store: FestivalStore, draft: ShiftDraft) -> tuple[FestivalStore, Shift | Rejected]:
    required = ('venue_id', 'date', 'start', 'end', 'role')
    if missing := [name for name in required if _blank(getattr(draft, name))]:
        return store, Rejected.missing(*missing)
    if draft.cap < 1:
        return store, Rejected.invalid('cap', 'Shift needs at least one person')
    if store.find_venue(draft.venue_id or '') is None:
        return store, Rejected(
            reason=RejectionReason.UNKNOWN_REFERENCE,
            message=f'Unknown venue: {draft.venue_id}',
            fields=('venue_id',),
        )
    if (draft.end or '') <= (draft.start or ''):
        return store, Rejected.invalid('end', 'Shift must end after it starts')

    shift_id, seq = next_id(store.seq, SequenceKind.SHIFT, taken={s.shift_id for s in store.shifts})
    shift = Shift(
        shift_id=shift_id,
        venue_id=draft.venue_id or '',
        date=draft.date or '',
        start=draft.start or '',
        end=draft.end or '',
        role=(draft.role or '').strip(),
        cap=draft.cap,
    )
    return store.appended(shifts=(shift,)).with_seq(seq), shift


@Logger.io
def assign(
    store: FestivalStore, *, pid: str, shift_id: str, notes: Optional[str] = None
) -> tuple[FestivalStore, Assignment | Rejected]:
    if missing := [name for name, value in (('pid', pid), ('shift_id', shift_id)) if _blank(value)]:
        return store, Rejected.missing(*missing)
    if store.find_person(pid) is None:
        return store, Rejected(
            reason=RejectionReason.UNKNOWN_REFERENCE,
            message=f'Unknown person: {pid}',
            fields=('pid',),
        )
    if store.find_shift(shift_id) is None:
        return store, Rejected(
            reason=RejectionReason.UNKNOWN_REFERENCE,
            message=f'Unknown shift: {shift_id}',
            fields=('shift_id',),
        )

    assign_id, seq = next_id(
        store.seq, SequenceKind.ASSIGN, taken={a.assign_id for a in store.assigns}
    )
    assignment = Assignment(
        assign_id=assign_id,
        shift_id=shift_id,
        pid=pid,
        status=AssignmentStatus.OK,
        notes=notes or None,
    )
    return store.appended(assigns=(assignment,)).with_seq(seq), assignment


def coverage(store: FestivalStore) -> list[ShiftCoverage]:
    assigned: dict[str, int] = {}
    for a in store.assigns:
        if a.status is AssignmentStatus.OK:
            assigned[a.shift_id] = assigned.get(a.shift_id, 0) + 1
    return [
        ShiftCoverage(shift=shift, assigned=assigned.get(shift.shift_id, 0))
        for shift in sorted(store.shifts, key=lambda s: f'{s.date}{s.start}')
    ]


@Logger.io
def add_expense(store: FestivalStore, draft: ExpenseDraft) -> tuple[FestivalStore, Expense | Rejected]:
    required = ('date', 'cat', 'payee')
    missing = [name for name in required if _blank(getattr(draft, name))]
    if draft.amount is None:
        missing.append('amount')
    if missing:
        return store, Rejected.missing(*missing)
    if not is_valid_amount(draft.amount) or draft.amount == 0:
        return store, Rejected.invalid('amount', 'Expense amount must be a finite amount greater than 0')

    eid, seq = next_id(store.seq, SequenceKind.EXP, taken={e.eid for e in store.expenses})
    expense = Expense(
        eid=eid,
        date=draft.date or '',
        cat=(draft.cat or '').strip(),
        payee=(draft.payee or '').strip(),
        amount=float(draft.amount or 0),
        paid=draft.paid,
        memo=draft.memo or None,
    )
    return store.appended(expenses=(expense,)).with_seq(seq), expense
