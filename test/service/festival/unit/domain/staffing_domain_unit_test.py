import attrs
import pytest

from festival_ledger.service.festival.domain.entity.expense_entity import Expense
from festival_ledger.service.festival.domain.entity.person_entity import Person
from festival_ledger.service.festival.domain.entity.shift_entity import Assignment, Shift
from festival_ledger.service.festival.domain.enum.staffing import AssignmentStatus, PersonRole
from festival_ledger.service.festival.domain.staffing_domain import (
    ExpenseDraft,
    PersonDraft,
    ShiftDraft,
    add_expense,
    add_person,
    add_shift,
    assign,
    coverage,
    search_people,
)
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)


@pytest.fixture
def shift_draft() -> ShiftDraft:
    return ShiftDraft(
        venue_id='VEN-IDAN', date='2025-10-17', start='18:00', end='22:00', role='Door', cap=2
    )


class TestPeople:
    def test_new_person_gets_next_free_pid(self, seed):
        store, person = add_person(seed, PersonDraft(role=PersonRole.VOL, first=' Ada ', last='Muster'))

        assert isinstance(person, Person)
        assert person.pid == 'P0003'
        assert person.role == 'VOL'
        assert person.full_name == 'Ada Muster'
        assert store.persons[-1] == person

    def test_names_are_required(self, seed):
        store, result = add_person(seed, PersonDraft(role=PersonRole.PERF, first='Ada', last='  '))

        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.MISSING_FIELD
        assert result.fields == ('last',)
        assert store is seed

    def test_search_covers_pid_name_team_and_role(self, seed):
        assert [p.pid for p in search_people(seed, 'telson')] == ['P0001', 'P0002']
        assert [p.pid for p in search_people(seed, 'toasty')] == ['P0002']
        assert [p.pid for p in search_people(seed, 'tech')] == ['P0001']
        assert [p.pid for p in search_people(seed, 'p0002')] == ['P0002']


class TestShifts:
    def test_add_shift_skips_seeded_ids(self, seed, shift_draft):
        store, shift = add_shift(seed, shift_draft)

        assert isinstance(shift, Shift)
        assert shift.shift_id == 'SH-0001'
        assert store.shifts[-1] == shift

    @pytest.mark.parametrize(
        'changes, reason, field',
        [
            ({'cap': 0}, RejectionReason.INVALID_FIELD, 'cap'),
            ({'venue_id': 'VEN-NOPE'}, RejectionReason.UNKNOWN_REFERENCE, 'venue_id'),
            ({'end': '18:00'}, RejectionReason.INVALID_FIELD, 'end'),
            ({'role': ''}, RejectionReason.MISSING_FIELD, 'role'),
        ],
    )
    def test_invalid_shift_is_rejected(self, seed, shift_draft, changes, reason, field):
        store, result = add_shift(seed, attrs.evolve(shift_draft, **changes))

        assert isinstance(result, Rejected)
        assert result.reason is reason
        assert field in result.fields
        assert store is seed

    def test_assign_requires_known_person_and_shift(self, seed):
        _, unknown_person = assign(seed, pid='P9999', shift_id='SH001')
        _, unknown_shift = assign(seed, pid='P0001', shift_id='SH-9999')

        assert unknown_person.reason is RejectionReason.UNKNOWN_REFERENCE
        assert unknown_person.fields == ('pid',)
        assert unknown_shift.fields == ('shift_id',)

    def test_assignments_beyond_cap_are_allowed_and_visible(self, seed, shift_draft):
        """
        Given: a shift needing 2 people
        When: 3 people are assigned
        Then: every assignment is kept and coverage reports it overstaffed
        """
        store, shift = add_shift(seed, shift_draft)
        for pid in ['P0001', 'P0002', 'P0001']:
            store, result = assign(store, pid=pid, shift_id=shift.shift_id)
            assert isinstance(result, Assignment)

        row = next(c for c in coverage(store) if c.shift.shift_id == shift.shift_id)
        assert row.assigned == 3
        assert row.overstaffed
        assert row.open == -1

    def test_dropped_assignments_do_not_count(self, seed):
        store = seed.appended(
            assigns=(
                Assignment(assign_id='AS-0001', shift_id='SH001', pid='P0001'),
                Assignment(
                    assign_id='AS-0002', shift_id='SH001', pid='P0002', status=AssignmentStatus.DROP
                ),
            )
        )

        [row] = coverage(store)

        assert row.assigned == 1
        assert row.open == 3

    def test_coverage_is_ordered_by_date_and_start(self, seed, shift_draft):
        store, early = add_shift(seed, attrs.evolve(shift_draft, date='2025-10-15'))

        assert [c.shift.shift_id for c in coverage(store)] == [early.shift_id, 'SH001']


class TestExpenses:
    def test_add_expense(self, seed):
        draft = ExpenseDraft(date='2025-10-16', cat='Catering', payee='Bäckerei', amount=42.5)

        store, expense = add_expense(seed, draft)

        assert isinstance(expense, Expense)
        assert expense.eid == 'EXP-0001'
        assert expense.paid is False
        assert store.seq['EXP'] == 2

    def test_missing_fields_are_all_reported(self, seed):
        _, result = add_expense(seed, ExpenseDraft(date='2025-10-16'))

        assert result.reason is RejectionReason.MISSING_FIELD
        assert result.fields == ('cat', 'payee', 'amount')

    @pytest.mark.parametrize('amount', [0, -5.0, float('inf'), float('nan')])
    def test_amount_must_be_positive_and_finite(self, seed, amount):
        draft = ExpenseDraft(date='2025-10-16', cat='Print', payee='Copyshop', amount=amount)

        store, result = add_expense(seed, draft)

        assert result.reason is RejectionReason.INVALID_FIELD
        assert result.fields == ('amount',)
        assert store is seed
