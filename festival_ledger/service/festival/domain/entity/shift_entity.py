from typing import Optional

import attrs

from festival_ledger.service.festival.domain.enum.staffing import AssignmentStatus


@attrs.frozen
class Shift:
    shift_id: str
    venue_id: str
    date: str
    start: str
    end: str
    role: str  # Door / Tech / FOH
    cap: int = attrs.field(validator=attrs.validators.ge(1))  # headcount needed


@attrs.frozen
class Assignment:
    assign_id: str
    shift_id: str
    pid: str
    status: AssignmentStatus = AssignmentStatus.OK
    notes: Optional[str] = None
