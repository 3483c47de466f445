import attrs

from festival_ledger.service.festival.domain.entity.shift_entity import Shift


@attrs.frozen
class ShiftCoverage:
    shift: Shift
    assigned: int

    @property
    def open(self) -> int:
        return self.shift.cap - self.assigned

    @property
    def overstaffed(self) -> bool:
        return self.assigned > self.shift.cap
