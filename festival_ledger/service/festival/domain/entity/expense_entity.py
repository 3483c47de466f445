from typing import Optional

import attrs

from festival_ledger.service.festival.domain.money import validate_amount


@attrs.frozen
class Expense:
    eid: str
    date: str
    cat: str
    payee: str
    amount: float = attrs.field(validator=validate_amount)
    paid: bool = False
    memo: Optional[str] = None
