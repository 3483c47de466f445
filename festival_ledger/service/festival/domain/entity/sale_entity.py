import attrs

from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.money import validate_amount


@attrs.frozen
class Sale:
    """Revenue record paired 1:1 with the ticket issued at sale time. Never mutated."""

    sid: str
    date: str
    time: str
    show_id: str
    tid: str
    method: PaymentMethod
    amount: float = attrs.field(validator=validate_amount)
