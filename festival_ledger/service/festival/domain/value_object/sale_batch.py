import attrs

from festival_ledger.service.festival.domain.entity.sale_entity import Sale
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket


@attrs.frozen
class SaleBatch:
    """Tickets and their paired sales issued by one successful sell."""

    tickets: tuple[Ticket, ...]
    sales: tuple[Sale, ...]
    remaining: int

    @property
    def quantity(self) -> int:
        return len(self.tickets)

    @property
    def amount(self) -> float:
        return sum(s.amount for s in self.sales)
