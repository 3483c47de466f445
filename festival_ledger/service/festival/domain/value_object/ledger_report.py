import attrs

from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod


@attrs.frozen
class LedgerSummary:
    sales_total: float
    by_method: dict[PaymentMethod, float] = attrs.field(hash=False)
    expenses_total: float
    expenses_unpaid: float
    tickets_sold: int
    tickets_void: int

    @property
    def net(self) -> float:
        return self.sales_total - self.expenses_total


@attrs.frozen
class DailyShowLine:
    show_id: str
    count: int
    amount: float


@attrs.frozen
class DailyReport:
    """Z-report: one day's sales grouped by show."""

    date: str
    lines: tuple[DailyShowLine, ...]
    total: float
