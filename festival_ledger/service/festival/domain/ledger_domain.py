"""
Ledger Aggregator - read side projections over sales and expenses

Nothing here mutates the store. Voided tickets keep their recorded sale, so
sales_total still counts revenue of tickets voided later.
"""

from typing import Iterable

from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.sale_entity import Sale
from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.ticket_status import TicketStatus
from festival_ledger.service.festival.domain.value_object.ledger_report import (
    DailyReport,
    DailyShowLine,
    LedgerSummary,
)


def summarize(store: FestivalStore) -> LedgerSummary:
    by_method = {method: 0.0 for method in PaymentMethod}
    for sale in store.sales:
        by_method[sale.method] += sale.amount

    return LedgerSummary(
        sales_total=sum(s.amount for s in store.sales),
        by_method=by_method,
        expenses_total=sum(e.amount for e in store.expenses),
        expenses_unpaid=sum(e.amount for e in store.expenses if not e.paid),
        tickets_sold=sum(1 for t in store.tickets if t.holds_capacity),
        tickets_void=sum(1 for t in store.tickets if t.status is TicketStatus.VOID),
    )


def daily_report(sales: Iterable[Sale], date: str) -> DailyReport:
    """Group one day's sales by show, in order of first sale."""
    counts: dict[str, int] = {}
    amounts: dict[str, float] = {}
    for sale in sales:
        if sale.date != date:
            continue
        counts[sale.show_id] = counts.get(sale.show_id, 0) + 1
        amounts[sale.show_id] = amounts.get(sale.show_id, 0.0) + sale.amount

    lines = tuple(
        DailyShowLine(show_id=show_id, count=counts[show_id], amount=amounts[show_id])
        for show_id in counts
    )
    return DailyReport(date=date, lines=lines, total=sum(line.amount for line in lines))
