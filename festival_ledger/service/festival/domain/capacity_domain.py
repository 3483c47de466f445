"""
Capacity & Sale Engine

remaining = max(0, capacity - non-void tickets). A sale is all-or-nothing: either every
requested ticket is issued together with its paired sale, or nothing changes.

Voiding releases the ticket's capacity slot but keeps its sale on the books.
"""

from typing import Optional

import attrs

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.domain.entity.sale_entity import Sale
from festival_ledger.service.festival.domain.entity.show_entity import Show
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.ticket_status import (
    SalesChannel,
    TicketStatus,
    TicketType,
)
from festival_ledger.service.festival.domain.money import is_valid_amount
from festival_ledger.service.festival.domain.sequence_domain import (
    reserve_ids,
    reserve_ticket_ids,
)
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)
from festival_ledger.service.festival.domain.value_object.sale_batch import SaleBatch


WALK_UP_BUYER = 'Walk-up'


@attrs.frozen
class SaleRequest:
    show_id: str
    type: TicketType
    price: float
    quantity: int
    method: PaymentMethod


def sold_count(store: FestivalStore, show_id: str) -> int:
    return sum(1 for t in store.tickets if t.show_id == show_id and t.holds_capacity)


def remaining_capacity(store: FestivalStore, show: Show) -> int:
    return max(0, show.capacity - sold_count(store, show.show_id))


def oversold_shows(store: FestivalStore) -> list[Show]:
    """Shows whose non-void tickets exceed capacity (only reachable via import or edits)."""
    return [s for s in store.shows if sold_count(store, s.show_id) > s.capacity]


def _reject_request(request: SaleRequest) -> Optional[Rejected]:
    if request.quantity < 1:
        return Rejected(
            reason=RejectionReason.INVALID_QUANTITY,
            message='Quantity must be at least 1',
            fields=('quantity',),
        )
    if not is_valid_amount(request.price):
        return Rejected(
            reason=RejectionReason.INVALID_PRICE,
            message='Price must be a finite amount >= 0',
            fields=('price',),
        )
    return None


@Logger.io
def sell(
    store: FestivalStore,
    request: SaleRequest,
    *,
    sold_at: str,
    sold_time: str,
    festival_year: int,
) -> tuple[FestivalStore, SaleBatch | Rejected]:
    show = store.find_show(request.show_id)
    if show is None:
        return store, Rejected(
            reason=RejectionReason.SHOW_NOT_FOUND,
            message=f'Show not found: {request.show_id}',
            fields=('show_id',),
        )
    if rejection := _reject_request(request):
        return store, rejection

    remaining = remaining_capacity(store, show)
    if remaining < request.quantity:
        return store, Rejected(
            reason=RejectionReason.CAPACITY_EXCEEDED,
            message=(
                f'Capacity exceeded for {show.show_id}: '
                f'{request.quantity} requested, {remaining} remaining'
            ),
            fields=('quantity',),
        )

    tids, seq = reserve_ticket_ids(
        store.seq,
        show_id=show.show_id,
        quantity=request.quantity,
        festival_year=festival_year,
        taken={t.tid.upper() for t in store.tickets},
    )
    sids, seq = reserve_ids(
        seq, SequenceKind.SALE, request.quantity, taken={s.sid.upper() for s in store.sales}
    )

    tickets = tuple(
        Ticket(
            tid=tid,
            show_id=show.show_id,
            type=request.type,
            price=request.price,
            status=TicketStatus.SOLD,
            channel=SalesChannel.ONSITE,
            sold_at=sold_at,
            sold_time=sold_time,
            buyer=WALK_UP_BUYER,
        )
        for tid in tids
    )
    sales = tuple(
        Sale(
            sid=sid,
            date=ticket.sold_at,
            time=ticket.sold_time,
            show_id=ticket.show_id,
            tid=ticket.tid,
            method=request.method,
            amount=ticket.price,
        )
        for sid, ticket in zip(sids, tickets, strict=True)
    )

    next_store = store.appended(tickets=tickets, sales=sales).with_seq(seq)
    return next_store, SaleBatch(
        tickets=tickets, sales=sales, remaining=remaining - request.quantity
    )


@Logger.io
def void_ticket(store: FestivalStore, presented_tid: str) -> tuple[FestivalStore, Ticket | Rejected]:
    ticket = store.find_ticket(presented_tid)
    if ticket is None:
        return store, Rejected(
            reason=RejectionReason.TICKET_NOT_FOUND,
            message=f'Ticket not found: {presented_tid}',
            fields=('tid',),
        )
    if ticket.status is TicketStatus.USED:
        return store, Rejected(
            reason=RejectionReason.ALREADY_USED, message=f'Ticket {ticket.tid} was already used'
        )
    if ticket.status is TicketStatus.VOID:
        return store, Rejected(
            reason=RejectionReason.ALREADY_VOID, message=f'Ticket {ticket.tid} is already void'
        )

    voided = ticket.void()
    return store.with_tickets_replaced(voided), voided


def search_tickets(store: FestivalStore, query: str) -> list[Ticket]:
    """Case-insensitive match over tid, buyer, email and show id."""
    needle = query.strip().lower()
    return [
        t
        for t in store.tickets
        if needle in ' '.join((t.tid, t.buyer, t.email, t.show_id)).lower()
    ]
