from typing import Optional

import attrs

from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.domain.enum.ticket_status import (
    SalesChannel,
    TicketStatus,
    TicketType,
)
from festival_ledger.service.festival.domain.money import validate_amount


@attrs.frozen
class Ticket:
    tid: str
    show_id: str
    type: TicketType
    price: float = attrs.field(validator=validate_amount)
    status: TicketStatus = TicketStatus.SOLD
    channel: SalesChannel = SalesChannel.ONSITE
    sold_at: str = ''  # YYYY-MM-DD
    sold_time: str = ''  # HH:MM
    buyer: str = ''
    email: str = ''
    notes: Optional[str] = None

    @property
    def holds_capacity(self) -> bool:
        return self.status is not TicketStatus.VOID

    def matches_tid(self, presented: str) -> bool:
        return self.tid.upper() == presented.strip().upper()

    @Logger.io
    def use(self) -> 'Ticket':
        if self.status.is_terminal:
            raise ValueError(f'Cannot check in ticket with status {self.status.value}')
        return attrs.evolve(self, status=TicketStatus.USED)

    @Logger.io
    def void(self) -> 'Ticket':
        if self.status.is_terminal:
            raise ValueError(f'Cannot void ticket with status {self.status.value}')
        return attrs.evolve(self, status=TicketStatus.VOID)
