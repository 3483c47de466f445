"""
Ticket lifecycle enums.

SOLD --check-in--> USED
SOLD --void-----> VOID
USED and VOID are terminal.
"""

from enum import Enum


class TicketStatus(Enum):
    SOLD = 'SOLD'
    USED = 'USED'
    VOID = 'VOID'

    @property
    def is_terminal(self) -> bool:
        return self is not TicketStatus.SOLD


class TicketType(Enum):
    GA = 'GA'
    VIP = 'VIP'
    STAFF = 'STAFF'
    PRESS = 'PRESS'


class SalesChannel(Enum):
    ONSITE = 'ONSITE'
    PRESALE = 'PRESALE'
