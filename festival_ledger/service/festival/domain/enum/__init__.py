"""Festival Domain Enums"""

from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.locale import Locale
from festival_ledger.service.festival.domain.enum.payment_method import PaymentMethod
from festival_ledger.service.festival.domain.enum.sequence_kind import SequenceKind
from festival_ledger.service.festival.domain.enum.show_category import ShowCategory
from festival_ledger.service.festival.domain.enum.staffing import AssignmentStatus, PersonRole
from festival_ledger.service.festival.domain.enum.ticket_status import (
    SalesChannel,
    TicketStatus,
    TicketType,
)

__all__ = [
    'AssignmentStatus',
    'CheckinOutcome',
    'Locale',
    'PaymentMethod',
    'PersonRole',
    'SalesChannel',
    'SequenceKind',
    'ShowCategory',
    'TicketStatus',
    'TicketType',
]
