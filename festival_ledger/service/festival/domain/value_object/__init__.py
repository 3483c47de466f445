from festival_ledger.service.festival.domain.value_object.checkin_result import CheckinResult
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)
from festival_ledger.service.festival.domain.value_object.sale_batch import SaleBatch

__all__ = ['CheckinResult', 'Rejected', 'RejectionReason', 'SaleBatch']
