"""Turn rejection values returned by use cases into HTTP errors."""

from typing import NoReturn

from festival_ledger.platform.exception.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationRejectedError,
)
from festival_ledger.service.festival.domain.value_object.rejection import (
    Rejected,
    RejectionReason,
)


_NOT_FOUND = {RejectionReason.SHOW_NOT_FOUND, RejectionReason.TICKET_NOT_FOUND}
_CONFLICT = {
    RejectionReason.CAPACITY_EXCEEDED,
    RejectionReason.ALREADY_USED,
    RejectionReason.ALREADY_VOID,
}


def raise_rejection(rejected: Rejected) -> NoReturn:
    reason = rejected.reason.value
    if rejected.reason in _NOT_FOUND:
        raise NotFoundError(rejected.message, reason=reason)
    if rejected.reason in _CONFLICT:
        raise ConflictError(rejected.message, reason=reason)
    raise ValidationRejectedError(rejected.message, fields=rejected.fields, reason=reason)
