"""
Rejections are first-class results, not exceptions.

Expected business outcomes (invalid draft, capacity exceeded, ticket already used)
come back as values the caller branches on.
"""

from enum import Enum

import attrs


class RejectionReason(Enum):
    MISSING_FIELD = 'MISSING_FIELD'
    INVALID_FIELD = 'INVALID_FIELD'
    UNKNOWN_REFERENCE = 'UNKNOWN_REFERENCE'
    SHOW_NOT_FOUND = 'SHOW_NOT_FOUND'
    INVALID_QUANTITY = 'INVALID_QUANTITY'
    INVALID_PRICE = 'INVALID_PRICE'
    CAPACITY_EXCEEDED = 'CAPACITY_EXCEEDED'
    TICKET_NOT_FOUND = 'TICKET_NOT_FOUND'
    ALREADY_USED = 'ALREADY_USED'
    ALREADY_VOID = 'ALREADY_VOID'


@attrs.frozen
class Rejected:
    reason: RejectionReason
    message: str
    fields: tuple[str, ...] = ()

    @classmethod
    def missing(cls, *fields: str) -> 'Rejected':
        return cls(
            reason=RejectionReason.MISSING_FIELD,
            message=f'Missing required field(s): {", ".join(fields)}',
            fields=tuple(fields),
        )

    @classmethod
    def invalid(cls, field: str, message: str) -> 'Rejected':
        return cls(reason=RejectionReason.INVALID_FIELD, message=message, fields=(field,))
