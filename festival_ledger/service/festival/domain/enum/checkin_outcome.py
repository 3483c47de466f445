"""Check-in outcome - the literal result door staff act on."""

from enum import Enum


class CheckinOutcome(Enum):
    OK = 'OK'
    DUPLICATE = 'DUPLICATE'
    VOID_INVALID = 'VOID_INVALID'
    NOT_FOUND = 'NOT_FOUND'

    @property
    def admitted(self) -> bool:
        return self is CheckinOutcome.OK
