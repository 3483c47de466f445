"""Named counters kept in the store's sequence map."""

from enum import Enum


class SequenceKind(Enum):
    TICKET = 'TICKET'
    SALE = 'SALE'
    SCAN = 'SCAN'
    EXP = 'EXP'
    SHOW = 'SHOW'
    SHIFT = 'SHIFT'
    ASSIGN = 'ASSIGN'
    PERSON = 'PERSON'
    IMPORT = 'IMPORT'
