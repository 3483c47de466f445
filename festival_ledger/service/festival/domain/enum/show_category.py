from enum import Enum


class ShowCategory(Enum):
    SHOW = 'Show'
    WORKSHOP = 'Workshop'
