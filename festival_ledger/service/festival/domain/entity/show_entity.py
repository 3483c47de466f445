from typing import Optional

import attrs

from festival_ledger.service.festival.domain.enum.show_category import ShowCategory


def _validate_positive_capacity(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError('Show capacity must be greater than 0')


@attrs.frozen
class Show:
    show_id: str
    title: str
    venue_id: str
    date: str  # YYYY-MM-DD
    start: str  # HH:MM
    end: str  # HH:MM
    capacity: int = attrs.field(validator=_validate_positive_capacity)
    category: ShowCategory = ShowCategory.SHOW
    headliner: Optional[str] = None
    tech_notes: Optional[str] = None

    @property
    def sort_key(self) -> str:
        return f'{self.date}{self.start}'

    def matches(self, query: str) -> bool:
        haystack = f'{self.show_id} {self.title} {self.venue_id}'
        return query.strip().lower() in haystack.lower()
