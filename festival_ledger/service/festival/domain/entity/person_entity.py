from typing import Optional

import attrs

from festival_ledger.service.festival.domain.enum.locale import Locale


@attrs.frozen
class Person:
    pid: str
    role: str
    first: str
    last: str
    email: Optional[str] = None
    phone: Optional[str] = None
    team: Optional[str] = None
    lang: Locale = Locale.EN
    notes: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f'{self.first} {self.last}'

    def matches(self, query: str) -> bool:
        parts = (self.pid, self.first, self.last, self.team, self.role)
        haystack = ' '.join(part or '' for part in parts)
        return query.strip().lower() in haystack.lower()
