from typing import Optional

import attrs


@attrs.frozen
class Venue:
    venue_id: str
    name: str
    address: str
    capacity: int = attrs.field(validator=attrs.validators.ge(0))
    contact: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
