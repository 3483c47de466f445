from typing import Optional

import attrs


@attrs.frozen
class Scan:
    """Door log entry, appended for every check-in attempt."""

    scan_id: str
    tid: str
    when: str  # YYYY-MM-DD
    time: str  # HH:MM
    gate: str
    ok: bool
    msg: Optional[str] = None
