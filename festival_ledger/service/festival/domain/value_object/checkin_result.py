from typing import Optional

import attrs

from festival_ledger.service.festival.domain.entity.scan_entity import Scan
from festival_ledger.service.festival.domain.entity.ticket_entity import Ticket
from festival_ledger.service.festival.domain.enum.checkin_outcome import CheckinOutcome
from festival_ledger.service.festival.domain.enum.locale import Locale


@attrs.frozen
class CheckinResult:
    outcome: CheckinOutcome
    scan: Scan
    ticket: Optional[Ticket] = None
    locale: Locale = Locale.EN  # active locale when the scan happened

    @property
    def admitted(self) -> bool:
        return self.outcome.admitted
