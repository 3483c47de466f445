from datetime import datetime
from zoneinfo import ZoneInfo

from festival_ledger.service.festival.app.interface.i_clock import IClock


class SystemClock(IClock):
    """Wall clock in the festival's timezone."""

    def __init__(self, *, timezone: str) -> None:
        self.tz = ZoneInfo(timezone)

    def _now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> str:
        return self._now().strftime('%Y-%m-%d')

    def now_time(self) -> str:
        return self._now().strftime('%H:%M')
