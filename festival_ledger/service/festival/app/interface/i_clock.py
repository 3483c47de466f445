from abc import ABC, abstractmethod


class IClock(ABC):
    @abstractmethod
    def today(self) -> str:
        """Festival-local date as YYYY-MM-DD."""
        pass

    @abstractmethod
    def now_time(self) -> str:
        """Festival-local time as HH:MM."""
        pass
