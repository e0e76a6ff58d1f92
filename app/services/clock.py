"""Source of "today" for streak computations (UTC calendar days)."""
from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def today(self) -> date: ...

    def now(self) -> datetime: ...


class UtcClock:
    """Calendar date at 00:00 UTC boundaries."""

    def today(self) -> date:
        return datetime.now(timezone.utc).date()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to a given day; advance() moves it forward."""

    def __init__(self, day: date):
        self.day = day

    def today(self) -> date:
        return self.day

    def now(self) -> datetime:
        return datetime(self.day.year, self.day.month, self.day.day, 12, 0, tzinfo=timezone.utc)

    def advance(self, days: int = 1) -> None:
        self.day = date.fromordinal(self.day.toordinal() + days)


utc_clock = UtcClock()


def get_clock() -> Clock:
    return utc_clock
