# sim/clock.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

HOUR = 3600.0
DAY = 24 * HOUR

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def hours(x: float) -> float:
    return x * HOUR


def days(x: float) -> float:
    return x * DAY


@dataclass(frozen=True)
class WallClock:
    fixed: datetime | None = None  # naive local time; None => read the system clock

    @classmethod
    def frozen_at(cls, y: int, m: int, d: int, hh=0, mm=0, ss=0) -> WallClock:
        return cls(datetime(y, m, d, hh, mm, ss))

    def now(self) -> datetime:
        """Local wall time, read at call time unless the clock is frozen."""
        return self.fixed if self.fixed is not None else datetime.now()


def format_timestamp(dt: datetime) -> str:
    # strftime pads %Y only on some platforms
    return f"{dt.year:04d}-{dt:%m-%dT%H:%M:%S}"


def past_timestamp(now: datetime, days_back: int, hour_offset: int) -> str:
    """
    `now` minus days_back * 86400 s minus hour_offset * 3600 s, as local YYYY-MM-DDTHH:MM:SS.
    The subtraction happens on the absolute instant, so a range crossing a DST
    change lands on a real local time.
    """
    dt = datetime.fromtimestamp(now.timestamp() - (days(days_back) + hours(hour_offset)))
    return format_timestamp(dt)
