"""
Timeline — a named unit of work with a start date, a duration and an expected revenue.

All values are approximate: the scheduled window is what we plan, roll() is what
might actually happen.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class Timeline:
    """
    Immutable timeline value. Equality is structural.

    No validation happens here: any combination of fields can be constructed.
    Use timelines.spec.TimelineSpec when input needs checking.
    """

    name: str
    start_date: dt.date
    duration: dt.timedelta  # whole days
    expected_value: int     # full revenue if realized exactly as scheduled

    @classmethod
    def from_weeks(
        cls,
        name: str,
        start_date: dt.date,
        weeks: int,
        expected_value: int,
    ) -> "Timeline":
        return cls(
            name=name,
            start_date=start_date,
            duration=dt.timedelta(weeks=weeks),
            expected_value=expected_value,
        )

    @property
    def duration_days(self) -> int:
        return self.duration.days

    def end_date(self) -> dt.date:
        """
        Last scheduled day; equals start_date for a zero-length timeline.

        Raises OverflowError when start_date + duration passes date.max.
        contribution_on() and roll() work from the offset to start_date and
        do not have this limit.
        """
        return self.start_date + self.duration
