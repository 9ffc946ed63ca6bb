"""
Date jitter window — where a timeline's realized date may land.

For a timeline scheduled over [start, end] and a jitter of J days:
  min_date = start - J
  max_span = duration + 2*J           (days)
  sampled  = min_date + offset,       offset ~ Uniform{0, ..., max_span - 1}

so every sampled date lies in [start - J, end + J). A zero-width span
(zero duration and zero jitter) always samples min_date.

Near the ends of the calendar the window is cut at date.min / date.max,
so rolls stay representable for any valid timeline.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

import numpy as np

from timelines.timeline import Timeline

_MIN_ORDINAL = dt.date.min.toordinal()
_MAX_ORDINAL = dt.date.max.toordinal()


@dataclass(frozen=True)
class JitterWindow:
    min_date: dt.date
    max_span_days: int  # offsets are drawn from [0, max_span_days)
    max_date: dt.date   # inclusive bound, end_date + J
    jitter_days: int

    @classmethod
    def for_timeline(cls, timeline: Timeline, jitter_days: int) -> "JitterWindow":
        # ordinals, so the arithmetic never leaves the date range
        lo = timeline.start_date.toordinal() - jitter_days
        hi = lo + timeline.duration_days + 2 * jitter_days
        min_ordinal = max(lo, _MIN_ORDINAL)
        span = 0
        if hi > lo:
            span = min(hi - 1, _MAX_ORDINAL) - min_ordinal + 1
        return cls(
            min_date=dt.date.fromordinal(min_ordinal),
            max_span_days=span,
            max_date=dt.date.fromordinal(min(hi, _MAX_ORDINAL)),
            jitter_days=jitter_days,
        )

    @property
    def earliest(self) -> dt.date:
        return self.min_date

    @property
    def latest(self) -> dt.date:
        return self.max_date

    def contains(self, date: dt.date) -> bool:
        return self.earliest <= date <= self.latest

    def draw_offset(self, rng: np.random.Generator) -> int:
        if self.max_span_days <= 0:
            return 0
        return int(rng.integers(0, self.max_span_days))

    def draw_offsets(self, rng: np.random.Generator, size: int) -> np.ndarray:
        if self.max_span_days <= 0:
            return np.zeros(size, dtype=np.int64)
        return rng.integers(0, self.max_span_days, size=size, dtype=np.int64)

    def draw_date(self, rng: np.random.Generator) -> dt.date:
        date = dt.date.fromordinal(self.min_date.toordinal() + self.draw_offset(rng))
        assert self.contains(date), f"sampled date {date} outside [{self.earliest}, {self.latest}]"
        return date

    def draw_dates(self, rng: np.random.Generator, size: int) -> np.ndarray:
        """Vectorized draw_date; returns datetime64[D]."""
        base = np.datetime64(self.min_date, "D")
        dates = base + self.draw_offsets(rng, size).astype("timedelta64[D]")
        if size:
            assert dates.min() >= base, "sampled date before window start"
            assert dates.max() <= np.datetime64(self.latest, "D"), "sampled date after window end"
        return dates
