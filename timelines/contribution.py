"""
Deterministic contribution queries.

A timeline contributes its full expected value on every day of its scheduled
window [start_date, end_date] (both ends included) and nothing outside it.
"""

from __future__ import annotations

import datetime as dt

import numpy as np
import pandas as pd

from core.utils import DateLike, day_range, int_dtype_for, to_date

from .timeline import Timeline


def contribution_on(timeline: Timeline, date: dt.date) -> int:
    """Return expected_value if date is inside the closed scheduled window, else 0."""
    # offset from start instead of end_date(), which overflows near date.max
    if 0 <= (date - timeline.start_date).days <= timeline.duration_days:
        return timeline.expected_value
    return 0


def contribution_schedule(
    timeline: Timeline,
    start: DateLike,
    end: DateLike,
) -> pd.Series:
    """
    Daily contribution for every calendar day in [start, end].

    Returns
    -------
    pd.Series indexed by a DatetimeIndex named "date", named after the timeline.
    int64, or object when the expected value exceeds the int64 range.
    """
    index = day_range(to_date(start), to_date(end))
    offsets = (index.values.astype("datetime64[D]") - np.datetime64(timeline.start_date, "D")).astype(np.int64)
    in_window = (offsets >= 0) & (offsets <= timeline.duration_days)

    values = np.zeros(len(index), dtype=int_dtype_for(timeline.expected_value))
    values[in_window] = timeline.expected_value
    return pd.Series(values, index=index, name=timeline.name)
