from __future__ import annotations

import datetime as dt
from typing import Union

import numpy as np
import pandas as pd
from dateutil import parser as date_parser

DateLike = Union[dt.date, str, pd.Timestamp, np.datetime64]


def to_date(value: DateLike) -> dt.date:
    """Coerce strings, Timestamps and datetime64 to a plain calendar date (time of day dropped)."""
    if isinstance(value, str):
        try:
            return date_parser.isoparse(value).date()
        except ValueError as exc:
            raise ValueError(f"Not an ISO calendar date: {value!r}") from exc
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]").item()
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    raise ValueError(f"Cannot interpret {value!r} as a date.")


def days(n: int) -> dt.timedelta:
    return dt.timedelta(days=int(n))


def day_range(start: dt.date, end: dt.date) -> pd.DatetimeIndex:
    """Every calendar day in [start, end], inclusive on both ends."""
    if start > end:
        raise ValueError(f"Range start {start} is after range end {end}.")
    return pd.date_range(pd.Timestamp(start), pd.Timestamp(end), freq="D", name="date")


_INT64_MAX = np.iinfo(np.int64).max


def int_dtype_for(max_value: int):
    """int64 when max_value fits, else object so large amounts stay exact and non-negative."""
    return np.int64 if max_value <= _INT64_MAX else object
