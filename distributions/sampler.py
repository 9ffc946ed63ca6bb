"""
Roll sampler — one simplistic Monte Carlo forecast of a timeline's realized outcome.

Each roll makes two independent draws:
  1. Date:  uniform over the jitter window around the scheduled window
  2. Value: expected value times a multiplier drawn uniformly from a fixed set

    Timeline: 2022-01-02 + 4 weeks, revenue 2000
    Roll 1: (1800, 2021-12-19)   early, slightly under
    Roll 2: (0,    2022-02-20)   slipped late, nothing realized
    Roll 3: (2200, 2022-01-11)   on time, slightly over

roll() returns a single sample. RollSampler draws many at once (vectorized)
and wraps them in SampledRolls for tables and summaries.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd

from core.config import DEFAULT_ROLL_CONFIG, RollConfig
from core.schema import ROLL_COLUMNS, SUMMARY_COLUMNS
from timelines.timeline import Timeline

from .jitter import JitterWindow
from .multipliers import apply_multiplier, apply_multipliers, draw_multiplier, draw_multipliers

logger = logging.getLogger(__name__)


class Roll(NamedTuple):
    value: int
    date: dt.date


def roll(
    timeline: Timeline,
    rng: Optional[np.random.Generator] = None,
    config: RollConfig = DEFAULT_ROLL_CONFIG,
) -> Roll:
    """
    Draw one (value, date) sample for the timeline.

    Parameters
    ----------
    timeline : Timeline
        Timeline to forecast; never modified
    rng : np.random.Generator, optional
        Source of randomness. Pass the same generator across calls for
        independent rolls; None builds one from config.seed.
    config : RollConfig
        Jitter width and multiplier set
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    window = JitterWindow.for_timeline(timeline, config.jitter_days)
    date = window.draw_date(rng)
    multiplier = draw_multiplier(rng, config.value_multipliers)
    return Roll(value=apply_multiplier(timeline.expected_value, multiplier), date=date)


@dataclass
class SampledRolls:
    """
    Output of RollSampler: N independent rolls of one timeline.
    """
    timeline: Timeline
    value: np.ndarray       # shape (n_rolls,), int64 (object past the int64 range)
    date: np.ndarray        # shape (n_rolls,), datetime64[D]
    multiplier: np.ndarray  # shape (n_rolls,), float

    @property
    def n_rolls(self) -> int:
        return len(self.value)

    def get_roll(self, idx: int) -> Roll:
        return Roll(
            value=int(self.value[idx]),
            date=self.date[idx].astype("datetime64[D]").item(),
        )

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame({
            "roll_id": np.arange(self.n_rolls),
            "value": self.value,
            "date": pd.to_datetime(self.date),
            "multiplier": self.multiplier,
        })
        return df[list(ROLL_COLUMNS)]

    def multiplier_frequencies(self, multipliers=None) -> pd.Series:
        """Share of rolls per multiplier, including multipliers never drawn."""
        counts = pd.Series(self.multiplier).value_counts()
        if multipliers is not None:
            counts = counts.reindex(list(multipliers), fill_value=0)
        freq = counts.sort_index() / max(self.n_rolls, 1)
        freq.index.name = "multiplier"
        freq.name = "frequency"
        return freq

    def summary(self) -> pd.DataFrame:
        """
        Percentile summary of sampled value and sampled date.
        Dates are summarized as day offsets from the scheduled start date.
        """
        start = np.datetime64(self.timeline.start_date, "D")
        offsets = (self.date - start).astype(np.int64)
        rows = []
        for name, arr in [("Value", self.value), ("Date Offset (days)", offsets)]:
            arr = np.asarray(arr, dtype=float)
            row = {"Variable": name, "Mean": np.mean(arr), "StdDev": np.std(arr), "Min": np.min(arr)}
            for p in (5, 50, 95):
                row[f"P{p:02d}"] = np.percentile(arr, p)
            row["Max"] = np.max(arr)
            rows.append(row)
        return pd.DataFrame(rows, columns=list(SUMMARY_COLUMNS))


class RollSampler:
    """
    Draws N independent rolls of one timeline.

    Usage:
        sampler = RollSampler(timeline, n_rolls=10_000, seed=42)
        rolls = sampler.sample()
        # rolls.value → array of 10000 realized values
        # rolls.to_dataframe() → nice table
    """

    def __init__(
        self,
        timeline: Timeline,
        config: RollConfig = DEFAULT_ROLL_CONFIG,
        *,
        n_rolls: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.timeline = timeline
        self.config = config
        self.n_rolls = n_rolls if n_rolls is not None else config.n_rolls
        if self.n_rolls <= 0:
            raise ValueError(f"n_rolls must be > 0, got {self.n_rolls}.")
        if rng is None:
            rng = np.random.default_rng(seed if seed is not None else config.seed)
        self.rng = rng
        self.window = JitterWindow.for_timeline(timeline, config.jitter_days)

    def sample(self) -> SampledRolls:
        dates = self.window.draw_dates(self.rng, self.n_rolls)
        multipliers = draw_multipliers(self.rng, self.config.value_multipliers, self.n_rolls)
        values = apply_multipliers(self.timeline.expected_value, multipliers)

        logger.debug(
            "sampled %d rolls for %r over [%s, %s]",
            self.n_rolls, self.timeline.name, self.window.earliest, self.window.latest,
        )
        return SampledRolls(
            timeline=self.timeline,
            value=values,
            date=dates,
            multiplier=multipliers,
        )
