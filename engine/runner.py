"""
Simulation runner — drives rolls for display and per-timeline summaries.

Two modes of operation:
  1. Batch:  simulate_timeline() draws N rolls of one timeline at once
  2. Stream: iter_rolls() yields one roll per timeline per round, forever
             unless a round count is given

Timelines are never combined: each result belongs to exactly one timeline.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from core.config import DEFAULT_ROLL_CONFIG, RollConfig
from distributions.sampler import Roll, RollSampler, SampledRolls, roll
from timelines.timeline import Timeline

logger = logging.getLogger(__name__)


def simulate_timeline(
    timeline: Timeline,
    config: RollConfig = DEFAULT_ROLL_CONFIG,
    *,
    n_rolls: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> SampledRolls:
    """
    Draw n_rolls (default config.n_rolls) independent rolls of one timeline.

    Returns
    -------
    SampledRolls with per-roll value, date and multiplier.
    """
    sampler = RollSampler(timeline, config, n_rolls=n_rolls, rng=rng)
    rolls = sampler.sample()

    logger.info(
        "simulated %r: n_rolls=%d mean_value=%.1f expected_value=%d dates=[%s, %s]",
        timeline.name,
        rolls.n_rolls,
        float(np.mean(rolls.value)),
        timeline.expected_value,
        rolls.date.min(),
        rolls.date.max(),
    )
    return rolls


def iter_rolls(
    timelines: Sequence[Timeline],
    rng: Optional[np.random.Generator] = None,
    config: RollConfig = DEFAULT_ROLL_CONFIG,
    *,
    rounds: Optional[int] = None,
) -> Iterator[Tuple[Timeline, Roll]]:
    """
    Yield (timeline, roll) round-robin over timelines.

    rounds=None loops until the consumer stops iterating. An empty
    timelines sequence yields nothing.
    """
    if rounds is not None and rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}.")
    if not timelines:
        return
    if rng is None:
        rng = np.random.default_rng(config.seed)

    counter = itertools.count() if rounds is None else range(rounds)
    for _ in counter:
        for timeline in timelines:
            yield timeline, roll(timeline, rng, config)
