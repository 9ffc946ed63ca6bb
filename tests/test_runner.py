from __future__ import annotations

import datetime as dt
import itertools
import logging

import numpy as np
import pytest

from core.config import RollConfig
from engine.runner import iter_rolls, simulate_timeline
from timelines.timeline import Timeline


def test_simulate_timeline_uses_config_count(four_week_timeline: Timeline) -> None:
    rolls = simulate_timeline(four_week_timeline, RollConfig(n_rolls=321, seed=1))
    assert rolls.n_rolls == 321
    assert rolls.timeline == four_week_timeline


def test_simulate_timeline_n_rolls_override(four_week_timeline: Timeline, rng) -> None:
    rolls = simulate_timeline(four_week_timeline, n_rolls=17, rng=rng)
    assert rolls.n_rolls == 17


def test_simulate_timeline_logs_summary(four_week_timeline: Timeline, rng, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="engine.runner"):
        simulate_timeline(four_week_timeline, n_rolls=10, rng=rng)
    assert "simulated 'Project 1'" in caplog.text
    assert "n_rolls=10" in caplog.text


def test_iter_rolls_round_robin(four_week_timeline: Timeline, zero_length_timeline: Timeline, rng) -> None:
    pairs = list(iter_rolls([four_week_timeline, zero_length_timeline], rng, rounds=3))
    assert [t.name for t, _ in pairs] == ["Project 1", "One day"] * 3
    for t, r in pairs:
        assert t.start_date - dt.timedelta(days=28) <= r.date <= t.end_date() + dt.timedelta(days=28)


def test_iter_rolls_unbounded_until_consumer_stops(four_week_timeline: Timeline) -> None:
    stream = iter_rolls([four_week_timeline], np.random.default_rng(0))
    assert len(list(itertools.islice(stream, 250))) == 250


def test_iter_rolls_zero_rounds(four_week_timeline: Timeline) -> None:
    assert list(iter_rolls([four_week_timeline], rounds=0)) == []


def test_iter_rolls_rejects_negative_rounds(four_week_timeline: Timeline) -> None:
    with pytest.raises(ValueError):
        list(iter_rolls([four_week_timeline], rounds=-1))


def test_iter_rolls_empty_timelines_stops_immediately() -> None:
    assert next(iter_rolls([], np.random.default_rng(0)), "exhausted") == "exhausted"
    assert list(iter_rolls([], rounds=5)) == []
