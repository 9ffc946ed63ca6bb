from __future__ import annotations

import datetime as dt

import numpy as np
import pytest

from core.config import VALUE_MULTIPLIERS, RollConfig
from distributions.jitter import JitterWindow
from distributions.multipliers import (
    apply_multiplier,
    apply_multipliers,
    draw_multiplier,
    possible_values,
)
from timelines.timeline import Timeline


def test_window_for_four_week_timeline(four_week_timeline: Timeline) -> None:
    w = JitterWindow.for_timeline(four_week_timeline, 28)
    assert w.min_date == dt.date(2021, 12, 5)
    assert w.max_span_days == 28 + 56
    assert w.earliest == dt.date(2021, 12, 5)
    assert w.latest == dt.date(2022, 2, 27)


def test_window_contains_is_inclusive(four_week_timeline: Timeline) -> None:
    w = JitterWindow.for_timeline(four_week_timeline, 28)
    assert w.contains(w.earliest)
    assert w.contains(w.latest)
    assert not w.contains(w.earliest - dt.timedelta(days=1))
    assert not w.contains(w.latest + dt.timedelta(days=1))


def test_zero_span_window_draws_min_date(zero_length_timeline: Timeline, rng) -> None:
    w = JitterWindow.for_timeline(zero_length_timeline, 0)
    assert w.max_span_days == 0
    assert w.draw_offset(rng) == 0
    assert w.draw_date(rng) == zero_length_timeline.start_date
    np.testing.assert_array_equal(w.draw_offsets(rng, 5), np.zeros(5, dtype=np.int64))


def test_draw_offsets_in_half_open_range(four_week_timeline: Timeline, rng) -> None:
    w = JitterWindow.for_timeline(four_week_timeline, 28)
    offsets = w.draw_offsets(rng, 20_000)
    assert offsets.min() == 0
    assert offsets.max() == w.max_span_days - 1


def test_draw_dates_dtype(four_week_timeline: Timeline, rng) -> None:
    w = JitterWindow.for_timeline(four_week_timeline, 28)
    dates = w.draw_dates(rng, 10)
    assert dates.dtype == np.dtype("datetime64[D]")
    assert len(w.draw_dates(rng, 0)) == 0


@pytest.mark.parametrize(
    "multiplier,expected",
    [(0.0, 0), (0.8, 1600), (0.9, 1800), (1.0, 2000), (1.1, 2200)],
)
def test_apply_multiplier(multiplier: float, expected: int) -> None:
    assert apply_multiplier(2000, multiplier) == expected


def test_apply_multiplier_uses_decimal_value_of_multiplier() -> None:
    # binary 0.29 * 100 is 28.999999999999996
    assert apply_multiplier(100, 0.29) == 29
    assert apply_multiplier(100, 0.57) == 57
    assert apply_multipliers(100, np.array([0.29, 0.57])).tolist() == [29, 57]


def test_apply_multipliers_matches_scalar() -> None:
    ms = np.array(VALUE_MULTIPLIERS * 3)
    for v in (0, 1, 7, 33, 2000, 33333):
        assert apply_multipliers(v, ms).tolist() == [apply_multiplier(v, m) for m in ms]


def test_draw_multiplier_only_returns_members(rng) -> None:
    drawn = {draw_multiplier(rng, VALUE_MULTIPLIERS) for _ in range(1000)}
    assert drawn == set(VALUE_MULTIPLIERS)


def test_possible_values() -> None:
    assert possible_values(2000, VALUE_MULTIPLIERS) == frozenset({0, 1600, 1800, 2000, 2200})
    assert possible_values(0, VALUE_MULTIPLIERS) == frozenset({0})


def test_config_defaults() -> None:
    config = RollConfig()
    assert config.jitter_days == 28
    assert config.value_multipliers == (0.0, 0.8, 0.9, 1.0, 1.1)
    assert config.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"jitter_days": -1},
        {"value_multipliers": ()},
        {"value_multipliers": (1.0, -0.5)},
        {"n_rolls": 0},
    ],
)
def test_config_rejects_invalid(kwargs) -> None:
    with pytest.raises(ValueError):
        RollConfig(**kwargs)


def test_apply_multiplier_is_exact_for_large_values() -> None:
    v = 10**17 + 1
    assert apply_multiplier(v, 1.0) == v
    assert apply_multiplier(v, 1.1) == 110000000000000001
    assert apply_multipliers(v, np.array([1.0, 1.0])).tolist() == [v, v]


def test_apply_multiplier_truncates_without_rounding_up() -> None:
    assert apply_multiplier(10, 0.99999999) == 9
    assert apply_multipliers(10, np.array([0.99999999])).tolist() == [9]


def test_apply_multipliers_switches_to_object_past_int64() -> None:
    out = apply_multipliers(2**63, np.array([1.0, 0.0]))
    assert out.dtype == object
    assert out.tolist() == [2**63, 0]
    assert apply_multipliers(2**62, np.array([1.0])).dtype == np.int64


def test_window_clamped_at_calendar_start() -> None:
    t = Timeline.from_weeks("ancient", dt.date(1, 1, 10), 4, 1)
    w = JitterWindow.for_timeline(t, 28)
    assert w.earliest == dt.date.min
    assert w.latest == t.end_date() + dt.timedelta(days=28)
    # days 1..9 of year 1 plus the 28-day window and the trailing jitter
    assert w.max_span_days == 9 + 28 + 28


def test_window_clamped_at_calendar_end(rng) -> None:
    t = Timeline.from_weeks("distant", dt.date.max - dt.timedelta(days=5), 4, 1)
    w = JitterWindow.for_timeline(t, 28)
    assert w.earliest == t.start_date - dt.timedelta(days=28)
    assert w.latest == dt.date.max
    assert w.max_span_days == 28 + 5 + 1
    assert all(w.contains(w.draw_date(rng)) for _ in range(500))
