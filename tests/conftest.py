from __future__ import annotations

import datetime as dt

import numpy as np
import pytest

from timelines.timeline import Timeline


@pytest.fixture
def four_week_timeline() -> Timeline:
    return Timeline.from_weeks("Project 1", dt.date(2022, 1, 2), 4, 2000)


@pytest.fixture
def zero_length_timeline() -> Timeline:
    return Timeline(
        name="One day",
        start_date=dt.date(2022, 3, 15),
        duration=dt.timedelta(0),
        expected_value=500,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20220102)
