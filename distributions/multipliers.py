"""
Discrete value multipliers — how much of the expected value is realized.

One multiplier is drawn uniformly from a fixed non-empty set; the realized
value is multiplier * expected_value truncated toward zero.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence

import numpy as np

from core.utils import int_dtype_for


def apply_multiplier(expected_value: int, multiplier: float) -> int:
    # Exact decimal product: 0.29 * 100 is 29, and 1.0 * v is v for any size of v.
    return int(Fraction(str(float(multiplier))) * int(expected_value))


def apply_multipliers(expected_value: int, multipliers: np.ndarray) -> np.ndarray:
    """Vectorized apply_multiplier; int64, or object when values exceed int64."""
    multipliers = np.asarray(multipliers, dtype=float)
    choices, inverse = np.unique(multipliers, return_inverse=True)
    table = [apply_multiplier(expected_value, m) for m in choices]
    table = np.array(table, dtype=int_dtype_for(max(table, default=0)))
    return table[inverse.reshape(-1)]


def draw_multiplier(rng: np.random.Generator, multipliers: Sequence[float]) -> float:
    return float(multipliers[int(rng.integers(0, len(multipliers)))])


def draw_multipliers(rng: np.random.Generator, multipliers: Sequence[float], size: int) -> np.ndarray:
    choices = np.asarray(multipliers, dtype=float)
    return choices[rng.integers(0, len(choices), size=size)]


def possible_values(expected_value: int, multipliers: Sequence[float]) -> frozenset:
    """Every value a roll can produce for the given expected value."""
    return frozenset(apply_multiplier(expected_value, m) for m in multipliers)
