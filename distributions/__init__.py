"""
Distributions package — the two independent draws behind a roll, and the sampler.

  1. jitter.py       — where the realized date may land
  2. multipliers.py  — how much of the expected value is realized
  3. sampler.py      — roll() for one sample, RollSampler for N
"""

from .jitter import JitterWindow
from .multipliers import apply_multiplier, possible_values
from .sampler import Roll, RollSampler, SampledRolls, roll

__all__ = [
    "JitterWindow",
    "apply_multiplier",
    "possible_values",
    "Roll",
    "RollSampler",
    "SampledRolls",
    "roll",
]
