"""
Roll configuration.
Sampling settings shared by roll(), RollSampler and the runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Realized value = multiplier * expected value, one multiplier drawn uniformly.
VALUE_MULTIPLIERS: Tuple[float, ...] = (0.0, 0.8, 0.9, 1.0, 1.1)

# Realized date may land up to four weeks either side of the scheduled window.
JITTER_DAYS: int = 28


@dataclass(frozen=True)
class RollConfig:
    jitter_days: int = JITTER_DAYS
    value_multipliers: Tuple[float, ...] = VALUE_MULTIPLIERS

    # batch sampling
    n_rolls: int = 1000
    seed: Optional[int] = None  # None -> fresh OS entropy

    def __post_init__(self) -> None:
        if self.jitter_days < 0:
            raise ValueError(f"jitter_days must be >= 0, got {self.jitter_days}.")
        if len(self.value_multipliers) == 0:
            raise ValueError("value_multipliers must not be empty.")
        if any(m < 0 for m in self.value_multipliers):
            raise ValueError(f"value_multipliers must be >= 0, got {self.value_multipliers}.")
        if self.n_rolls <= 0:
            raise ValueError(f"n_rolls must be > 0, got {self.n_rolls}.")


DEFAULT_ROLL_CONFIG = RollConfig()
