from __future__ import annotations

from typing import Tuple

# Columns of SampledRolls.to_dataframe(), one row per roll.
ROLL_COLUMNS: Tuple[str, ...] = (
    "roll_id",
    "value",
    "date",
    "multiplier",
)

# Columns of SampledRolls.summary(), one row per sampled variable.
SUMMARY_COLUMNS: Tuple[str, ...] = (
    "Variable",
    "Mean",
    "StdDev",
    "Min",
    "P05",
    "P50",
    "P95",
    "Max",
)
