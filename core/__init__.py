"""
Core package — configuration, column schema, logging setup and date helpers.
No business logic lives here.
"""

from .config import DEFAULT_ROLL_CONFIG, JITTER_DAYS, VALUE_MULTIPLIERS, RollConfig
from .log import configure_logging
from .schema import ROLL_COLUMNS, SUMMARY_COLUMNS
from .utils import day_range, days, int_dtype_for, to_date

__all__ = [
    "DEFAULT_ROLL_CONFIG",
    "JITTER_DAYS",
    "VALUE_MULTIPLIERS",
    "RollConfig",
    "configure_logging",
    "ROLL_COLUMNS",
    "SUMMARY_COLUMNS",
    "day_range",
    "days",
    "int_dtype_for",
    "to_date",
]
