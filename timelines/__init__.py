"""
Timelines: the timeline value object, its validated spec, and deterministic contribution queries.
"""

from .timeline import Timeline
from .spec import TimelineSpec
from .contribution import contribution_on, contribution_schedule

__all__ = [
    "Timeline",
    "TimelineSpec",
    "contribution_on",
    "contribution_schedule",
]
