"""
TimelineSpec — validated construction of Timelines with explicit defaults.

Usage:
    spec = TimelineSpec(name="Project 1", start_date=date(2022, 1, 1), weeks=4, revenue=33333)
    timeline = spec.build()
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .timeline import Timeline

DEFAULT_NAME = "New Timeline"
DEFAULT_START_DATE = dt.date(1970, 1, 1)
DEFAULT_WEEKS = 4


class TimelineSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = DEFAULT_NAME
    start_date: dt.date = DEFAULT_START_DATE
    weeks: int = Field(default=DEFAULT_WEEKS, ge=0)
    days: Optional[int] = Field(default=None, ge=0)  # overrides weeks when set
    revenue: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @property
    def duration(self) -> dt.timedelta:
        if self.days is not None:
            return dt.timedelta(days=self.days)
        return dt.timedelta(weeks=self.weeks)

    def build(self) -> Timeline:
        return Timeline(
            name=self.name,
            start_date=self.start_date,
            duration=self.duration,
            expected_value=self.revenue,
        )
