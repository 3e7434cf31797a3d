"""Pydantic models for directory statistics and ranked results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

_I64_MAX = 2**63 - 1


class ScoringMode(str, Enum):
    FRECENCY = "frecency"  # visit count weighted by recency bucket
    FREQUENCY = "frequency"
    RECENCY = "recency"


class DirectoryStat(BaseModel):
    """One aggregated row per distinct directory from the history table."""

    path: str
    # Bounded to the datastore's signed 64-bit INTEGER columns
    visit_count: int = Field(ge=0, le=_I64_MAX)
    last_visit_time: int = Field(ge=-_I64_MAX - 1, le=_I64_MAX)  # ns since epoch


class ScoredPath(BaseModel):
    path: str
    score: float
