"""Frecency scoring: visit count weighted by how long ago the last visit was."""

from __future__ import annotations

from atuin_z.models import DirectoryStat, ScoringMode

NANOS_PER_SECOND = 1_000_000_000
HOUR_NS = 3600 * NANOS_PER_SECOND
DAY_NS = 24 * HOUR_NS
WEEK_NS = 7 * DAY_NS

# (upper age bound, weight); an age equal to the bound falls into the next bucket
_BUCKETS: list[tuple[int, float]] = [
    (HOUR_NS, 4.0),
    (DAY_NS, 2.0),
    (WEEK_NS, 0.5),
]
_OLDEST_WEIGHT = 0.25


def recencyWeight(age_ns: int) -> float:
    """Step weight for an age in nanoseconds."""
    for bound, weight in _BUCKETS:
        if age_ns < bound:
            return weight
    return _OLDEST_WEIGHT


def score(stat: DirectoryStat, now_ns: int, mode: ScoringMode = ScoringMode.FRECENCY) -> float:
    """Score a directory under the given mode.

    - frecency: visit_count * recencyWeight(now - last_visit), age clamped at 0
    - frequency: visit_count
    - recency: last_visit_time (later is higher)
    """
    if mode is ScoringMode.FREQUENCY:
        return float(stat.visit_count)
    if mode is ScoringMode.RECENCY:
        return float(stat.last_visit_time)
    age = max(0, now_ns - stat.last_visit_time)
    return stat.visit_count * recencyWeight(age)
