"""Keyword filtering, basename boost, and the ranking pipeline."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from atuin_z.exclusions import isExcluded
from atuin_z.models import DirectoryStat, ScoredPath, ScoringMode
from atuin_z.scoring import score

BASENAME_BOOST = 1.5
logger = logging.getLogger("atuin_z")


def isDir(path: str) -> bool:
    """Default existence check: path exists and is a directory."""
    return Path(path).is_dir()


def matchesKeywords(path: str, keywords_lower: Sequence[str]) -> bool:
    """AND over case-insensitive substring containment. No keywords → True."""
    path_lower = path.lower()
    return all(kw in path_lower for kw in keywords_lower)


def basenameMatches(path: str, keyword_lower: str) -> bool:
    """True if the final path segment contains the keyword (case-insensitive)."""
    basename = Path(path).name
    if not basename:
        return False
    return keyword_lower in basename.lower()


def _sortKey(result: ScoredPath) -> tuple[bool, float]:
    # NaN never compares, so push it behind every real score instead
    # (a comparator returning "equal" for NaN would not give a consistent order)
    if math.isnan(result.score):
        return (True, 0.0)
    return (False, -result.score)


def rank(
    stats: Iterable[DirectoryStat],
    keywords: Sequence[str],
    mode: ScoringMode,
    now_ns: int,
    exclusions: Sequence[str],
    dir_exists: Callable[[str], bool] = isDir,
) -> list[ScoredPath]:
    """Filter, score, and rank directory stats against the given keywords.

    Rules, applied per candidate in order:
    - every keyword must be a case-insensitive substring of the path (AND)
    - paths listed verbatim in `exclusions` are dropped
    - paths for which `dir_exists` returns False are dropped
    - the score is multiplied by 1.5 when the last keyword matches the basename

    Results are sorted by descending score. The sort is stable, so equal
    scores keep the order of `stats`.
    """
    keywords_lower = [kw.lower() for kw in keywords]
    last_kw = keywords_lower[-1] if keywords_lower else None

    results: list[ScoredPath] = []
    for stat in stats:
        if not matchesKeywords(stat.path, keywords_lower):
            continue
        if isExcluded(stat.path, exclusions):
            continue
        if not dir_exists(stat.path):
            continue

        s = score(stat, now_ns, mode)
        if last_kw is not None and basenameMatches(stat.path, last_kw):
            s *= BASENAME_BOOST
        results.append(ScoredPath(path=stat.path, score=s))

    results.sort(key=_sortKey)
    logger.debug("Ranked %d candidates for keywords %r", len(results), list(keywords))
    return results
