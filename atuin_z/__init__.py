"""Frecency-ranked directory jumping over Atuin shell history."""

from atuin_z.matching import rank
from atuin_z.models import DirectoryStat, ScoredPath, ScoringMode
from atuin_z.scoring import score

__all__ = ["DirectoryStat", "ScoredPath", "ScoringMode", "rank", "score"]
