"""Exclusion list: exact directory paths never offered as jump targets."""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import Path

from atuin_z.errors import ExclusionsError

logger = logging.getLogger("atuin_z")


def loadExclusions(exclusions_path: str | Path) -> list[str]:
    """Read one path per line. Missing file → empty list; blank lines skipped."""
    p = Path(exclusions_path)
    if not p.exists():
        return []
    try:
        content = p.read_text()
    except OSError as e:
        raise ExclusionsError(f"failed to read exclusions file: {p}") from e
    entries = [line for line in content.splitlines() if line]
    logger.debug("Loaded %d exclusions from %s", len(entries), p)
    return entries


def addExclusion(exclusions_path: str | Path, directory: str) -> bool:
    """Append a directory to the exclusion file. Returns False if already present."""
    p = Path(exclusions_path)
    entries = loadExclusions(p)
    if directory in entries:
        return False

    entries.append(directory)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("\n".join(entries) + "\n")
    except OSError as e:
        raise ExclusionsError(f"failed to write exclusions file: {p}") from e
    logger.debug("Excluded %s", directory)
    return True


def isExcluded(directory: str, exclusions: Collection[str]) -> bool:
    """Exact string match only: no prefix or substring semantics."""
    return directory in exclusions
