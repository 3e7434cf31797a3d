"""Read-only access to Atuin's SQLite history database."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from atuin_z.errors import DatastoreError
from atuin_z.models import DirectoryStat

logger = logging.getLogger("atuin_z")

_QUERY_ALL = """
    SELECT cwd, count(*) AS freq, max(timestamp) AS last_visit
    FROM history
    WHERE deleted_at IS NULL
    GROUP BY cwd
"""

# Compare the leading characters verbatim: LIKE would be case-insensitive
# and treat '%' and '_' in directory names as wildcards.
_QUERY_UNDER = """
    SELECT cwd, count(*) AS freq, max(timestamp) AS last_visit
    FROM history
    WHERE deleted_at IS NULL
      AND length(cwd) > length(?1)
      AND substr(cwd, 1, length(?1)) = ?1
    GROUP BY cwd
"""


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open the history database read-only. Never creates the file."""
    p = Path(db_path).expanduser()
    if not p.is_file():
        raise DatastoreError(f"Atuin history database not found: {p}")

    try:
        db = sqlite3.connect(f"{p.resolve().as_uri()}?mode=ro", uri=True)
        db.row_factory = sqlite3.Row
        db.execute("PRAGMA query_only = ON")
    except sqlite3.Error as e:
        raise DatastoreError(f"could not open Atuin history database {p}: {e}") from e
    logger.debug("Opened %s read-only", p)
    return db


def queryDirs(db: sqlite3.Connection, cwd_prefix: str | None = None) -> list[DirectoryStat]:
    """Aggregate history rows into one DirectoryStat per visited directory.

    Soft-deleted rows (deleted_at set) are ignored. With `cwd_prefix`, only
    strict descendants of that directory are returned, never the prefix itself.
    """
    try:
        if cwd_prefix is None:
            rows = db.execute(_QUERY_ALL).fetchall()
        else:
            pattern = cwd_prefix.rstrip("/") + "/"
            rows = db.execute(_QUERY_UNDER, (pattern,)).fetchall()
    except sqlite3.DatabaseError as e:
        raise DatastoreError(f"malformed Atuin history database: {e}") from e

    stats = [
        DirectoryStat(path=row["cwd"], visit_count=row["freq"], last_visit_time=row["last_visit"])
        for row in rows
    ]
    logger.debug("Queried %d directories (prefix=%r)", len(stats), cwd_prefix)
    return stats
