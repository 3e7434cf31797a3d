"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from atuin_z.models import DirectoryStat

NOW = 1_000_000_000_000_000_000  # 1e18 ns

_ENV_VARS = ("ATUIN_Z_PWD", "ATUIN_DB_PATH", "ATUIN_DATA_DIR", "XDG_DATA_HOME")


def createSchema(db: sqlite3.Connection) -> None:
    """Atuin's history table. Production code only ever reads it."""
    db.execute(
        """CREATE TABLE IF NOT EXISTS history (
            id TEXT PRIMARY KEY,
            timestamp INTEGER NOT NULL,
            duration INTEGER NOT NULL,
            exit INTEGER NOT NULL,
            command TEXT NOT NULL,
            cwd TEXT NOT NULL,
            session TEXT NOT NULL,
            hostname TEXT NOT NULL,
            deleted_at INTEGER
        )"""
    )
    db.commit()


def insertHistory(
    db: sqlite3.Connection, id: str, cwd: str, timestamp: int, deleted: bool = False
) -> None:
    db.execute(
        """INSERT INTO history (id, timestamp, duration, exit, command, cwd, session, hostname,
                                deleted_at)
           VALUES (?, ?, 0, 0, 'test', ?, 'sess', 'host', ?)""",
        (id, timestamp, cwd, timestamp if deleted else None),
    )
    db.commit()


def makeStat(path: str = "/test", visit_count: int = 10, last_visit: int = NOW) -> DirectoryStat:
    return DirectoryStat(path=path, visit_count=visit_count, last_visit_time=last_visit)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clear Atuin/XDG variables and point HOME at tmp_path for every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / "history.db"


@pytest.fixture
def history_db(history_path: Path) -> sqlite3.Connection:
    """Writable connection used to seed a history database."""
    conn = sqlite3.connect(str(history_path))
    createSchema(conn)
    yield conn
    conn.close()
