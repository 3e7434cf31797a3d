"""Tests for the exclusion list file."""

from __future__ import annotations

from pathlib import Path

import pytest

from atuin_z.errors import ExclusionsError
from atuin_z.exclusions import addExclusion, isExcluded, loadExclusions


@pytest.fixture
def excl_path(tmp_path: Path) -> Path:
    return tmp_path / "atuin-z" / "exclusions"


class TestIsExcluded:
    def test_matchesExactPath(self):
        assert isExcluded("/home/user/secret", ["/home/user/secret"])

    def test_noMatch(self):
        assert not isExcluded("/home/user/public", ["/home/user/secret"])

    def test_emptyList(self):
        assert not isExcluded("/anything", [])

    def test_doesNotMatchSubdirectories(self):
        assert not isExcluded("/home/user/child", ["/home/user"])

    def test_doesNotMatchPartialPath(self):
        assert not isExcluded("/home/user/project", ["/home/user/proj"])


class TestLoadExclusions:
    def test_missingFileIsEmpty(self, excl_path: Path):
        assert loadExclusions(excl_path) == []

    def test_skipsBlankLines(self, excl_path: Path):
        excl_path.parent.mkdir(parents=True)
        excl_path.write_text("/a\n\n/b\n")
        assert loadExclusions(excl_path) == ["/a", "/b"]

    def test_unreadableRaises(self, tmp_path: Path):
        # A directory where the file should be cannot be read as text
        target = tmp_path / "exclusions"
        target.mkdir()
        with pytest.raises(ExclusionsError):
            loadExclusions(target)


class TestAddExclusion:
    def test_createsFileAndParents(self, excl_path: Path):
        assert addExclusion(excl_path, "/home/user/secret") is True
        assert excl_path.read_text() == "/home/user/secret\n"

    def test_appendsInOrder(self, excl_path: Path):
        addExclusion(excl_path, "/a")
        addExclusion(excl_path, "/b")
        assert loadExclusions(excl_path) == ["/a", "/b"]

    def test_idempotent(self, excl_path: Path):
        addExclusion(excl_path, "/a")
        assert addExclusion(excl_path, "/a") is False
        assert excl_path.read_text() == "/a\n"

    def test_unwritableRaises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(ExclusionsError):
            addExclusion(blocker / "exclusions", "/a")
