"""
Pytest configuration and fixtures for alphanum tests.
"""

from pathlib import Path

import pytest


@pytest.fixture
def course_tree(tmp_path: Path) -> Path:
    """A small directory tree with numbered sections and lessons."""
    root = tmp_path / "library"
    for section in ("s1 Intro", "s2 Basics", "s10 Wrap-up"):
        (root / section).mkdir(parents=True)
    for name in ("lesson10.mp4", "lesson2.mp4", "lesson1.mp4", "notes.txt"):
        (root / "s2 Basics" / name).write_text("x")
    (root / "s10 Wrap-up" / "lesson1.MP4").write_text("x")
    (root / "s1 Intro" / "lesson1.mp4").write_text("x")
    (root / "readme12.txt").write_text("x")
    (root / "readme3.txt").write_text("x")
    return root


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch, course_tree: Path) -> Path:
    """Point the app at ``course_tree``."""
    monkeypatch.setenv("ALPHANUM_ROOT", str(course_tree))
    monkeypatch.delenv("ALPHANUM_MAX_ITEMS", raising=False)
    return course_tree
