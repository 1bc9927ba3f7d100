"""
Pytest fixtures for the minigrep tests.
"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's MINIGREP_* settings out of every test."""
    for name in ("MINIGREP_MAX_LINE", "MINIGREP_COLOR", "MINIGREP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fruit_file(tmp_path):
    """A small text file with a few fruit names, one per line."""
    path = tmp_path / "fruits.txt"
    path.write_text("apple\nbanana\ncherry\npineapple\n", encoding="utf-8")
    return path


@pytest.fixture
def fruit_tree(tmp_path):
    """A directory tree with matching lines at two levels."""
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("apple\nbanana\n", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("grape\npineapple\n", encoding="utf-8")
    return root
