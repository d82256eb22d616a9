"""
Shared pytest fixtures for the explorer test suite.

Provides fixtures for:
- Isolated configuration storage
- A sample directory tree
"""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_explorer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove EXPLORERD_* variables so the host environment cannot leak into tests."""
    for key in list(os.environ):
        if key.upper().startswith("EXPLORERD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point EXPLORERD_HOME at a temporary directory.

    Returns:
        Path to temporary home directory
    """
    home = tmp_path / "explorerd_home"
    home.mkdir()
    monkeypatch.setenv("EXPLORERD_HOME", str(home))
    return home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small project tree.

    Layout:
        project/
            README.md          (11 bytes)
            app.py
            Makefile           (no extension)
            docs/
                guide.txt
            src/
                main.py
                node_modules/
                    dep.js
            node_modules/
                lib.js
            empty/

    Returns:
        Path to project root
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / "README.md").write_text("# Project\n\n", encoding="utf-8")
    (root / "app.py").write_text("print('hi')\n", encoding="utf-8")
    (root / "Makefile").write_text("all:\n", encoding="utf-8")

    (root / "docs").mkdir()
    (root / "docs" / "guide.txt").write_text("guide", encoding="utf-8")

    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("", encoding="utf-8")
    (root / "src" / "node_modules").mkdir()
    (root / "src" / "node_modules" / "dep.js").write_text("", encoding="utf-8")

    (root / "node_modules").mkdir()
    (root / "node_modules" / "lib.js").write_text("", encoding="utf-8")

    (root / "empty").mkdir()

    return root
