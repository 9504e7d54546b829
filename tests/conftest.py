"""Shared fixtures for terminal-links tests."""

from pathlib import Path

import pytest


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A small project tree under ``<tmp>/proj``."""
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "app.ts").write_text("export {}\n")
    (root / "lib").mkdir()
    (root / "lib" / "util.py").write_text("")
    (root / "tests").mkdir()
    (root / "tests" / "util.py").write_text("")
    (root / "README.md").write_text("# proj\n")
    return root


@pytest.fixture
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and cwd at empty directories so no real settings load."""
    home = tmp_path / "home"
    home.mkdir()
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TERMINAL_LINKS_OS", raising=False)
    monkeypatch.chdir(cwd)
    return cwd
