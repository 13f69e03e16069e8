"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with a hidden file, a visible file, a directory and a symlink.

    Layout:
        .hidden.txt   (10 bytes)
        note.txt      (5 bytes)
        img/
        link -> note.txt
    """
    root = tmp_path / "sample"
    root.mkdir()
    (root / ".hidden.txt").write_text("x" * 10)
    (root / "note.txt").write_text("x" * 5)
    (root / "img").mkdir()
    (root / "link").symlink_to("note.txt")
    return root


@pytest.fixture
def sized_dir(tmp_path: Path) -> Path:
    """Directory of regular files with known sizes.

    Layout:
        big.bin     (300 bytes)
        small.txt   (10 bytes)
        mid.md      (200 bytes)
        also.txt    (10 bytes)
    """
    root = tmp_path / "sized"
    root.mkdir()
    (root / "big.bin").write_bytes(b"\0" * 300)
    (root / "small.txt").write_bytes(b"\0" * 10)
    (root / "mid.md").write_bytes(b"\0" * 200)
    (root / "also.txt").write_bytes(b"\0" * 10)
    return root
