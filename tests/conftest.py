"""Shared fixtures for hms tests.

Script sources and the hackmud directory live side by side under
``tmp_path`` so a ``**/*`` glob over the sources never picks up the
installed copies.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_script


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Create an empty directory for script sources."""
    src = tmp_path / "src"
    src.mkdir()
    return src


@pytest.fixture
def hackmud_root(tmp_path: Path) -> Path:
    """Create a hackmud directory with users ``alice`` and ``bob``."""
    root = tmp_path / "hackmud"
    root.mkdir()
    (root / "alice.key").write_text("")
    (root / "bob.key").write_text("")
    return root


@pytest.fixture
def greet_sources(src_dir: Path) -> Path:
    """Create a default ``greet`` script and an override for ``alice``."""
    write_script(src_dir, "greet.js", "function(c, a) { return 'hello' }")
    write_script(src_dir, "alice.greet.js", "function(c, a) { return 'hi alice' }")
    return src_dir
