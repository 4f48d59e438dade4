"""Shared test helpers for building script source trees."""

from __future__ import annotations

from pathlib import Path


def write_script(directory: Path, filename: str, content: str) -> Path:
    """Write a script source file, creating parent directories."""
    path = directory / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path
