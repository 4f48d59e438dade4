"""Helpers shared by script and user discovery."""

from __future__ import annotations


def is_text(value: str) -> bool:
    """Return True if a filesystem name decoded cleanly to text."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
