"""Data models for the discovery module.

Contains the records produced by script and user discovery. Both are
immutable and live only for the duration of one sync run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Script:
    """A local script source file.

    Attributes:
        name: Script name as installed in the game (``<name>.js``).
        path: Path to the source file.
        user_override: When set, the script is installed only for this
            user, taking precedence over a same-named script without an
            override.
    """

    name: str
    path: Path
    user_override: str | None = None


@dataclass(frozen=True)
class User:
    """A hackmud user registered by a ``<name>.key`` marker file.

    Attributes:
        name: User name (the marker file stem).
        scripts_path: The user's script folder, ``<root>/<name>/scripts``.
    """

    name: str
    scripts_path: Path
