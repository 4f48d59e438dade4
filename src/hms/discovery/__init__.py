"""Discovery of local scripts and registered hackmud users.

Public API::

    from hms.discovery import discover_scripts, discover_users

    scripts = discover_scripts(["src/**/*.js"])
    users = discover_users(Path("~/.config/hackmud").expanduser())
"""

from __future__ import annotations

from hms.discovery.models import Script, User
from hms.discovery.scripts import (
    DEFAULT_PATTERNS,
    discover_scripts,
    parse_script_stem,
    validate_pattern,
)
from hms.discovery.users import discover_users

__all__ = [
    "DEFAULT_PATTERNS",
    "Script",
    "User",
    "discover_scripts",
    "discover_users",
    "parse_script_stem",
    "validate_pattern",
]
