"""hms exception hierarchy.

All public exceptions inherit from HmsError, giving callers a single base
class to catch when they want to handle any hms-specific failure without
swallowing unrelated errors. Each of these aborts a sync run; per-file
problems are logged instead of raised.
"""

from __future__ import annotations


class HmsError(Exception):
    """Base exception for all hms errors."""


class PatternError(HmsError):
    """Raised when a script glob pattern is syntactically invalid.

    Covers unclosed character classes and misplaced recursive
    wildcards. Raised before any pattern is expanded, so nothing is
    copied when it occurs.
    """

    def __init__(self, pattern: str, pos: int, msg: str) -> None:
        self.pattern = pattern
        self.pos = pos
        self.msg = msg
        super().__init__(
            f"failed to parse glob '{pattern}': pattern syntax error "
            f"near position {pos}: {msg}"
        )


class UserDirectoryError(HmsError):
    """Raised when the hackmud root directory cannot be listed."""


class ConfigError(HmsError):
    """Raised when no hackmud root directory can be resolved.

    Happens when neither ``--hackmud-path``, ``HMS_HACKMUD_PATH`` nor the
    platform variable backing the default (``APPDATA`` / ``HOME``) is set.
    """
