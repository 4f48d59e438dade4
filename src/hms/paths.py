"""Resolution of the hackmud root directory.

The root holds one ``<user>.key`` marker file per registered user and the
per-user ``<user>/scripts`` folders the game loads scripts from.

Precedence, highest first:
    1. An explicit path (``--hackmud-path``).
    2. The ``HMS_HACKMUD_PATH`` environment variable.
    3. The platform default: ``%APPDATA%/hackmud`` on Windows and
       ``$HOME/.config/hackmud`` everywhere else.
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Mapping
from pathlib import Path

from hms.exceptions import ConfigError

logger = logging.getLogger(__name__)

HACKMUD_PATH_ENV = "HMS_HACKMUD_PATH"


def _current_platform(system: str | None = None) -> str:
    """Return ``"windows"`` or ``"unix"`` for the running interpreter."""
    name = (system if system is not None else platform.system()).lower()
    return "windows" if name == "windows" else "unix"


def default_hackmud_path(
    environ: Mapping[str, str] | None = None,
    system: str | None = None,
) -> Path | None:
    """Compute the platform default root directory.

    Args:
        environ: Environment mapping (defaults to ``os.environ``).
        system: Platform name as reported by ``platform.system()``.

    Returns:
        The default path, or None when the backing variable is unset.
    """
    env = os.environ if environ is None else environ
    if _current_platform(system) == "windows":
        appdata = env.get("APPDATA")
        return Path(appdata) / "hackmud" if appdata else None
    home = env.get("HOME")
    return Path(home) / ".config" / "hackmud" if home else None


def resolve_hackmud_path(
    explicit: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
    system: str | None = None,
) -> Path:
    """Resolve the hackmud root directory from all configuration sources.

    Raises:
        ConfigError: If no source yields a path.
    """
    env = os.environ if environ is None else environ
    if explicit:
        return Path(explicit)
    from_env = env.get(HACKMUD_PATH_ENV)
    if from_env:
        logger.debug("Using %s=%s", HACKMUD_PATH_ENV, from_env)
        return Path(from_env)
    default = default_hackmud_path(env, system)
    if default is None:
        var = "APPDATA" if _current_platform(system) == "windows" else "HOME"
        raise ConfigError(
            f"${var} should be set, alternatively pass --hackmud-path "
            f"or set the ${HACKMUD_PATH_ENV} environment variable"
        )
    return default
