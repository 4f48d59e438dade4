"""User discovery: find users via ``<name>.key`` marker files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from hms import MARKER_EXTENSION
from hms.discovery._util import is_text
from hms.discovery.models import User
from hms.exceptions import UserDirectoryError

logger = logging.getLogger(__name__)


def discover_users(root: Path) -> list[User]:
    """Get all users by looking at the ``name.key`` files in the root.

    Only regular files directly inside ``root`` count; symlinks and
    directories are ignored.

    Args:
        root: The hackmud root directory.

    Returns:
        Users sorted by name.

    Raises:
        UserDirectoryError: If ``root`` cannot be listed.
    """
    root = Path(root)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise UserDirectoryError(f"can't read hackmud directory {root}: {exc}") from exc

    users: list[User] = []
    for entry in entries:
        try:
            if not entry.is_file(follow_symlinks=False):
                continue
        except OSError as exc:
            logger.warning("Can't read %s in hackmud directory, skipping: %s", entry.name, exc)
            continue

        marker = Path(entry.name)
        if marker.suffix != f".{MARKER_EXTENSION}":
            continue
        if not is_text(marker.stem):
            continue

        users.append(User(name=marker.stem, scripts_path=root / marker.stem / "scripts"))

    logger.info("Discovered %d user(s) in %s", len(users), root)
    return users
