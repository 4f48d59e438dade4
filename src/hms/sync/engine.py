"""The sync pass: resolve, clean and install scripts for every user.

Per user, in order:
    1. Clean (optional): delete every entry in the user's scripts folder.
    2. Resolve: pick the script to install under each name.
    3. Install: copy each resolved source to ``<scripts>/<name>.js``.

Resolution Rules:
    - A script addressed to the user (``<user>.<name>.js``) always wins
      its name. Among several, the last one discovered wins.
    - A script with no override is used only when nothing else claimed
      its name. Among several, the first one discovered wins.
    - Scripts addressed to other users are ignored.

Per-file failures are logged and skipped; only discovery errors abort
the run.
"""

from __future__ import annotations

import logging
import os
import shutil
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from hms import SCRIPT_EXTENSION
from hms.discovery import DEFAULT_PATTERNS, Script, User, discover_scripts, discover_users
from hms.sync.models import SyncReport, UserSyncResult

logger = logging.getLogger(__name__)


def resolve_user_scripts(scripts: Iterable[Script], user: User) -> dict[str, Script]:
    """Select the script installed under each name for one user.

    Args:
        scripts: All discovered scripts, in discovery order.
        user: The user to resolve for.

    Returns:
        Script name to the script that will be installed under it.
    """
    scripts = list(scripts)
    resolved: dict[str, Script] = {}

    # Defaults first: first seen wins.
    for script in scripts:
        if script.user_override is None and script.name not in resolved:
            resolved[script.name] = script

    # Overrides for this user replace defaults unconditionally.
    for script in scripts:
        if script.user_override == user.name:
            resolved[script.name] = script

    return resolved


def clean_user_scripts(user: User) -> int:
    """Delete every entry in the user's scripts folder.

    Returns:
        Number of entries actually deleted. Entries that could not be
        deleted are logged and not counted.
    """
    try:
        with os.scandir(user.scripts_path) as it:
            entries = sorted(Path(e.path) for e in it)
    except OSError as exc:
        logger.warning("Couldn't clean scripts for %s: %s", user.name, exc)
        return 0

    removed = 0
    for path in entries:
        try:
            path.unlink()
        except OSError as exc:
            logger.warning("Couldn't clean file %s: %s", path, exc)
            continue
        removed += 1
    return removed


def install_user_scripts(
    resolved: dict[str, Script], user: User,
) -> tuple[list[str], list[str]]:
    """Copy resolved scripts into the user's scripts folder.

    The folder is created when missing. A target that exists as a
    directory is a failure, never a copy into that directory.

    Returns:
        ``(copied, failed)`` lists of script names.
    """
    copied: list[str] = []
    failed: list[str] = []
    for name, script in resolved.items():
        target = user.scripts_path / f"{name}.{SCRIPT_EXTENSION}"
        try:
            user.scripts_path.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(script.path, target)
            shutil.copymode(script.path, target)
        except OSError as exc:
            logger.error("Couldn't copy script %s.%s, skipping: %s", user.name, name, exc)
            failed.append(name)
            continue
        logger.debug("Copied %s -> %s", script.path, target)
        copied.append(name)
    return copied, failed


def sync_users(
    scripts: Sequence[Script], users: Iterable[User], clean: bool = False,
) -> SyncReport:
    """Run the clean/resolve/install sequence for every user.

    Args:
        scripts: Discovered scripts.
        users: Discovered users.
        clean: Delete existing files in each scripts folder first.
    """
    report = SyncReport(clean=clean)
    for user in users:
        result = UserSyncResult(user=user)
        if clean:
            result.cleaned = clean_user_scripts(user)

        resolved = resolve_user_scripts(scripts, user)
        result.copied, result.failed = install_user_scripts(resolved, user)
        logger.info(
            "Synced %s: %d copied, %d failed", user.name, len(result.copied), len(result.failed),
        )
        report.results.append(result)
    return report


def run_sync(
    root: Path,
    patterns: Iterable[str] = DEFAULT_PATTERNS,
    clean: bool = False,
    base_dir: Path | None = None,
) -> SyncReport:
    """Discover scripts and users, then sync them.

    Args:
        root: The hackmud root directory.
        patterns: Script glob patterns.
        clean: Delete existing files in each scripts folder first.
        base_dir: Directory relative patterns are resolved against.

    Returns:
        The sync report, timed from the start of discovery.

    Raises:
        PatternError: If a pattern is malformed.
        UserDirectoryError: If ``root`` cannot be listed.
    """
    start = time.perf_counter()

    scripts = discover_scripts(patterns, base_dir=base_dir)
    users = discover_users(root)
    report = sync_users(scripts, users, clean=clean)

    report.elapsed_ms = int((time.perf_counter() - start) * 1000)
    return report
