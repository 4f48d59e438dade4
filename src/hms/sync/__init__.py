"""Sync engine.

Public API::

    from hms.sync import run_sync

    report = run_sync(Path("~/.config/hackmud").expanduser(), ["**/*.js"])
    print(f"copied {report.copied} scripts to {report.user_count} users")
"""

from __future__ import annotations

from hms.sync.engine import (
    clean_user_scripts,
    install_user_scripts,
    resolve_user_scripts,
    run_sync,
    sync_users,
)
from hms.sync.models import SyncReport, UserSyncResult

__all__ = [
    "SyncReport",
    "UserSyncResult",
    "clean_user_scripts",
    "install_user_scripts",
    "resolve_user_scripts",
    "run_sync",
    "sync_users",
]
