"""Result types produced by the sync engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from hms.discovery.models import User


@dataclass
class UserSyncResult:
    """Outcome of syncing one user.

    Attributes:
        user: The user that was synced.
        copied: Names of scripts copied into the user's folder.
        failed: Names of scripts whose copy failed.
        cleaned: Files successfully deleted by clean mode.
    """

    user: User
    copied: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    cleaned: int = 0


@dataclass
class SyncReport:
    """Complete result of one sync run.

    Totals are derived from ``results`` so a report can never disagree
    with its per-user breakdown.

    Attributes:
        results: Per-user outcomes, in sync order.
        clean: Whether clean mode ran.
        elapsed_ms: Wall-clock duration of the run in milliseconds.
    """

    results: list[UserSyncResult] = field(default_factory=list)
    clean: bool = False
    elapsed_ms: int = 0

    @property
    def cleaned(self) -> int:
        return sum(r.cleaned for r in self.results)

    @property
    def copied(self) -> int:
        return sum(len(r.copied) for r in self.results)

    @property
    def failed(self) -> int:
        return sum(len(r.failed) for r in self.results)

    @property
    def user_count(self) -> int:
        return len(self.results)
