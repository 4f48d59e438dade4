"""Rich output helpers for the hms CLI.

Log records go to stderr through a ``RichHandler``; summaries and tables
go to stdout.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from hms.sync import SyncReport

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route ``hms`` log records to stderr.

    Safe to call more than once; the handler is only installed the
    first time.

    Args:
        verbose: Log at INFO instead of WARNING.
    """
    logger = logging.getLogger("hms")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def report_to_dict(report: SyncReport) -> dict[str, Any]:
    """Convert a sync report to a JSON-serializable dict."""
    return {
        "clean": report.clean,
        "cleaned": report.cleaned if report.clean else None,
        "copied": report.copied,
        "users": report.user_count,
        "elapsed_ms": report.elapsed_ms,
        "results": [
            {
                "user": r.user.name,
                "scripts_path": str(r.user.scripts_path),
                "copied": r.copied,
                "failed": r.failed,
                "cleaned": r.cleaned,
            }
            for r in report.results
        ],
    }


def print_sync_table(report: SyncReport) -> None:
    """Print a per-user table of a sync run."""
    if not report.results:
        console.print("[dim]No users found.[/dim]")
        return

    table = Table(title="Script Sync", show_header=True, header_style="bold")
    table.add_column("User", style="bold")
    table.add_column("Scripts", style="dim")
    if report.clean:
        table.add_column("Cleaned", justify="right")
    table.add_column("Copied", justify="right")
    table.add_column("Failed", justify="right")

    for result in report.results:
        failed = Text(str(len(result.failed)), style="bold red" if result.failed else "green")
        row = [result.user.name, ", ".join(result.copied) or "-"]
        if report.clean:
            row.append(str(result.cleaned))
        row.extend([str(len(result.copied)), failed])
        table.add_row(*row)

    console.print(table)
