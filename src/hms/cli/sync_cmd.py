"""``hms sync [patterns...]``: Copy local scripts into every user's folder.

Scripts named ``<name>.js`` go to every user found in the hackmud
directory; scripts named ``<user>.<name>.js`` go only to ``<user>`` and
replace a same-named script for them.

Exit Codes:
    0: Sync completed (individual copy failures are reported, not fatal).
    1: Invalid glob pattern, or the hackmud directory is unreadable or unset.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from hms.discovery import DEFAULT_PATTERNS
from hms.exceptions import HmsError
from hms.paths import HACKMUD_PATH_ENV, resolve_hackmud_path
from hms.sync import SyncReport, run_sync


def _print_summary(report: SyncReport) -> None:
    if report.clean:
        click.echo(f"cleaned {report.cleaned} scripts")
    click.echo(
        f"copied {report.copied} scripts to {report.user_count} users "
        f"in {report.elapsed_ms}ms"
    )


@click.command("sync")
@click.argument("patterns", nargs=-1)
@click.option(
    "--hackmud-path",
    type=click.Path(path_type=Path),
    default=None,
    help=(
        f"hackmud directory holding the <user>.key files "
        f"(default: ${HACKMUD_PATH_ENV}, else ~/.config/hackmud or %APPDATA%/hackmud)."
    ),
)
@click.option(
    "--clean", "-c",
    is_flag=True,
    default=False,
    help="Delete every file in each user's scripts folder before copying.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log progress and show a per-user table.",
)
def sync_command(
    patterns: tuple[str, ...],
    hackmud_path: Path | None,
    clean: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Sync local scripts into the scripts folder of every hackmud user.

    PATTERNS are glob patterns selecting script files (default: **/*).
    Only .js files are used. A user's scripts folder is created if it
    does not exist yet.
    """
    from hms.cli.output import configure_logging, print_sync_table, report_to_dict

    configure_logging(verbose)
    try:
        root = resolve_hackmud_path(hackmud_path)
        report = run_sync(root, patterns or DEFAULT_PATTERNS, clean=clean)
    except HmsError as exc:
        click.echo(f"error: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(report_to_dict(report), indent=2))
    else:
        if verbose:
            print_sync_table(report)
        _print_summary(report)
    sys.exit(0)
