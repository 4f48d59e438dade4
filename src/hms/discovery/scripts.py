"""Script discovery: expand glob patterns into ``Script`` records.

A script file is named ``<name>.js`` for a script installed for every
user, or ``<user>.<name>.js`` for a script installed only for ``<user>``.
The stem is split on ``.`` from the right; segments beyond the second
are ignored.

Patterns are validated up front so a typo aborts the run before anything
is copied. Validation rejects what the matcher would otherwise take
literally: an unclosed ``[`` class, runs of three or more ``*``, and a
``**`` that is not a whole path component.

A directory that can't be listed while expanding is skipped with a
warning; the rest of the pattern still expands.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from stat import S_ISDIR

from hms import SCRIPT_EXTENSION
from hms.discovery._util import is_text
from hms.discovery.models import Script
from hms.exceptions import PatternError

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("**/*",)

_SEPARATORS = frozenset({"/", os.sep})
_MAGIC = re.compile(r"[*?[]")


def validate_pattern(pattern: str) -> None:
    """Check glob syntax.

    Raises:
        PatternError: If the pattern is malformed.
    """
    i, n = 0, len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            run = i - start
            if run > 2:
                raise PatternError(
                    pattern, start + 2,
                    "wildcards are either regular `*` or recursive `**`",
                )
            if run == 2:
                alone_before = start == 0 or pattern[start - 1] in _SEPARATORS
                alone_after = i == n or pattern[i] in _SEPARATORS
                if not (alone_before and alone_after):
                    raise PatternError(
                        pattern, start,
                        "recursive wildcards must form a single path component",
                    )
            continue
        if char == "[":
            # A ']' right after '[' or '[!' is a member, not the end.
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise PatternError(pattern, i, "invalid range pattern")
            i = close + 1
            continue
        i += 1


def parse_script_stem(stem: str) -> tuple[str, str | None]:
    """Split a filename stem into ``(name, user_override)``.

    >>> parse_script_stem("greet")
    ('greet', None)
    >>> parse_script_stem("alice.greet")
    ('greet', 'alice')
    """
    parts = stem.rsplit(".", 2)
    name = parts[-1]
    user_override = parts[-2] if len(parts) > 1 else None
    return name, user_override


def _warn_unreadable(exc: OSError) -> None:
    logger.warning("Can't read path %s, skipping: %s", exc.filename, exc)


def _list_dir(directory: Path, dirs_only: bool) -> list[str]:
    """Names in a directory; an unreadable directory lists as empty."""
    try:
        with os.scandir(directory) as it:
            return [e.name for e in it if not dirs_only or e.is_dir()]
    except OSError as exc:
        _warn_unreadable(exc)
        return []


def _walk(top: Path, include_files: bool) -> Iterator[Path]:
    """Expand ``**``: ``top`` and the directories below it, or every path
    below it when ``**`` ends the pattern.
    """
    for dirpath, _dirnames, filenames in os.walk(top, onerror=_warn_unreadable):
        current = Path(dirpath)
        if not include_files:
            yield current
        else:
            if current != top:
                yield current
            for name in filenames:
                yield current / name


def _expand(pattern: str, base_dir: Path | None) -> Iterator[Path]:
    """Yield the paths matching one pattern, sorted.

    Walks one component at a time so every directory that can't be
    listed is reported instead of silently dropping what is below it.
    """
    pure = Path(pattern)
    if pure.is_absolute():
        current = [Path(pure.anchor)]
        parts = pure.parts[1:]
    else:
        current = [base_dir if base_dir is not None else Path()]
        parts = pure.parts

    for index, part in enumerate(parts):
        last = index == len(parts) - 1
        found: list[Path] = []
        for directory in current:
            if part == "**":
                found.extend(_walk(directory, include_files=last))
            elif _MAGIC.search(part):
                found.extend(
                    directory / name
                    for name in _list_dir(directory, dirs_only=not last)
                    if fnmatch.fnmatchcase(name, part)
                )
            else:
                candidate = directory / part
                exists = os.path.lexists if last else os.path.isdir
                if exists(candidate):
                    found.append(candidate)
        current = found

    yield from sorted(dict.fromkeys(current))


def _to_script(path: Path) -> Script | None:
    """Build a ``Script`` from a matched path, or None if it is not one."""
    try:
        mode = path.stat().st_mode
    except OSError as exc:
        logger.warning("Can't read path %s, skipping: %s", path, exc)
        return None
    if S_ISDIR(mode):
        return None
    if path.suffix != f".{SCRIPT_EXTENSION}":
        return None
    if not is_text(path.stem):
        return None

    name, user_override = parse_script_stem(path.stem)
    return Script(name=name, path=path, user_override=user_override)


def discover_scripts(
    patterns: Iterable[str] = DEFAULT_PATTERNS,
    base_dir: Path | None = None,
) -> list[Script]:
    """Expand glob patterns into the scripts they match.

    Args:
        patterns: Glob patterns, expanded in order. ``**`` matches any
            number of directories.
        base_dir: Directory relative patterns are resolved against
            (defaults to the current working directory).

    Returns:
        Scripts in pattern order, then sorted path order within a
        pattern. A file matched by two patterns appears twice.

    Raises:
        PatternError: If any pattern is malformed. No pattern is
            expanded in that case.
    """
    patterns = list(patterns)
    for pattern in patterns:
        validate_pattern(pattern)

    scripts: list[Script] = []
    for pattern in patterns:
        for path in _expand(pattern, base_dir):
            script = _to_script(path)
            if script is not None:
                scripts.append(script)
    logger.info("Discovered %d script(s) from %d pattern(s)", len(scripts), len(patterns))
    return scripts
