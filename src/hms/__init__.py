"""hms: sync locally authored hackmud scripts into per-user script folders."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Recognized file extensions (without the leading dot).
SCRIPT_EXTENSION = "js"
MARKER_EXTENSION = "key"
