"""Command-line interface for hms."""
