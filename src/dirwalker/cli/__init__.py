"""Command-line interface for dirwalker."""
