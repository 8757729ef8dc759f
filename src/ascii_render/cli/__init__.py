"""Command-line interface for ascii-render."""
