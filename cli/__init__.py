"""Command-line interface for strip-tags."""
