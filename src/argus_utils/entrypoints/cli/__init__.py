"""Command-line interface for ARGUS UTILS."""
