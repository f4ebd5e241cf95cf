"""Entrypoints (inbound adapters) for ARGUS UTILS.

Expose the helpers to the outside world: currently the ``argus-utils`` CLI.
Parse and validate inputs, call the helpers, and present results.
"""
