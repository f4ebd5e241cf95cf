"""Functional tests: the ``argus-utils`` CLI as a user sees it."""
