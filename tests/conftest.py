"""Global pytest fixtures for ARGUS UTILS."""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Undo the logging setup a CLI run leaves behind.

    The top-level command attaches console/flight-recorder handlers to the
    root logger and applies per-logger levels (-L NAME=LEVEL); neither should
    leak into the next test.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith(("argus_utils", "some.", "click_extra")):
            logging.getLogger(name).setLevel(logging.NOTSET)
