"""Thin file read/write wrappers.

Kept deliberately shallow: these are the only helpers that touch the
filesystem. Failures are logged and reported through the return value.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def read_file_contents(path: PathLike) -> str | None:
    """Read a text file line by line and join the lines without terminators.

    Args:
        path: File to read.

    Returns:
        str | None: The concatenated lines, or None if the file cannot be opened.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as fh:
            return "".join(line.rstrip("\r\n") for line in fh)
    except OSError as e:
        logger.debug("can not open %s: %s", path, e)
        return None


def write_file_contents(path: PathLike, content: str) -> bool:
    """Write ``content`` to ``path``, replacing any existing file.

    Args:
        path: Destination file.
        content: Whole buffer to write.

    Returns:
        bool: True when the file was written.
    """
    try:
        with Path(path).open("w", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as e:
        logger.error("can not write to %s: %s", path, e)
        return False
    logger.debug("wrote file %s", path)
    return True
