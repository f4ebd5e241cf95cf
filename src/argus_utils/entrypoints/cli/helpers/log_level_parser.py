"""Helpers for parsing logger-level CLI options.

This module provides utilities used by the CLI to parse options of the
form NAME=LEVEL (repeatable or comma/space-separated). Item lists are split
with :func:`argus_utils.utils.split.split` on commas after normalizing
whitespace, and textual log level names are converted/validated into the
corresponding numeric logging levels.
"""

import logging
import re

import click

from argus_utils.utils.split import split

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string (which may contain multiple comma/space-
    separated items) or a sequence of strings (as provided by repeatable Click
    options).

    Args:
        value (str | list[str] | tuple[str, ...]): The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend(s for s in split(re.sub(r"[,\s]+", ",", v), ",") if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI. Each
    item must be of the form NAME=LEVEL where LEVEL is a standard logging level
    name (e.g. DEBUG, INFO, WARNING).

    Args:
        ctx (click.Context): Click context (passed by Click, not used here).
        param (click.Parameter | None): Click parameter (passed by Click, not used here).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        pieces = split(item, "=", 2)
        if len(pieces) != 2:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        name, level_str = pieces
        if not isinstance(lvl := logging.getLevelName(level_str.strip().upper()), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
