"""Printf-style formatting into a growable buffer.

Renders ``%``-style templates without any length limit. The text is rendered
once; its length is then fitted into a buffer that starts at a fixed capacity
and grows until the whole output fits. How it grows is chosen by
``GrowthStrategy``:

- ``GrowthStrategy.EXACT``: the buffer is resized once to exactly the required
  length (plus a terminator slot).
- ``GrowthStrategy.DOUBLING``: the capacity doubles until the text fits.

Growing past ``max_capacity`` (or hitting ``MemoryError``) is treated as an
allocation failure and yields an empty string. Callers that need to tell that
apart from a template that legitimately renders to ``""`` must check the
template themselves.

Surplus positional arguments are ignored, as C's ``printf`` family does:
``format_text("GetRecordingGroups", 1)`` renders ``"GetRecordingGroups"``.
Too few arguments, or arguments of the wrong type, still raise.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum
from typing import Any

from .errors import FormatTemplateError

logger = logging.getLogger(__name__)

FORMAT_BLOCK_SIZE = 2048  # initial capacity, in characters
DEFAULT_MAX_CAPACITY = 16 * 1024 * 1024
UNKNOWN_LENGTH = -1

CONVERSION_PATTERN = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?"
    r"[#0\- +]*"
    r"(?P<width>\*|\d+)?"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"[hlL]?"
    r"(?P<conversion>[diouxXeEfFgGcrsa%])"
)


class GrowthStrategy(Enum):
    """How the buffer grows when the text does not fit.

    - EXACT: jump straight to the required length.
    - DOUBLING: double the capacity.
    """

    EXACT = "exact"
    DOUBLING = "doubling"

    def next_capacity(self, capacity: int, required: int) -> int:
        """Return the capacity to retry with after an overflow.

        Args:
            capacity: The capacity that was too small.
            required: Required length, or ``UNKNOWN_LENGTH``.

        Returns:
            int: The new capacity.
        """
        if self is GrowthStrategy.EXACT and required > UNKNOWN_LENGTH:
            return required + 1
        return capacity * 2


def consumed_arguments(template: str) -> int | None:
    """Count the positional arguments ``template`` consumes.

    ``*`` widths and precisions count as arguments; ``%%`` does not.

    Returns:
        int | None: The count, or None for mapping-style templates
        (``%(name)s``), which take a single mapping instead.
    """
    count = 0
    for match in CONVERSION_PATTERN.finditer(template):
        if match["key"] is not None:
            return None
        if match["conversion"] == "%":
            continue
        count += 1 + (match["width"] == "*") + (match["precision"] == "*")
    return count


def _render(template: str, args: tuple[Any, ...]) -> str:
    wanted = consumed_arguments(template)
    if wanted is not None and len(args) > wanted:
        args = args[:wanted]
    try:
        return template % args
    except (TypeError, ValueError, KeyError) as e:
        raise FormatTemplateError(template, str(e)) from e


def format_text_v(
    template: str | None,
    args: Sequence[Any],
    *,
    strategy: GrowthStrategy = GrowthStrategy.EXACT,
    initial_capacity: int = FORMAT_BLOCK_SIZE,
    max_capacity: int = DEFAULT_MAX_CAPACITY,
) -> str:
    """Render ``template % args`` with no truncation.

    Args:
        template: A printf-style template. ``None`` renders to ``""``.
        args: Positional arguments for the template's conversion specifiers.
            Arguments beyond those the template consumes are ignored.
        strategy: How the buffer grows while the text does not fit.
        initial_capacity: Starting buffer capacity.
        max_capacity: Largest capacity the buffer may grow to.

    Returns:
        str: The rendered text, or ``""`` when the buffer could not grow large
        enough.

    Raises:
        FormatTemplateError: If the arguments do not match the template.
        ValueError: If ``initial_capacity`` is not positive.
    """
    if template is None:
        return ""
    if initial_capacity < 1:
        raise ValueError("initial_capacity must be positive")

    try:
        text = _render(template, tuple(args))
    except MemoryError:
        logger.warning("Out of memory rendering template %r", template[:64])
        return ""

    capacity = initial_capacity
    while len(text) >= capacity:
        capacity = strategy.next_capacity(capacity, len(text))
        if capacity > max_capacity:
            logger.warning(
                "Rendered text needs more than %d characters; giving up",
                max_capacity,
            )
            return ""
        logger.debug("Growing format buffer to %d (%s)", capacity, strategy.value)
    return text


def format_text(template: str | None, *args: Any) -> str:
    """Variadic form of :func:`format_text_v`.

    Example:
        ```python
        >>> format_text("GetRecordingById/%s?x=%d", "abc", 7)
        'GetRecordingById/abc?x=7'
        ```
    """
    return format_text_v(template, args)
