"""Delimiter-based splitting with an optional cap on the number of pieces."""

from .errors import InvalidDelimiterError


def split(
    text: str,
    delimiter: str,
    max_strings: int = 0,
    *,
    whole_input_when_unsplit: bool = True,
) -> list[str]:
    """Split ``text`` on every non-overlapping occurrence of ``delimiter``.

    Occurrences are matched greedily left to right, each search starting right
    after the end of the previous match.

    Args:
        text: The string to split.
        delimiter: Non-empty separator.
        max_strings: Maximum number of pieces; ``0`` means unlimited. When the
            cap is reached the last piece keeps the rest of ``text`` verbatim,
            further delimiters included.
        whole_input_when_unsplit: Only matters when ``max_strings == 1`` and
            ``text`` contains the delimiter. ``True`` returns the whole input as
            the single piece; ``False`` returns the text before the first
            delimiter instead.

    Returns:
        list[str]: The pieces. Empty ``text`` gives ``[]``; ``text`` without
        the delimiter gives ``[text]``. A trailing delimiter gives a trailing
        ``""``.

    Raises:
        InvalidDelimiterError: If ``delimiter`` is empty.
        ValueError: If ``max_strings`` is negative.

    Example:
        ```python
        >>> split("a,b,c", ",", 2)
        ['a', 'b,c']
        ```
    """
    if not delimiter:
        raise InvalidDelimiterError(delimiter)
    if max_strings < 0:
        raise ValueError(f"max_strings must be >= 0, got {max_strings}")
    if not text:
        return []

    if max_strings == 1 and not whole_input_when_unsplit:
        return [text.split(delimiter, 1)[0]]
    return text.split(delimiter, max_strings - 1)
