"""Terminal message helpers for the argus-utils CLI.

Renders user-visible notices with an emoji→ASCII fallback. Messages write to
stderr so stdout stays limited to command results.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "⚠️").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "utf-8"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Warning marker suitable for terminals with/without emoji support.

    Returns:
        str: "⚠️" when the stream supports it; otherwise the ASCII fallback "[!]".
    """
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Example:
        ``⚠️  No SMB user configured; credentials not added.``
    """
    g = caution_glyph()
    click.secho(f"{g}  {msg}", fg="yellow", bold=True, err=True)
