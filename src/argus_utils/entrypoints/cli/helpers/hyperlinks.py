"""OSC-8 hyperlink rendering for ``argus-utils`` help text.

Reference links in the help epilog are emitted as clickable OSC-8 links on
terminals known to support them and as plain text everywhere else.
"""

import os
import sys
from typing import TextIO

OSC8_TERM_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` renders OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for anything that is not a TTY; otherwise True when the
        environment identifies a terminal from the allowlist (VS Code, iTerm2,
        WezTerm, Kitty, Windows Terminal, VTE-based terminals, Alacritty,
        Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERM_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None) -> str:
    """Render ``url`` as a terminal hyperlink when supported.

    Args:
        url: Link target.
        label: Visible text; defaults to the URL itself.

    Returns:
        str: ``label`` wrapped in BEL-terminated OSC-8 escapes, or, on
        unsupported terminals, the bare URL (with the label in front of it
        when one differs from the URL).
    """
    text = label or url
    if not supports_osc8():
        return url if text == url else f"{text} <{url}>"
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
