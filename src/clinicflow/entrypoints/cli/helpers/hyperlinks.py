"""OSC-8 hyperlink utilities for the CLINICFLOW CLI.

Provides a small heuristic to detect whether the active text stream supports
OSC-8 terminal hyperlinks and a helper to render a URL as a clickable link,
falling back to plain text when unsupported.
"""

import os
import sys
from typing import TextIO


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Returns ``False`` when the stream is not a TTY (piped or redirected);
    otherwise checks a conservative allowlist of terminal identifiers.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program
        in {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return an OSC-8 hyperlink with a plain-text fallback.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself. Ignored on fallback.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
