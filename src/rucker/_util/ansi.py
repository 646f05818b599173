"""ANSI color helpers for CLI output."""

import os
import sys


def supports_color() -> bool:
    """Check if stdout supports color output.

    Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions.
    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when stdout is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    return sys.stdout.isatty()


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True.

    Args:
        text: The string to colorize.
        code: ANSI SGR parameter (e.g. ``"31"`` for red).
        enabled: When False the original *text* is returned unchanged.
    """
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return color("yes" if value else "no", "32" if value else "31", enabled)


def violet(text: str, enabled: bool) -> str:
    return color(text, "35", enabled)


def gray(text: str, enabled: bool) -> str:
    return color(text, "90", enabled)
