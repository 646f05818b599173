"""Turning expected failures into clean exits.

When there is an expected unexpected condition (a malformed reference on the
command line, no runtime installed) the user should not see a traceback: the
code was not at fault, the input was. These helpers exit with a message
instead, unless verbose mode asks for the traceback too.
"""

import traceback
from typing import NoReturn

from ..core.config import is_verbose


def die(*lines: object) -> NoReturn:
    """Exit with *lines* as the message.

    If the first line is an exception and verbose mode is on, its traceback
    is printed ahead of the message.
    """
    first, *rest = lines or ("",)
    if isinstance(first, BaseException) and is_verbose():
        tb = "".join(traceback.format_exception(first)).rstrip()
        first = f"{tb}\n\n{first}"
    raise SystemExit("\n".join(["", str(first), *(str(line) for line in rest)]))


def expect_one(name: str, arg: str | None) -> str:
    """Return *arg* if it names a single *name*; otherwise die."""
    if not arg or not arg.strip():
        die(f"Please supply a single {name} name, e.g. 'rucker ... <{name}>'")
    elif arg == "all":
        die(f"Please supply a single {name} name, not 'all'")
    return arg


def expect_some(name: str, arg: str | None) -> str:
    """Return *arg* if it names a *name* or is ``all``; otherwise die."""
    if not arg or not arg.strip():
        die(
            f"Please supply a single {name} name, or 'all' for all relevant {name}s"
        )
    return arg
