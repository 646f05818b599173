#!/usr/bin/env python3

import argparse

from .. import __version__
from .._util.logging_utils import _log_debug
from ..core.config import set_verbose
from ..core.errors import RuckerError
from .assertions import die
from .commands import images, info, references

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except ImportError:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

_COMMANDS = (references, images, info)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rucker",
        description="rucker – parse container image references and pick the best one",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  rucker parse quay.io/org/app:1.2\n"
            "  podman images --format '{{.Repository}}:{{.Tag}}' | rucker sort\n"
            "  rucker images all\n"
            "  rucker pick app\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"rucker {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show tracebacks for errors (also: VERBOSE=1)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for command in _COMMANDS:
        command.register(sub)
    return parser


def main() -> None:
    parser = build_parser()
    if argcomplete is not None:
        argcomplete.autocomplete(parser)
    args = parser.parse_args()
    if args.verbose:
        set_verbose(True)
    _log_debug(f"cli: {args.cmd}")

    try:
        for command in _COMMANDS:
            if command.dispatch(args):
                return
    except RuckerError as e:
        _log_debug(f"cli: {args.cmd} failed: {e}")
        die(e)
    parser.error("Unknown command")


if __name__ == "__main__":
    main()
