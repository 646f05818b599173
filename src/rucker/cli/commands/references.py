# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Reference commands: parse, sort and best over references given on the command line."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from ...core.ordering import best_reference, sort_key, sort_references
from ...core.reference import ImageReference, parse
from ..assertions import die

_FIELDS = ("registry", "repository", "slug", "tag", "family")


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the parse, sort and best subcommands."""
    p_parse = subparsers.add_parser("parse", help="Break image references into their parts")
    p_parse.add_argument("references", nargs="+", metavar="REF", help="Image reference")
    p_parse.add_argument("--json", action="store_true", help="Print one JSON object per reference")

    p_sort = subparsers.add_parser(
        "sort", help="Print references in preferred order (reads stdin if none given)"
    )
    p_sort.add_argument("references", nargs="*", metavar="REF", help="Image reference")
    p_sort.add_argument("--keys", action="store_true", help="Also print each sort key")

    p_best = subparsers.add_parser(
        "best", help="Print the most preferred reference (reads stdin if none given)"
    )
    p_best.add_argument("references", nargs="*", metavar="REF", help="Image reference")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle parse, sort and best.  Returns True if handled."""
    if args.cmd == "parse":
        _cmd_parse(args.references, as_json=args.json)
        return True
    if args.cmd == "sort":
        _cmd_sort(_references_from(args.references), show_keys=args.keys)
        return True
    if args.cmd == "best":
        _cmd_best(_references_from(args.references))
        return True
    return False


def _references_from(given: list[str]) -> list[str]:
    """Return *given*, or the non-blank lines of stdin when nothing was given."""
    if given:
        return given
    return [line.strip() for line in sys.stdin if line.strip()]


def _describe(ref: ImageReference) -> str:
    lines = [f"reference:  {ref.raw}"]
    for name in _FIELDS:
        value = getattr(ref, name)
        lines.append(f"{name + ':':<11} {value if value is not None else '-'}")
    return "\n".join(lines)


def _cmd_parse(references: list[str], *, as_json: bool) -> None:
    parsed = [parse(r) for r in references]
    if as_json:
        for ref in parsed:
            print(json.dumps(dataclasses.asdict(ref)))
        return
    print("\n\n".join(_describe(ref) for ref in parsed))


def _cmd_sort(references: list[str], *, show_keys: bool) -> None:
    for ref in sort_references(references):
        if show_keys:
            print(f"{ref.raw}\t{sort_key(ref)!r}")
        else:
            print(ref.raw)


def _cmd_best(references: list[str]) -> None:
    best = best_reference(references)
    if best is None:
        die("No image references given")
    print(best.raw)
