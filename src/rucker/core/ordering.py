# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Preference ordering over image references.

References sort by

* slug, since equivalent slugs imply equivalent functions; then
* tags starting with ``_``, so you can force an image to the head; then
* registry, because private registries are preferable to public; then
* untagged or ``latest``, then by descending numeric part of the tag if any;
* then tag name, to break ties;
* then repository, to break ties.

This ordering is both pleasant to read and lets ``sort_references(...)[0]``
serve as a good guess at the best available image to launch::

    z.com/zzz/bar:_override
    a.com/yyy/bar
    a.com/yyy/bar:latest
    a.com/foo/bar:r9.0
    a.com/foo/bar:1.2
    b.com/aaa/bar:latest
          foo/bar:r10.1
          aaa/bar:r9.0
          foo/bar:r9.0
          zzz/bar:r9.0
          zzz/bar:r9.0-alpha
          zzz/bar:r9.0-beta
          foo/bar:r0.1
    a.com/foo/helper
          foo/helper
    a.com/foo/zazz
"""

import math
import re
from collections.abc import Iterable

from .reference import ImageReference, parse

FORCE_MARKER = "_"
_VERSION_RE = re.compile(r"(\d+\.\d+|\d+)")

SortKey = tuple[str, int, tuple[int, str], float, str, str]


def _as_reference(ref: ImageReference | str) -> ImageReference:
    return ref if isinstance(ref, ImageReference) else parse(ref)


def ordinariness(tag: str) -> int:
    """Return ``-1`` for force-marked tags, ``1`` for everything else."""
    return -1 if tag.startswith(FORCE_MARKER) else 1


def registry_rank(registry: str | None) -> tuple[int, str]:
    """Rank explicit registries (by name) ahead of a missing one."""
    if registry:
        return (0, registry)
    return (1, "")


def version_rank(tag: str) -> float:
    """Return the ascending rank for *tag*; lower means fresher.

    The first number-like run in the tag is taken as its version, so
    ``r9.0-alpha`` and ``r9.0`` tie and fall through to the tag text.
    """
    if not tag or tag == "latest" or tag.startswith(FORCE_MARKER):
        return -math.inf
    m = _VERSION_RE.search(tag)
    if m is None:
        return 0.0
    return -float(m.group(1))


def sort_key(ref: ImageReference | str) -> SortKey:
    """Return the composite key that puts the most preferred reference first.

    Strings are parsed first and may raise
    :class:`~rucker.core.errors.MalformedReference`.
    """
    ref = _as_reference(ref)
    tag = ref.tag or ""
    return (
        ref.slug,
        ordinariness(tag),
        registry_rank(ref.registry),
        version_rank(tag),
        tag,
        ref.repository or "",
    )


def sort_references(refs: Iterable[ImageReference | str]) -> list[ImageReference]:
    """Parse *refs* as needed and return them in preferred order."""
    return sorted((_as_reference(r) for r in refs), key=sort_key)


def best_reference(refs: Iterable[ImageReference | str]) -> ImageReference | None:
    """Return the most preferred reference, or None when *refs* is empty."""
    ordered = sort_references(refs)
    return ordered[0] if ordered else None


def group_by_slug(refs: Iterable[ImageReference | str]) -> dict[str, list[ImageReference]]:
    """Group *refs* by slug; groups and their members come out in preferred order."""
    groups: dict[str, list[ImageReference]] = {}
    for ref in sort_references(refs):
        groups.setdefault(ref.slug, []).append(ref)
    return groups
