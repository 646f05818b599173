# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Parsing of container image references.

Image names turn up with differing amounts of qualification::

    reg/repo/slug:tag
    reg/repo/slug
        repo/slug:tag
        repo/slug
             slug:tag
             slug

Two grammars cover these. The long form (exactly three path segments) is
tried first; the short form is the fallback. Both must match the whole
string.
"""

import re
from dataclasses import dataclass

from .errors import MalformedReference

_SLUG = r"[a-z0-9_.\-]+|<none>"
_REPOSITORY = r"[a-z0-9_]{1,30}"

LONG_REFERENCE_RE = re.compile(
    rf"""
    (?P<registry>[^/]+) /               # registry/   (host[:port])
    (?P<repository>{_REPOSITORY}) /     # repo/       a-z 0-9 _
    (?P<slug>{_SLUG})                   # slug        a-z 0-9 - . _
    (?: : (?P<tag>{_SLUG}) )?           # :tag        optional
    """,
    re.VERBOSE,
)

SHORT_REFERENCE_RE = re.compile(
    rf"""
    (?P<family>
        (?: (?P<repository>{_REPOSITORY}) / )?   # repo/  optional
        (?P<slug>{_SLUG})
    )
    (?: : (?P<tag>{_SLUG}) )?
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class ImageReference:
    """A parsed image reference.

    ``family`` is the reference without its tag and groups the variants of
    one image line. ``raw`` is the string exactly as given.
    """

    raw: str
    slug: str
    family: str
    registry: str | None = None
    repository: str | None = None
    tag: str | None = None

    def __str__(self) -> str:
        return self.raw


def _match_long(reference: str) -> ImageReference | None:
    m = LONG_REFERENCE_RE.fullmatch(reference)
    if m is None:
        return None
    registry, repository, slug = m.group("registry", "repository", "slug")
    return ImageReference(
        raw=reference,
        slug=slug,
        family=f"{registry}/{repository}/{slug}",
        registry=registry,
        repository=repository,
        tag=m.group("tag"),
    )


def _match_short(reference: str) -> ImageReference | None:
    m = SHORT_REFERENCE_RE.fullmatch(reference)
    if m is None:
        return None
    return ImageReference(
        raw=reference,
        slug=m.group("slug"),
        family=m.group("family"),
        repository=m.group("repository"),
        tag=m.group("tag"),
    )


_GRAMMARS = (_match_long, _match_short)


def parse(reference: str) -> ImageReference:
    """Parse *reference* into an :class:`ImageReference`.

    Raises:
        MalformedReference: if neither the long nor the short form matches.
    """
    for grammar in _GRAMMARS:
        ref = grammar(reference)
        if ref is not None:
            return ref
    raise MalformedReference(reference)
