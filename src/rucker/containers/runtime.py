# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Listing local images through the container runtime CLI."""

import json
import re
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Any

from .._util.logging_utils import _log_debug
from ..core.config import runtime_command
from ..core.errors import MalformedReference, RuntimeUnavailable, UnitsError
from ..core.ordering import best_reference
from ..core.reference import ImageReference, parse
from ..core.units import human_to_bytes

DANGLING = "<none>:<none>"
_HUMAN_SIZE_RE = re.compile(r"\s*([\d.]+)\s*([kMGT]?B)\s*")


@dataclass
class LocalImage:
    """One image as reported by ``<runtime> images``."""

    image_id: str
    repo_tags: list[str] = field(default_factory=list)
    size: int | None = None


def _check_runtime_available(cmd: str) -> None:
    """Raise RuntimeUnavailable if *cmd* is not on PATH."""
    if shutil.which(cmd) is None:
        raise RuntimeUnavailable(f"{cmd} not found; please install {cmd}")


def _parse_size(value: Any) -> int | None:
    """Return a byte count from podman's integer or docker's ``"77.8MB"`` size."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    m = _HUMAN_SIZE_RE.fullmatch(str(value))
    if m is None:
        return None
    try:
        return human_to_bytes(m.group(1), m.group(2))
    except (UnitsError, ValueError):
        return None


def _image_from_podman(entry: dict[str, Any]) -> LocalImage:
    names = entry.get("Names") or entry.get("RepoTags") or []
    return LocalImage(
        image_id=str(entry.get("Id", "")),
        repo_tags=list(names),
        size=_parse_size(entry.get("Size")),
    )


def _image_from_docker(entry: dict[str, Any]) -> LocalImage:
    repo = entry.get("Repository", "<none>")
    tag = entry.get("Tag", "<none>")
    return LocalImage(
        image_id=str(entry.get("ID", "")),
        repo_tags=[f"{repo}:{tag}"],
        size=_parse_size(entry.get("Size")),
    )


def parse_images_output(output: str) -> list[LocalImage]:
    """Parse ``images --format json`` output from either podman or docker.

    Podman prints one JSON array; docker prints one JSON object per line.
    """
    text = output.strip()
    if not text:
        return []
    try:
        if text.startswith("["):
            return [_image_from_podman(e) for e in json.loads(text)]
        return [_image_from_docker(json.loads(line)) for line in text.splitlines() if line.strip()]
    except (json.JSONDecodeError, AttributeError, TypeError) as e:
        raise RuntimeUnavailable(f"Unexpected image listing from runtime: {e}") from e


def list_local_images() -> list[LocalImage]:
    """Return all local images known to the configured runtime."""
    cmd = runtime_command()
    _check_runtime_available(cmd)
    try:
        result = subprocess.run(
            [cmd, "images", "--format", "json"],
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        msg = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise RuntimeUnavailable(f"{cmd} images failed: {msg}") from e
    images = parse_images_output(result.stdout)
    _log_debug(f"runtime: {cmd} listed {len(images)} images")
    return images


def partition_repo_tags(
    images: list[LocalImage],
) -> tuple[list[ImageReference], list[str]]:
    """Split the repo tags of *images* into parsed references and unparseable tags.

    Dangling ``<none>:<none>`` entries appear in neither list. Tags that do
    not parse (e.g. ``my-org/app:1`` or ``localhost:5000/app:1.0``) are
    logged and returned as the second list.
    """
    refs: list[ImageReference] = []
    skipped: list[str] = []
    for image in images:
        for repo_tag in image.repo_tags:
            if repo_tag == DANGLING:
                continue
            try:
                refs.append(parse(repo_tag))
            except MalformedReference as e:
                _log_debug(f"runtime: skipping {image.image_id[:12]}: {e}")
                skipped.append(repo_tag)
    return refs, skipped


def local_repo_tags(images: list[LocalImage]) -> list[ImageReference]:
    """Return the parsed repo tags of *images*, dropping any that do not parse."""
    return partition_repo_tags(images)[0]


def image_sizes(images: list[LocalImage]) -> dict[str, int | None]:
    """Map each repo tag to the size of the image carrying it."""
    return {tag: image.size for image in images for tag in image.repo_tags}


def best_local_image(
    slug: str, images: list[LocalImage] | None = None
) -> ImageReference | None:
    """Return the most preferred local image whose slug is *slug*."""
    if images is None:
        images = list_local_images()
    return best_reference(r for r in local_repo_tags(images) if r.slug == slug)
