"""Local image commands: images and pick."""

from __future__ import annotations

import argparse

from ..._util.ansi import gray, supports_color, violet
from ...containers.runtime import (
    best_local_image,
    image_sizes,
    list_local_images,
    partition_repo_tags,
)
from ...core.ordering import group_by_slug
from ...core.units import format_size
from ..assertions import die, expect_one, expect_some


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the images and pick subcommands."""
    p_images = subparsers.add_parser(
        "images", help="List local images grouped by slug, best first"
    )
    p_images.add_argument("slug", nargs="?", help="Image slug, or 'all'")

    p_pick = subparsers.add_parser("pick", help="Print the best local image for a slug")
    p_pick.add_argument("slug", nargs="?", help="Image slug")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle images and pick.  Returns True if handled."""
    if args.cmd == "images":
        _cmd_images(expect_some("slug", args.slug))
        return True
    if args.cmd == "pick":
        _cmd_pick(expect_one("slug", args.slug))
        return True
    return False


def _cmd_images(slug: str) -> None:
    color_enabled = supports_color()
    images = list_local_images()
    sizes = image_sizes(images)
    refs, skipped = partition_repo_tags(images)
    if slug != "all":
        refs = [r for r in refs if r.slug == slug]
    groups = group_by_slug(refs)
    if not groups:
        print("No local images found" if slug == "all" else f"No local images for '{slug}'")
    for name, members in groups.items():
        print(violet(name, color_enabled))
        for i, ref in enumerate(members):
            marker = "*" if i == 0 else " "
            size = format_size(sizes.get(ref.raw))
            print(f"  {marker} {ref.raw}  {gray(size, color_enabled)}")
    if skipped:
        print(
            gray(
                f"Skipped {len(skipped)} unparseable tag(s): {', '.join(skipped)}",
                color_enabled,
            )
        )


def _cmd_pick(slug: str) -> None:
    best = best_local_image(slug)
    if best is None:
        die(f"No local image found for '{slug}'")
    print(best.raw)
