"""rucker package.

Modules:
- rucker.core: Image reference parsing and ordering, size units, config, paths
- rucker.containers: Local image listing through the container runtime
- rucker.cli: CLI entry point package (rucker)
- rucker._util: Internal helpers (ANSI colors, logging)
"""

from .core.errors import MalformedReference
from .core.ordering import best_reference, sort_key, sort_references
from .core.reference import ImageReference, parse

__all__ = [
    "ImageReference",
    "MalformedReference",
    "best_reference",
    "parse",
    "sort_key",
    "sort_references",
]

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("rucker")
except PackageNotFoundError:
    __version__ = "unknown"
