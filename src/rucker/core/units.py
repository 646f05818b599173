"""Conversion between byte counts and the human-readable sizes container runtimes print."""

from .errors import UnitsError

HUMAN_TO_BYTES = {"TB": 2**40, "GB": 2**30, "MB": 2**20, "kB": 2**10, "B": 1}


def human_to_bytes(num: float | str, units: str) -> int:
    """Return the byte count for *num* *units*, e.g. ``("1.5", "GB")``."""
    if units not in HUMAN_TO_BYTES:
        raise UnitsError(f"Can't dehumanize {(num, units)!r}")
    return int(float(num) * HUMAN_TO_BYTES[units])


def bytes_to_human(size: int | None) -> tuple[float | int, str] | None:
    """Return ``(magnitude, unit)`` for *size*, or None when *size* is None.

    Units roll over at three times their magnitude, so 3000 MB stays in MB.
    """
    if size is None:
        return None
    for unit, mag in HUMAN_TO_BYTES.items():
        if abs(size) > 3 * mag:
            return (size / mag, unit)
    return (size, "B")


def format_size(size: int | None) -> str:
    """Format *size* as ``"1.5 GB"``; ``"-"`` when unknown."""
    human = bytes_to_human(size)
    if human is None:
        return "-"
    magnitude, unit = human
    if unit == "B":
        return f"{int(magnitude)} B"
    return f"{magnitude:.1f} {unit}"
