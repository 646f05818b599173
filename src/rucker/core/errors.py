# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Exception types raised by rucker."""


class RuckerError(Exception):
    """Base class for errors that reflect bad input or a broken environment.

    The CLI reports these as a single line without a traceback.
    """


class MalformedReference(RuckerError, ValueError):
    """Raised when an image reference matches neither accepted grammar."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"Could not parse image reference {reference!r}")


class UnitsError(RuckerError, ValueError):
    """Raised for a size unit outside ``HUMAN_TO_BYTES``."""


class RuntimeUnavailable(RuckerError):
    """Raised when the container runtime CLI is missing or misbehaves."""
