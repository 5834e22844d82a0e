# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve ``--quiet``/``--verbose`` into a single integer level."""

from __future__ import annotations

from typing import Final

from ..validation import Validated, invalid, valid

QUIET_VERBOSE_CONFLICT: Final[str] = "Cannot specify both --quiet and --verbose"
QUIET_LEVEL: Final[int] = -1


def resolve_verbosity(quiet: bool | None, verbose: int) -> Validated[int]:
    """Return the verbosity level implied by the quiet flag and verbose count.

    Args:
        quiet: ``True`` when ``--quiet`` was passed; ``None``/``False`` otherwise.
        verbose: Number of ``--verbose`` occurrences.

    Returns:
        Validated[int]: ``-1`` when quiet, the verbose count otherwise, or the
        mutual-exclusion error when both were supplied.
    """

    if verbose < 0:
        return invalid("--verbose count must be non-negative")
    if quiet:
        if verbose > 0:
            return invalid(QUIET_VERBOSE_CONFLICT)
        return valid(QUIET_LEVEL)
    return valid(verbose)


__all__ = ["QUIET_LEVEL", "QUIET_VERBOSE_CONFLICT", "resolve_verbosity"]
