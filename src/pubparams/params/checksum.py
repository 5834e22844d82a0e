# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the checksum policy."""

from __future__ import annotations

from functools import partial

from ..constants import DEFAULT_CHECKSUMS
from ..models import ChecksumParams, ChecksumType
from ..options import ChecksumOptions
from ..validation import Validated, catching, collect


def build_checksum(options: ChecksumOptions) -> Validated[ChecksumParams]:
    """Validate ``--checksum`` values into :class:`ChecksumParams`.

    Each value may hold a comma-separated list. Duplicates are dropped while
    keeping first-seen order; no values selects the defaults.
    """

    tokens = [token.strip() for raw in options.checksums for token in raw.split(",") if token.strip()]
    if not tokens:
        tokens = list(DEFAULT_CHECKSUMS)
    return collect(catching(partial(parse_checksum, token)) for token in tokens).map(_assemble)


def _assemble(checksums: tuple[ChecksumType, ...]) -> ChecksumParams:
    return ChecksumParams(checksums=tuple(dict.fromkeys(checksums)))


def parse_checksum(token: str) -> ChecksumType:
    """Return the checksum type named by ``token`` (case-insensitive).

    Raises:
        ValueError: If the token is not a supported algorithm.
    """

    candidate = token.strip().lower()
    for member in ChecksumType:
        if member.value == candidate:
            return member
    allowed = ", ".join(member.value for member in ChecksumType)
    raise ValueError(f"Unrecognized checksum: {token} (expected one of: {allowed})")


__all__ = ["build_checksum", "parse_checksum"]
