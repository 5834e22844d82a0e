# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the cache policy used when reading back previously published files."""

from __future__ import annotations

import re
from datetime import timedelta
from functools import partial
from pathlib import Path
from typing import Final

from ..constants import CACHE_DIR_NAME, DEFAULT_CACHE_MODE, DEFAULT_CACHE_TTL, INFINITE_TTL_TOKENS
from ..models import CacheMode, CacheParams
from ..options import CacheOptions
from ..validation import Validated, build_model, catching, combine_fields, valid

_TTL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<amount>\d+)\s*(?P<unit>[smhd])$")
_TTL_UNITS: Final[dict[str, str]] = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def default_cache_location() -> Path:
    """Return the per-user cache directory."""

    return Path.home() / ".cache" / CACHE_DIR_NAME


def build_cache(options: CacheOptions) -> Validated[CacheParams]:
    """Validate cache options into :class:`CacheParams`."""

    location = options.cache.expanduser() if options.cache is not None else default_cache_location()
    return combine_fields(
        location=valid(location),
        ttl=catching(partial(parse_ttl, options.ttl or DEFAULT_CACHE_TTL)),
        mode=catching(partial(parse_cache_mode, options.mode or DEFAULT_CACHE_MODE)),
    ).map(partial(build_model, CacheParams))


def parse_ttl(raw: str) -> timedelta | None:
    """Parse a TTL such as ``30s``, ``15m``, ``24h``, ``7d`` or ``inf``.

    Returns:
        timedelta | None: Parsed duration, ``None`` for an infinite TTL.

    Raises:
        ValueError: If the duration cannot be parsed.
    """

    token = raw.strip().lower()
    if token in INFINITE_TTL_TOKENS:
        return None
    match = _TTL_PATTERN.match(token)
    if match is None:
        raise ValueError(f"Invalid --ttl value '{raw}' (expected e.g. 30s, 15m, 24h, 7d or inf)")
    return timedelta(**{_TTL_UNITS[match["unit"]]: int(match["amount"])})


def parse_cache_mode(raw: str) -> CacheMode:
    """Return the cache mode named by ``raw``.

    Raises:
        ValueError: If the token is not a known mode.
    """

    candidate = raw.strip().lower()
    for member in CacheMode:
        if member.value == candidate:
            return member
    allowed = ", ".join(sorted(member.value for member in CacheMode))
    raise ValueError(f"--cache-mode must be one of: {allowed}")


__all__ = ["build_cache", "default_cache_location", "parse_cache_mode", "parse_ttl"]
