# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in defaults shared by the parameter builders."""

from __future__ import annotations

from pathlib import Path
from typing import Final

DEFAULT_CONFIG_LOCATIONS: Final[tuple[Path, ...]] = (
    Path("publish.json"),
    Path("project/publish.json"),
)

DEFAULT_BUILD_DIRECTORY: Final[Path] = Path(".")

DEFAULT_SONATYPE_BASE: Final[str] = "https://oss.sonatype.org"
CENTRAL_REPOSITORY_ALIAS: Final[str] = "central"
SONATYPE_USERNAME_ENV: Final[str] = "SONATYPE_USERNAME"
SONATYPE_PASSWORD_ENV: Final[str] = "SONATYPE_PASSWORD"

DEFAULT_CHECKSUMS: Final[tuple[str, ...]] = ("md5", "sha1")

CACHE_DIR_NAME: Final[str] = "pubparams"
DEFAULT_CACHE_TTL: Final[str] = "24h"
DEFAULT_CACHE_MODE: Final[str] = "missing"
INFINITE_TTL_TOKENS: Final[frozenset[str]] = frozenset({"inf", "infinite"})

# Verbosity at which paths are rendered in full.
VERBOSE_PATHS_LEVEL: Final[int] = 2

__all__ = [
    "CACHE_DIR_NAME",
    "CENTRAL_REPOSITORY_ALIAS",
    "DEFAULT_BUILD_DIRECTORY",
    "DEFAULT_CACHE_MODE",
    "DEFAULT_CACHE_TTL",
    "DEFAULT_CHECKSUMS",
    "DEFAULT_CONFIG_LOCATIONS",
    "DEFAULT_SONATYPE_BASE",
    "INFINITE_TTL_TOKENS",
    "SONATYPE_PASSWORD_ENV",
    "SONATYPE_USERNAME_ENV",
    "VERBOSE_PATHS_LEVEL",
]
