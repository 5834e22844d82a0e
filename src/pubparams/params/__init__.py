# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Independent parameter-group builders."""

from __future__ import annotations

from .cache import build_cache
from .checksum import build_checksum
from .directory import build_directory
from .metadata import build_metadata
from .repository import build_repository
from .signature import build_signature
from .single_package import build_single_package
from .verbosity import QUIET_VERBOSE_CONFLICT, resolve_verbosity

__all__ = [
    "QUIET_VERBOSE_CONFLICT",
    "build_cache",
    "build_checksum",
    "build_directory",
    "build_metadata",
    "build_repository",
    "build_signature",
    "build_single_package",
    "resolve_verbosity",
]
