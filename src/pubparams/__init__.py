# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve CLI options and ``publish.json`` into validated publish parameters."""

from __future__ import annotations

from importlib import metadata

from .assembler import assemble, resolve
from .models import ParameterError, PublishParameters
from .options import PublishOptions
from .validation import Invalid, Valid, Validated

__all__ = [
    "Invalid",
    "ParameterError",
    "PublishOptions",
    "PublishParameters",
    "Valid",
    "Validated",
    "assemble",
    "__version__",
    "resolve",
]

try:
    __version__ = metadata.version("pubparams")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
