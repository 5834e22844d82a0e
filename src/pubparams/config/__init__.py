# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config document discovery, loading and overlay."""

from __future__ import annotations

from .discovery import check_explicit_config, locate_config, should_discover
from .document import ConfigDocument, ConfigOrganization, load_config_document
from .overlay import apply_config, merge

__all__ = [
    "ConfigDocument",
    "ConfigOrganization",
    "apply_config",
    "check_explicit_config",
    "load_config_document",
    "locate_config",
    "merge",
    "should_discover",
]
