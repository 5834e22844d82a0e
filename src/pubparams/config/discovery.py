# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide which config document, if any, applies to a publish run."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..constants import DEFAULT_CONFIG_LOCATIONS
from ..models import DirectoryParams, SinglePackageParams
from ..params._paths import anchored
from ..validation import Validated, invalid, valid

LOGGER = logging.getLogger(__name__)


def should_discover(single_package: SinglePackageParams, directory: DirectoryParams) -> bool:
    """Return ``True`` when the run is unscoped and a default config may apply.

    A run narrowed to a single package or to explicit directories never picks
    up an ambient project config.
    """

    return not single_package.package and not directory.explicitly_scoped


def locate_config(
    conf: Path | None,
    *,
    single_package: SinglePackageParams,
    directory: DirectoryParams,
    cwd: Path,
    candidates: Sequence[Path] = DEFAULT_CONFIG_LOCATIONS,
) -> Validated[Path | None]:
    """Return the config document path to load for this run.

    Args:
        conf: Explicit ``--conf`` value, if any.
        single_package: Validated single-package selection.
        directory: Validated directory selection.
        cwd: Directory discovery locations are resolved against.
        candidates: Discovery locations, probed in order.

    Returns:
        Validated[Path | None]: Path to load, ``None`` when no document
        applies, or a "not found"/"not a file" error for an explicit path.
    """

    if conf is not None:
        return check_explicit_config(conf, cwd=cwd)
    if not should_discover(single_package, directory):
        LOGGER.debug("config discovery skipped: run is scoped")
        return valid(None)
    for candidate in candidates:
        path = anchored(candidate, cwd)
        if path.is_file():
            LOGGER.debug("config discovered at %s", path)
            return valid(path)
    return valid(None)


def check_explicit_config(conf: Path, *, cwd: Path) -> Validated[Path]:
    """Validate an explicitly supplied config path.

    Returns:
        Validated[Path]: The anchored path, or a distinct error for a missing
        path and for a path that is not a regular file.
    """

    path = anchored(conf, cwd)
    if not path.exists():
        return invalid(f"Conf file {conf} not found")
    if not path.is_file():
        return invalid(f"Conf file {conf} is not a file")
    return valid(path)


__all__ = ["check_explicit_config", "locate_config", "should_discover"]
