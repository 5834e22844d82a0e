# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the directory selection from ``--dir``, ``--sbt-dir`` and positional args."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from pathlib import Path

from ..constants import DEFAULT_BUILD_DIRECTORY
from ..models import DirectoryParams
from ..options import DirectoryOptions
from ..validation import Validated, catching, collect, combine
from ._paths import require_directory


def build_directory(
    options: DirectoryOptions,
    args: Sequence[str],
    *,
    cwd: Path,
) -> Validated[DirectoryParams]:
    """Validate directory options into :class:`DirectoryParams`.

    Positional arguments are appended to ``--dir`` values. When no build
    directory is given the working directory is used.

    Args:
        options: Directory slice of the options bag.
        args: Positional command-line arguments.
        cwd: Directory relative paths are checked against.

    Returns:
        Validated[DirectoryParams]: Selection or one error per bad directory.
    """

    directories = (*options.dirs, *(Path(arg) for arg in args))
    checked_dirs = collect(
        catching(partial(require_directory, path, label="Directory", cwd=cwd)) for path in directories
    )
    checked_builds = collect(
        catching(partial(require_directory, path, label="Build directory", cwd=cwd))
        for path in options.sbt_dirs
    )
    return combine(checked_dirs, checked_builds).map(_assemble)


def _assemble(values: tuple[tuple[Path, ...], tuple[Path, ...]]) -> DirectoryParams:
    directories, build_directories = values
    return DirectoryParams(
        directories=directories,
        build_directories=build_directories or (DEFAULT_BUILD_DIRECTORY,),
    )


__all__ = ["build_directory"]
