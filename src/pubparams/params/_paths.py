# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem checks shared by the path-based parameter groups."""

from __future__ import annotations

from pathlib import Path


def anchored(path: Path, cwd: Path) -> Path:
    """Return ``path`` resolved against ``cwd`` when it is relative."""

    return path if path.is_absolute() else cwd / path


def require_file(path: Path, *, label: str, cwd: Path) -> Path:
    """Return ``path`` unchanged when it names an existing regular file.

    Args:
        path: Path supplied by the user.
        label: Flag name used in error messages.
        cwd: Directory relative paths are checked against.

    Returns:
        Path: The original ``path``.

    Raises:
        ValueError: If the path is missing or is not a regular file.
    """

    target = anchored(path, cwd)
    if not target.exists():
        raise ValueError(f"{label} {path} not found")
    if not target.is_file():
        raise ValueError(f"{label} {path} is not a file")
    return path


def require_directory(path: Path, *, label: str, cwd: Path) -> Path:
    """Return ``path`` unchanged when it names an existing directory.

    Raises:
        ValueError: If the path is missing or is not a directory.
    """

    target = anchored(path, cwd)
    if not target.exists():
        raise ValueError(f"{label} {path} not found")
    if not target.is_dir():
        raise ValueError(f"{label} {path} is not a directory")
    return path


__all__ = ["anchored", "require_directory", "require_file"]
