# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the explicit single-package selection."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Final

from ..models import Artifact, SinglePackageParams
from ..options import SinglePackageOptions
from ..validation import Validated, catching, collect, combine, invalid, valid
from ._paths import require_file

ARTIFACT_FORMAT: Final[str] = "classifier:extension:path"


def build_single_package(options: SinglePackageOptions, *, cwd: Path) -> Validated[SinglePackageParams]:
    """Validate single-package options into :class:`SinglePackageParams`.

    The ``package`` flag defaults to ``True`` whenever a jar, pom or extra
    artifact was supplied.

    Args:
        options: Single-package slice of the options bag.
        cwd: Directory relative paths are checked against.

    Returns:
        Validated[SinglePackageParams]: Selection or accumulated errors.
    """

    jar = _optional_file(options.jar, "--jar", cwd)
    pom = _optional_file(options.pom, "--pom", cwd)
    artifacts = collect(catching(partial(parse_artifact, raw, cwd=cwd)) for raw in options.artifacts)
    has_inputs = options.jar is not None or options.pom is not None or bool(options.artifacts)
    package = options.package if options.package is not None else has_inputs
    consistency = (
        invalid("--package requires --jar, --pom or --artifact")
        if package and not has_inputs
        else valid(None)
    )
    return combine(jar, pom, artifacts, consistency).map(partial(_assemble, package))


def _assemble(
    package: bool,
    values: tuple[Path | None, Path | None, tuple[Artifact, ...], None],
) -> SinglePackageParams:
    jar, pom, artifacts, _ = values
    return SinglePackageParams(jar=jar, pom=pom, artifacts=artifacts, package=package)


def _optional_file(path: Path | None, label: str, cwd: Path) -> Validated[Path | None]:
    if path is None:
        return valid(None)
    return catching(partial(require_file, path, label=label, cwd=cwd))


def parse_artifact(raw: str, *, cwd: Path) -> Artifact:
    """Parse a ``classifier:extension:path`` artifact specification.

    The classifier may be empty for the main artifact.

    Raises:
        ValueError: If the specification is malformed or the path is not a file.
    """

    parts = raw.split(":", 2)
    if len(parts) != 3 or not parts[1].strip() or not parts[2].strip():
        raise ValueError(f"Malformed artifact '{raw}', expected {ARTIFACT_FORMAT}")
    classifier, extension, location = (part.strip() for part in parts)
    path = require_file(Path(location), label="Artifact", cwd=cwd)
    return Artifact(classifier=classifier, extension=extension, path=path)


__all__ = ["ARTIFACT_FORMAT", "build_single_package", "parse_artifact"]
