# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable parameter models produced by the resolution pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_BUILD_DIRECTORY, DEFAULT_SONATYPE_BASE, VERBOSE_PATHS_LEVEL


class ParameterError(Exception):
    """Raised when publish parameters cannot be resolved.

    Attributes:
        errors: Every validation error, in first-encountered order.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Credentials(_FrozenModel):
    """Username/password pair for an authenticated repository."""

    user: str
    password: str = Field(repr=False, exclude=True)


class SonatypeRepository(_FrozenModel):
    """Sonatype OSSRH staging target."""

    kind: Literal["sonatype"] = "sonatype"
    base: str = DEFAULT_SONATYPE_BASE
    credentials: Credentials | None = None

    @property
    def rest_base(self) -> str:
        """Return the root of the Sonatype staging REST API."""

        return f"{self.base}/service/local"


class MavenRepository(_FrozenModel):
    """Plain Maven layout repository reachable over HTTP(S) or ``file://``."""

    kind: Literal["maven"] = "maven"
    url: str
    credentials: Credentials | None = None

    @property
    def is_local(self) -> bool:
        """Return ``True`` when the repository lives on the local filesystem."""

        return self.url.startswith("file:")


PublishRepository = Annotated[SonatypeRepository | MavenRepository, Field(discriminator="kind")]


class RepositoryParams(_FrozenModel):
    """Resolved publish target."""

    repository: PublishRepository
    read_from: MavenRepository | None = None
    snapshot_versioning: bool = True

    @property
    def is_sonatype(self) -> bool:
        """Return ``True`` when publishing through Sonatype staging."""

        return isinstance(self.repository, SonatypeRepository)

    @property
    def publish_url(self) -> str:
        """Return the endpoint uploads are sent to."""

        if isinstance(self.repository, SonatypeRepository):
            return self.repository.rest_base
        return self.repository.url


class License(_FrozenModel):
    name: str
    url: str


class Developer(_FrozenModel):
    id: str
    name: str
    url: str


class MetadataParams(_FrozenModel):
    """Project metadata.

    ``None`` marks a field that was not given on the command line and may still
    be filled from a config document.
    """

    organization: str | None = None
    name: str | None = None
    version: str | None = None
    licenses: tuple[License, ...] | None = None
    home_page: str | None = None
    developers: tuple[Developer, ...] | None = None
    git: bool | None = None


class Artifact(_FrozenModel):
    classifier: str
    extension: str
    path: Path


class SinglePackageParams(_FrozenModel):
    """Explicit single-package selection."""

    jar: Path | None = None
    pom: Path | None = None
    artifacts: tuple[Artifact, ...] = ()
    package: bool = False


class DirectoryParams(_FrozenModel):
    """Directory selection; ``build_directories`` defaults to the working directory."""

    directories: tuple[Path, ...] = ()
    build_directories: tuple[Path, ...] = (DEFAULT_BUILD_DIRECTORY,)

    @property
    def explicitly_scoped(self) -> bool:
        """Return ``True`` when the user narrowed the operation to specific directories."""

        if self.directories:
            return True
        return any(path != DEFAULT_BUILD_DIRECTORY for path in self.build_directories)


class ChecksumType(str, Enum):
    """Supported checksum algorithms."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"


class ChecksumParams(_FrozenModel):
    checksums: tuple[ChecksumType, ...] = (ChecksumType.MD5, ChecksumType.SHA1)


class SignatureParams(_FrozenModel):
    gpg: bool = False
    gpg_key: str | None = None


class CacheMode(str, Enum):
    """Cache policies applied when fetching previously published artifacts."""

    OFFLINE = "offline"
    MISSING = "missing"
    UPDATE_CHANGING = "update-changing"
    UPDATE = "update"
    FORCE = "force"


class CacheParams(_FrozenModel):
    """Cache policy; ``ttl`` of ``None`` means entries never expire."""

    location: Path
    ttl: timedelta | None
    mode: CacheMode = CacheMode.MISSING


class PublishParameters(_FrozenModel):
    """Fully resolved, immutable publish configuration."""

    repository: RepositoryParams
    metadata: MetadataParams
    single_package: SinglePackageParams
    directory: DirectoryParams
    checksum: ChecksumParams
    signature: SignatureParams
    cache: CacheParams
    verbosity: int
    dummy: bool = False
    batch: bool = False
    output_frame: int | None = None

    def dir_name(self, directory: Path, short: str | None = None) -> str:
        """Render ``directory`` for console output.

        Args:
            directory: Directory being reported.
            short: Optional label used instead of the directory's own name.

        Returns:
            str: Absolute path at high verbosity, otherwise the short label.
        """

        if self.verbosity >= VERBOSE_PATHS_LEVEL:
            return str(directory.resolve())
        return short if short is not None else (directory.name or str(directory))


__all__ = [
    "Artifact",
    "CacheMode",
    "CacheParams",
    "ChecksumParams",
    "ChecksumType",
    "Credentials",
    "Developer",
    "DirectoryParams",
    "License",
    "MavenRepository",
    "MetadataParams",
    "ParameterError",
    "PublishParameters",
    "PublishRepository",
    "RepositoryParams",
    "SignatureParams",
    "SinglePackageParams",
    "SonatypeRepository",
]
