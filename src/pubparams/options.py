# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for publish command options.

Flags that distinguish "not given" from an explicit value are typed
``X | None``. Builders rely on that distinction, so callers must leave those
fields at ``None`` unless the user actually passed the flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RepositoryOptions:
    """Publish target selection."""

    repository: str | None = None
    read_from: str | None = None
    sonatype: bool | None = None
    auth: str | None = None
    snapshot_versioning: bool = True


@dataclass(frozen=True, slots=True)
class MetadataOptions:
    """POM metadata supplied on the command line."""

    organization: str | None = None
    name: str | None = None
    version: str | None = None
    licenses: tuple[str, ...] = ()
    home_page: str | None = None
    developers: tuple[str, ...] = ()
    git: bool | None = None


@dataclass(frozen=True, slots=True)
class SinglePackageOptions:
    """Explicit single-package inputs (jar, pom, extra artifacts)."""

    jar: Path | None = None
    pom: Path | None = None
    artifacts: tuple[str, ...] = ()
    package: bool | None = None


@dataclass(frozen=True, slots=True)
class DirectoryOptions:
    """Directories holding already-built repository layouts."""

    dirs: tuple[Path, ...] = ()
    sbt_dirs: tuple[Path, ...] = ()


@dataclass(frozen=True, slots=True)
class ChecksumOptions:
    """Checksum algorithm selection."""

    checksums: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SignatureOptions:
    """GPG signing toggles."""

    gpg: bool | None = None
    gpg_key: str | None = None


@dataclass(frozen=True, slots=True)
class CacheOptions:
    """Download cache overrides."""

    cache: Path | None = None
    ttl: str | None = None
    mode: str | None = None


@dataclass(frozen=True, slots=True)
class PublishOptions:
    """Aggregate options bag consumed by :func:`pubparams.assembler.assemble`."""

    repository: RepositoryOptions = field(default_factory=RepositoryOptions)
    metadata: MetadataOptions = field(default_factory=MetadataOptions)
    single_package: SinglePackageOptions = field(default_factory=SinglePackageOptions)
    directory: DirectoryOptions = field(default_factory=DirectoryOptions)
    checksum: ChecksumOptions = field(default_factory=ChecksumOptions)
    signature: SignatureOptions = field(default_factory=SignatureOptions)
    cache: CacheOptions = field(default_factory=CacheOptions)
    conf: Path | None = None
    quiet: bool | None = None
    verbose: int = 0
    dummy: bool = False
    batch: bool | None = None
    output_frame: int = 0
    args: tuple[str, ...] = ()


__all__ = [
    "CacheOptions",
    "ChecksumOptions",
    "DirectoryOptions",
    "MetadataOptions",
    "PublishOptions",
    "RepositoryOptions",
    "SignatureOptions",
    "SinglePackageOptions",
]
