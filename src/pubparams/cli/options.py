# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations and the options-bag factory for ``resolve``."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..options import (
    CacheOptions,
    ChecksumOptions,
    DirectoryOptions,
    MetadataOptions,
    PublishOptions,
    RepositoryOptions,
    SignatureOptions,
    SinglePackageOptions,
)

ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Directories holding repository layouts to publish."),
]
REPOSITORY_OPTION = Annotated[
    str | None,
    typer.Option("--repository", "-r", help="Target repository URL, path, or 'central'."),
]
READ_FROM_OPTION = Annotated[
    str | None,
    typer.Option("--read-from", help="Repository to read existing metadata from."),
]
SONATYPE_OPTION = Annotated[bool, typer.Option("--sonatype", help="Publish through Sonatype.")]
NO_SONATYPE_OPTION = Annotated[
    bool,
    typer.Option("--no-sonatype", help="Do not default to Sonatype."),
]
AUTH_OPTION = Annotated[
    str | None,
    typer.Option("--auth", help="Repository credentials as user:password."),
]
SNAPSHOT_VERSIONING_OPTION = Annotated[
    bool,
    typer.Option(
        "--snapshot-versioning/--no-snapshot-versioning",
        help="Toggle timestamped snapshot versions.",
    ),
]
ORGANIZATION_OPTION = Annotated[str | None, typer.Option("--organization", help="Organization.")]
NAME_OPTION = Annotated[str | None, typer.Option("--name", help="Module name.")]
VERSION_OPTION = Annotated[str | None, typer.Option("--version", help="Version to publish.")]
LICENSE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--license", help="License as name:url (repeatable)."),
]
HOME_PAGE_OPTION = Annotated[str | None, typer.Option("--home-page", help="Project home page.")]
DEVELOPER_OPTION = Annotated[
    list[str] | None,
    typer.Option("--developer", help="Developer as id|name|url (repeatable)."),
]
GIT_OPTION = Annotated[bool, typer.Option("--git", help="Derive SCM metadata from git.")]
JAR_OPTION = Annotated[Path | None, typer.Option("--jar", help="Main jar to publish.")]
POM_OPTION = Annotated[Path | None, typer.Option("--pom", help="POM to publish.")]
ARTIFACT_OPTION = Annotated[
    list[str] | None,
    typer.Option("--artifact", help="Extra artifact as classifier:extension:path (repeatable)."),
]
PACKAGE_OPTION = Annotated[bool, typer.Option("--package", help="Publish a single package.")]
DIR_OPTION = Annotated[
    list[Path] | None,
    typer.Option("--dir", help="Directory holding a repository layout (repeatable)."),
]
SBT_DIR_OPTION = Annotated[
    list[Path] | None,
    typer.Option("--sbt-dir", help="Build directory to publish from (repeatable)."),
]
CHECKSUM_OPTION = Annotated[
    list[str] | None,
    typer.Option("--checksum", help="Checksum algorithm(s): md5, sha1, sha256, sha512."),
]
GPG_OPTION = Annotated[bool, typer.Option("--gpg", help="Sign artifacts with gpg.")]
NO_GPG_OPTION = Annotated[bool, typer.Option("--no-gpg", help="Disable signing.")]
GPG_KEY_OPTION = Annotated[str | None, typer.Option("--gpg-key", help="gpg key id.")]
CACHE_OPTION = Annotated[Path | None, typer.Option("--cache", help="Cache directory.")]
TTL_OPTION = Annotated[str | None, typer.Option("--ttl", help="Cache TTL (e.g. 24h, inf).")]
CACHE_MODE_OPTION = Annotated[str | None, typer.Option("--cache-mode", help="Cache policy.")]
CONF_OPTION = Annotated[Path | None, typer.Option("--conf", help="Path to publish.json.")]
QUIET_OPTION = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress output.")]
VERBOSE_OPTION = Annotated[
    int,
    typer.Option("--verbose", "-v", count=True, help="Increase verbosity (repeatable)."),
]
DUMMY_OPTION = Annotated[bool, typer.Option("--dummy", help="Simulate uploads.")]
BATCH_OPTION = Annotated[bool, typer.Option("--batch", help="Force line-oriented output.")]
NO_BATCH_OPTION = Annotated[
    bool,
    typer.Option("--no-batch", help="Force interactive terminal output."),
]
OUTPUT_FRAME_OPTION = Annotated[
    int,
    typer.Option("--output-frame", help="Height of the build-tool output frame (0 disables)."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable colour output.")]


def tristate(enabled: bool, disabled: bool, *, flag: str) -> bool | None:
    """Collapse a ``--flag``/``--no-flag`` pair into ``True``, ``False`` or ``None``.

    Raises:
        typer.BadParameter: If both spellings were passed.
    """

    if enabled and disabled:
        raise typer.BadParameter(f"--{flag} and --no-{flag} are mutually exclusive")
    if enabled:
        return True
    if disabled:
        return False
    return None


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return sanitized CLI values preserving order."""

    if not values:
        return ()
    return tuple(stripped for entry in values if (stripped := entry.strip()))


@dataclass(slots=True)
class PublishCLIFlags:
    """Raw flag values collected by the ``resolve`` command."""

    args: list[str] | None = None
    repository: str | None = None
    read_from: str | None = None
    sonatype: bool = False
    no_sonatype: bool = False
    auth: str | None = None
    snapshot_versioning: bool = True
    organization: str | None = None
    name: str | None = None
    version: str | None = None
    licenses: list[str] | None = None
    home_page: str | None = None
    developers: list[str] | None = None
    git: bool = False
    jar: Path | None = None
    pom: Path | None = None
    artifacts: list[str] | None = None
    package: bool = False
    dirs: list[Path] | None = None
    sbt_dirs: list[Path] | None = None
    checksums: list[str] | None = None
    gpg: bool = False
    no_gpg: bool = False
    gpg_key: str | None = None
    cache: Path | None = None
    ttl: str | None = None
    cache_mode: str | None = None
    conf: Path | None = None
    quiet: bool = False
    verbose: int = 0
    dummy: bool = False
    batch: bool = False
    no_batch: bool = False
    output_frame: int = 0


def build_publish_options(flags: PublishCLIFlags) -> PublishOptions:
    """Translate raw CLI flags into a :class:`PublishOptions` bag.

    Flags that were not passed map to ``None`` so the resolution pipeline can
    tell "absent" from an explicit value.
    """

    return PublishOptions(
        repository=RepositoryOptions(
            repository=flags.repository,
            read_from=flags.read_from,
            sonatype=tristate(flags.sonatype, flags.no_sonatype, flag="sonatype"),
            auth=flags.auth,
            snapshot_versioning=flags.snapshot_versioning,
        ),
        metadata=MetadataOptions(
            organization=flags.organization,
            name=flags.name,
            version=flags.version,
            licenses=normalize_cli_values(flags.licenses),
            home_page=flags.home_page,
            developers=normalize_cli_values(flags.developers),
            git=True if flags.git else None,
        ),
        single_package=SinglePackageOptions(
            jar=flags.jar,
            pom=flags.pom,
            artifacts=normalize_cli_values(flags.artifacts),
            package=True if flags.package else None,
        ),
        directory=DirectoryOptions(
            dirs=tuple(flags.dirs or ()),
            sbt_dirs=tuple(flags.sbt_dirs or ()),
        ),
        checksum=ChecksumOptions(checksums=normalize_cli_values(flags.checksums)),
        signature=SignatureOptions(
            gpg=tristate(flags.gpg, flags.no_gpg, flag="gpg"),
            gpg_key=flags.gpg_key,
        ),
        cache=CacheOptions(cache=flags.cache, ttl=flags.ttl, mode=flags.cache_mode),
        conf=flags.conf,
        quiet=True if flags.quiet else None,
        verbose=flags.verbose,
        dummy=flags.dummy,
        batch=tristate(flags.batch, flags.no_batch, flag="batch"),
        output_frame=flags.output_frame,
        args=normalize_cli_values(flags.args),
    )


__all__ = [
    "PublishCLIFlags",
    "build_publish_options",
    "normalize_cli_values",
    "tristate",
]
