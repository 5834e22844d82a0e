# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application resolving publish parameters and reporting errors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from ..assembler import assemble
from ..config import locate_config
from ..models import DirectoryParams, PublishParameters, SinglePackageParams
from ..modes import describe_signer, emit_warnings, select_loggers, select_signer
from .options import (
    ARGS_ARGUMENT,
    ARTIFACT_OPTION,
    AUTH_OPTION,
    BATCH_OPTION,
    CACHE_MODE_OPTION,
    CACHE_OPTION,
    CHECKSUM_OPTION,
    CONF_OPTION,
    DEVELOPER_OPTION,
    DIR_OPTION,
    DUMMY_OPTION,
    EMOJI_OPTION,
    GIT_OPTION,
    GPG_KEY_OPTION,
    GPG_OPTION,
    HOME_PAGE_OPTION,
    JAR_OPTION,
    LICENSE_OPTION,
    NAME_OPTION,
    NO_BATCH_OPTION,
    NO_COLOR_OPTION,
    NO_GPG_OPTION,
    NO_SONATYPE_OPTION,
    ORGANIZATION_OPTION,
    OUTPUT_FRAME_OPTION,
    PACKAGE_OPTION,
    POM_OPTION,
    QUIET_OPTION,
    READ_FROM_OPTION,
    REPOSITORY_OPTION,
    SBT_DIR_OPTION,
    SNAPSHOT_VERSIONING_OPTION,
    SONATYPE_OPTION,
    TTL_OPTION,
    VERBOSE_OPTION,
    VERSION_OPTION,
    PublishCLIFlags,
    build_publish_options,
)
from .shared import CLIError, build_cli_logger, require_valid

app = typer.Typer(
    name="pubparams",
    help="Resolve and validate artifact publishing parameters.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Resolve and validate artifact publishing parameters."""


@app.command("resolve")
def resolve_command(
    args: ARGS_ARGUMENT = None,
    repository: REPOSITORY_OPTION = None,
    read_from: READ_FROM_OPTION = None,
    sonatype: SONATYPE_OPTION = False,
    no_sonatype: NO_SONATYPE_OPTION = False,
    auth: AUTH_OPTION = None,
    snapshot_versioning: SNAPSHOT_VERSIONING_OPTION = True,
    organization: ORGANIZATION_OPTION = None,
    name: NAME_OPTION = None,
    version: VERSION_OPTION = None,
    license_specs: LICENSE_OPTION = None,
    home_page: HOME_PAGE_OPTION = None,
    developer_specs: DEVELOPER_OPTION = None,
    git: GIT_OPTION = False,
    jar: JAR_OPTION = None,
    pom: POM_OPTION = None,
    artifact_specs: ARTIFACT_OPTION = None,
    package: PACKAGE_OPTION = False,
    dirs: DIR_OPTION = None,
    sbt_dirs: SBT_DIR_OPTION = None,
    checksums: CHECKSUM_OPTION = None,
    gpg: GPG_OPTION = False,
    no_gpg: NO_GPG_OPTION = False,
    gpg_key: GPG_KEY_OPTION = None,
    cache: CACHE_OPTION = None,
    ttl: TTL_OPTION = None,
    cache_mode: CACHE_MODE_OPTION = None,
    conf: CONF_OPTION = None,
    quiet: QUIET_OPTION = False,
    verbose: VERBOSE_OPTION = 0,
    dummy: DUMMY_OPTION = False,
    batch: BATCH_OPTION = False,
    no_batch: NO_BATCH_OPTION = False,
    output_frame: OUTPUT_FRAME_OPTION = 0,
    emoji: EMOJI_OPTION = True,
    no_color: NO_COLOR_OPTION = False,
) -> None:
    """Print the resolved parameters as JSON, or every validation error."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    options = build_publish_options(
        PublishCLIFlags(
            args=args,
            repository=repository,
            read_from=read_from,
            sonatype=sonatype,
            no_sonatype=no_sonatype,
            auth=auth,
            snapshot_versioning=snapshot_versioning,
            organization=organization,
            name=name,
            version=version,
            licenses=license_specs,
            home_page=home_page,
            developers=developer_specs,
            git=git,
            jar=jar,
            pom=pom,
            artifacts=artifact_specs,
            package=package,
            dirs=dirs,
            sbt_dirs=sbt_dirs,
            checksums=checksums,
            gpg=gpg,
            no_gpg=no_gpg,
            gpg_key=gpg_key,
            cache=cache,
            ttl=ttl,
            cache_mode=cache_mode,
            conf=conf,
            quiet=quiet,
            verbose=verbose,
            dummy=dummy,
            batch=batch,
            no_batch=no_batch,
            output_frame=output_frame,
        )
    )
    try:
        params = require_valid(assemble(options), logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger.echo(json.dumps(render_resolution(params), indent=2))
    emit_warnings(params, logger)


@app.command("config-path")
def config_path_command(
    conf: CONF_OPTION = None,
    package: PACKAGE_OPTION = False,
    dirs: DIR_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Show which config document a run from this directory would load."""

    logger = build_cli_logger(emoji=emoji)
    options = build_publish_options(PublishCLIFlags(conf=conf, package=package, dirs=dirs))
    located = locate_config(
        options.conf,
        single_package=SinglePackageParams(package=bool(options.single_package.package)),
        directory=DirectoryParams(directories=options.directory.dirs),
        cwd=Path.cwd(),
    )
    try:
        path = require_valid(located, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(str(path) if path is not None else "(none)")


def render_resolution(params: PublishParameters) -> dict[str, Any]:
    """Return a JSON-ready view of ``params`` and the strategies it selects."""

    return {
        "parameters": params.model_dump(mode="json"),
        "strategies": {
            "publish_url": params.repository.publish_url,
            "signer": describe_signer(select_signer(params.signature)),
            "loggers": {
                family.value: choice.mode.value for family, choice in select_loggers(params).items()
            },
        },
    }


__all__ = ["app", "render_resolution"]
