# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate a publish options bag into resolved :class:`PublishParameters`."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path

from .config import apply_config, load_config_document, locate_config
from .models import ParameterError, PublishParameters
from .modes import default_batch_mode
from .options import PublishOptions
from .params import (
    build_cache,
    build_checksum,
    build_directory,
    build_metadata,
    build_repository,
    build_signature,
    build_single_package,
    resolve_verbosity,
)
from .validation import Invalid, Validated, build_model, combine_fields, valid


def assemble(
    options: PublishOptions,
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    batch_fallback: Callable[[], bool] = default_batch_mode,
) -> Validated[PublishParameters]:
    """Resolve ``options`` into publish parameters or the full error list.

    Every parameter group is validated independently and their errors are
    reported together, in group order. Only when all groups are valid is the
    config document located, loaded and overlaid.

    Args:
        options: Options bag produced by CLI parsing.
        cwd: Directory relative paths and config discovery are resolved
            against. Defaults to the process working directory.
        env: Environment used for credential lookups. Defaults to
            :data:`os.environ`.
        batch_fallback: Called only when ``options.batch`` is ``None``.

    Returns:
        Validated[PublishParameters]: Final parameters or accumulated errors.
    """

    workdir = cwd if cwd is not None else Path.cwd()
    groups = combine_fields(
        repository=build_repository(options.repository, env=env),
        metadata=build_metadata(options.metadata),
        single_package=build_single_package(options.single_package, cwd=workdir),
        directory=build_directory(options.directory, options.args, cwd=workdir),
        checksum=build_checksum(options.checksum),
        signature=build_signature(options.signature),
        cache=build_cache(options.cache),
        verbosity=resolve_verbosity(options.quiet, options.verbose),
    )
    if isinstance(groups, Invalid):
        return groups
    params = build_model(
        PublishParameters,
        {
            **groups.value,
            "dummy": options.dummy,
            "batch": options.batch if options.batch is not None else batch_fallback(),
            "output_frame": options.output_frame if options.output_frame > 0 else None,
        },
    )
    return _with_config(options.conf, workdir, params)


def _with_config(conf: Path | None, cwd: Path, params: PublishParameters) -> Validated[PublishParameters]:
    located = locate_config(
        conf,
        single_package=params.single_package,
        directory=params.directory,
        cwd=cwd,
    )
    return located.and_then(partial(_load_and_apply, params))


def _load_and_apply(params: PublishParameters, path: Path | None) -> Validated[PublishParameters]:
    if path is None:
        return valid(params)
    return load_config_document(path).map(partial(apply_config, params))


def resolve(
    options: PublishOptions,
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    batch_fallback: Callable[[], bool] = default_batch_mode,
) -> PublishParameters:
    """Exception-raising variant of :func:`assemble`.

    Raises:
        ParameterError: Carrying every validation error when resolution fails.
    """

    result = assemble(options, cwd=cwd, env=env, batch_fallback=batch_fallback)
    if isinstance(result, Invalid):
        raise ParameterError(result.errors)
    return result.value


__all__ = ["assemble", "resolve"]
