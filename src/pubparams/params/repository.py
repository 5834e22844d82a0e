# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the publish target from repository options."""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import partial
from pathlib import Path
from typing import Final

from ..constants import (
    CENTRAL_REPOSITORY_ALIAS,
    SONATYPE_PASSWORD_ENV,
    SONATYPE_USERNAME_ENV,
)
from ..models import Credentials, MavenRepository, RepositoryParams, SonatypeRepository
from ..options import RepositoryOptions
from ..validation import Validated, catching, combine, invalid, valid

AUTH_FORMAT: Final[str] = "user:password"
_REMOTE_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})
_LOCAL_SCHEME: Final[str] = "file"
_SCHEME_SEPARATOR: Final[str] = "://"


def build_repository(
    options: RepositoryOptions,
    *,
    env: Mapping[str, str] | None = None,
) -> Validated[RepositoryParams]:
    """Validate repository options into :class:`RepositoryParams`.

    The target, ``--auth`` and ``--read-from`` are checked independently and
    their errors accumulate. Credentials are attached to the target once every
    check passed.

    Args:
        options: Repository slice of the options bag.
        env: Environment used to look up Sonatype credentials. Defaults to
            :data:`os.environ`.

    Returns:
        Validated[RepositoryParams]: Resolved target or the accumulated errors.
    """

    environment = os.environ if env is None else env
    exclusive = (
        invalid("Cannot specify both --sonatype and --repository")
        if options.sonatype and options.repository is not None
        else valid(None)
    )
    credentials = catching(partial(parse_auth, options.auth))
    read_from = (
        catching(partial(maven_repository, options.read_from, None))
        if options.read_from is not None
        else valid(None)
    )
    return combine(exclusive, _target(options), credentials, read_from).map(
        partial(_params_for, options, environment),
    )


def _target(options: RepositoryOptions) -> Validated[MavenRepository | None]:
    """Return the Maven target, ``None`` for Sonatype, or why neither applies."""

    raw = options.repository
    if raw is None:
        if options.sonatype is False:
            return invalid("No repository specified: pass --repository or --sonatype")
        return valid(None)
    if raw.strip().lower() == CENTRAL_REPOSITORY_ALIAS:
        return valid(None)
    return catching(partial(maven_repository, raw, None))


def _params_for(
    options: RepositoryOptions,
    env: Mapping[str, str],
    values: tuple[None, MavenRepository | None, Credentials | None, MavenRepository | None],
) -> RepositoryParams:
    _, maven, credentials, read_from = values
    target: SonatypeRepository | MavenRepository
    if maven is None:
        target = SonatypeRepository(credentials=credentials or sonatype_env_credentials(env))
    else:
        target = maven.model_copy(update={"credentials": credentials})
    return RepositoryParams(
        repository=target,
        read_from=read_from,
        snapshot_versioning=options.snapshot_versioning,
    )


def parse_auth(raw: str | None) -> Credentials | None:
    """Parse an ``--auth`` value of the form ``user:password``.

    Raises:
        ValueError: If the value has no separator or an empty user.
    """

    if raw is None:
        return None
    user, sep, password = raw.partition(":")
    if not sep or not user.strip():
        raise ValueError(f"Invalid --auth value, expected {AUTH_FORMAT}")
    return Credentials(user=user.strip(), password=password)


def sonatype_env_credentials(env: Mapping[str, str]) -> Credentials | None:
    """Return credentials from the Sonatype environment variables, if both are set."""

    user = env.get(SONATYPE_USERNAME_ENV)
    password = env.get(SONATYPE_PASSWORD_ENV)
    if user and password:
        return Credentials(user=user, password=password)
    return None


def maven_repository(raw: str, credentials: Credentials | None) -> MavenRepository:
    """Translate a repository token into a :class:`MavenRepository`.

    Args:
        raw: HTTP(S) URL, ``file://`` URL, or local filesystem path.
        credentials: Credentials attached to the repository.

    Returns:
        MavenRepository: Repository with a normalised URL.

    Raises:
        ValueError: If the token is blank or uses an unsupported scheme.
    """

    token = raw.strip()
    if not token:
        raise ValueError("Repository value cannot be empty")
    if _SCHEME_SEPARATOR in token:
        scheme = token.split(_SCHEME_SEPARATOR, 1)[0].lower()
        if scheme not in _REMOTE_SCHEMES and scheme != _LOCAL_SCHEME:
            raise ValueError(f"Unsupported repository scheme '{scheme}' in {raw}")
        return MavenRepository(url=token.rstrip("/"), credentials=credentials)
    return MavenRepository(url=Path(token).expanduser().resolve().as_uri(), credentials=credentials)


__all__ = [
    "AUTH_FORMAT",
    "build_repository",
    "maven_repository",
    "parse_auth",
    "sonatype_env_credentials",
]
