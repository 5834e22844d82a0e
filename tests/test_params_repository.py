# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for repository target resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from pubparams.constants import SONATYPE_PASSWORD_ENV, SONATYPE_USERNAME_ENV
from pubparams.models import Credentials, MavenRepository, SonatypeRepository
from pubparams.options import RepositoryOptions
from pubparams.params.repository import build_repository, maven_repository, parse_auth
from pubparams.validation import Invalid, Valid


def test_default_target_is_sonatype_with_env_credentials() -> None:
    env = {SONATYPE_USERNAME_ENV: "alice", SONATYPE_PASSWORD_ENV: "s3cret"}

    result = build_repository(RepositoryOptions(), env=env)

    assert isinstance(result, Valid)
    params = result.value
    assert params.is_sonatype
    assert isinstance(params.repository, SonatypeRepository)
    assert params.repository.credentials == Credentials(user="alice", password="s3cret")
    assert params.snapshot_versioning is True


def test_sonatype_without_credentials_is_still_valid() -> None:
    result = build_repository(RepositoryOptions(sonatype=True), env={})

    assert isinstance(result, Valid)
    assert result.value.repository.credentials is None


def test_central_alias_selects_sonatype() -> None:
    result = build_repository(RepositoryOptions(repository="Central", auth="bob:pw"), env={})

    assert isinstance(result, Valid)
    assert result.value.is_sonatype
    assert result.value.repository.credentials == Credentials(user="bob", password="pw")


def test_http_repository_keeps_url_without_trailing_slash() -> None:
    result = build_repository(
        RepositoryOptions(repository="https://repo.example.com/releases/", auth="bob:pw"),
        env={},
    )

    assert isinstance(result, Valid)
    target = result.value.repository
    assert isinstance(target, MavenRepository)
    assert target.url == "https://repo.example.com/releases"
    assert target.credentials == Credentials(user="bob", password="pw")
    assert not target.is_local
    assert not result.value.is_sonatype


def test_local_path_becomes_file_url(tmp_path: Path) -> None:
    repository = maven_repository(str(tmp_path / "repo"), None)

    assert repository.is_local
    assert repository.url == (tmp_path / "repo").resolve().as_uri()


def test_sonatype_and_repository_conflict_is_reported() -> None:
    result = build_repository(
        RepositoryOptions(repository="https://repo.example.com", sonatype=True),
        env={},
    )

    assert isinstance(result, Invalid)
    assert result.errors == ("Cannot specify both --sonatype and --repository",)


def test_no_sonatype_without_repository_is_an_error() -> None:
    result = build_repository(RepositoryOptions(sonatype=False), env={})

    assert isinstance(result, Invalid)
    assert result.errors == ("No repository specified: pass --repository or --sonatype",)


def test_independent_repository_errors_accumulate() -> None:
    result = build_repository(
        RepositoryOptions(
            repository="gopher://repo.example.com",
            sonatype=True,
            auth="missing-separator",
            read_from="ftp://mirror.example.com",
        ),
        env={},
    )

    assert isinstance(result, Invalid)
    assert result.errors == (
        "Cannot specify both --sonatype and --repository",
        "Unsupported repository scheme 'gopher' in gopher://repo.example.com",
        "Invalid --auth value, expected user:password",
        "Unsupported repository scheme 'ftp' in ftp://mirror.example.com",
    )


def test_bad_target_is_reported_alongside_bad_auth() -> None:
    result = build_repository(RepositoryOptions(repository="ftp://host/repo", auth="nocolon"), env={})

    assert isinstance(result, Invalid)
    assert result.errors == (
        "Unsupported repository scheme 'ftp' in ftp://host/repo",
        "Invalid --auth value, expected user:password",
    )


def test_missing_target_is_reported_alongside_bad_auth() -> None:
    result = build_repository(RepositoryOptions(sonatype=False, auth="nocolon"), env={})

    assert isinstance(result, Invalid)
    assert result.errors == (
        "No repository specified: pass --repository or --sonatype",
        "Invalid --auth value, expected user:password",
    )


def test_read_from_is_resolved_without_credentials() -> None:
    result = build_repository(
        RepositoryOptions(
            repository="https://repo.example.com",
            read_from="https://mirror.example.com/",
            auth="bob:pw",
        ),
        env={},
    )

    assert isinstance(result, Valid)
    assert result.value.read_from == MavenRepository(url="https://mirror.example.com")


@pytest.mark.parametrize("raw", ["nouser", ":password"])
def test_parse_auth_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ValueError, match="expected user:password"):
        parse_auth(raw)


def test_parse_auth_keeps_colons_in_password() -> None:
    assert parse_auth("user:pa:ss") == Credentials(user="user", password="pa:ss")


def test_credentials_password_is_hidden() -> None:
    credentials = Credentials(user="user", password="hunter2")

    assert "hunter2" not in repr(credentials)
    assert "password" not in credentials.model_dump()


def test_blank_repository_is_rejected() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        maven_repository("   ", None)
