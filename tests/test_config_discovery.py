# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locating the config document."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pubparams.config import check_explicit_config, locate_config, should_discover
from pubparams.models import DirectoryParams, SinglePackageParams
from pubparams.validation import Invalid, Valid

UNSCOPED = {"single_package": SinglePackageParams(), "directory": DirectoryParams()}


def test_explicit_missing_and_non_file_errors_differ(tmp_path: Path) -> None:
    (tmp_path / "conf-dir").mkdir()

    missing = check_explicit_config(Path("nope.json"), cwd=tmp_path)
    directory = check_explicit_config(Path("conf-dir"), cwd=tmp_path)

    assert missing == Invalid(("Conf file nope.json not found",))
    assert directory == Invalid(("Conf file conf-dir is not a file",))


def test_explicit_config_wins_over_scoping(tmp_path: Path, write_file) -> None:
    path = write_file(tmp_path, "custom.json", "{}")

    result = locate_config(
        Path("custom.json"),
        single_package=SinglePackageParams(package=True),
        directory=DirectoryParams(directories=(Path("x"),)),
        cwd=tmp_path,
    )

    assert result == Valid(path)


def test_primary_location_is_probed_first(tmp_path: Path, write_file) -> None:
    primary = write_file(tmp_path, "publish.json", "{}")
    write_file(tmp_path, "project/publish.json", "{}")

    assert locate_config(None, cwd=tmp_path, **UNSCOPED) == Valid(primary)


def test_secondary_location_is_used_when_primary_is_absent(tmp_path: Path, write_file) -> None:
    secondary = write_file(tmp_path, "project/publish.json", "{}")

    assert locate_config(None, cwd=tmp_path, **UNSCOPED) == Valid(secondary)


def test_directory_named_like_config_is_skipped(tmp_path: Path) -> None:
    (tmp_path / "publish.json").mkdir()

    assert locate_config(None, cwd=tmp_path, **UNSCOPED) == Valid(None)


@pytest.mark.parametrize(
    ("single_package", "directory"),
    [
        (SinglePackageParams(package=True), DirectoryParams()),
        (SinglePackageParams(), DirectoryParams(directories=(Path("repo"),))),
        (SinglePackageParams(), DirectoryParams(build_directories=(Path("module"),))),
    ],
)
def test_scoped_runs_skip_discovery(
    tmp_path: Path,
    write_file,
    caplog: pytest.LogCaptureFixture,
    single_package: SinglePackageParams,
    directory: DirectoryParams,
) -> None:
    write_file(tmp_path, "publish.json", "{}")
    caplog.set_level(logging.DEBUG, logger="pubparams.config.discovery")

    result = locate_config(None, single_package=single_package, directory=directory, cwd=tmp_path)

    assert result == Valid(None)
    assert not should_discover(single_package, directory)
    assert "discovery skipped" in caplog.text


def test_no_document_anywhere(tmp_path: Path) -> None:
    assert locate_config(None, cwd=tmp_path, **UNSCOPED) == Valid(None)
