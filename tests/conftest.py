# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pubparams.constants import SONATYPE_PASSWORD_ENV, SONATYPE_USERNAME_ENV


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an isolated working directory with no Sonatype credentials in the environment."""

    root = tmp_path / "workspace"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    monkeypatch.delenv(SONATYPE_USERNAME_ENV, raising=False)
    monkeypatch.delenv(SONATYPE_PASSWORD_ENV, raising=False)
    return root


@pytest.fixture
def write_file():
    """Return a helper writing UTF-8 text below a directory, creating parents."""

    def _write(root: Path, relative: str, content: str = "") -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
