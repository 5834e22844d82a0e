# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for signer and logger selection."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from pubparams.models import (
    CacheParams,
    ChecksumParams,
    Credentials,
    DirectoryParams,
    MavenRepository,
    MetadataParams,
    PublishParameters,
    RepositoryParams,
    SignatureParams,
    SinglePackageParams,
    SonatypeRepository,
)
from pubparams.modes import (
    SONATYPE_WITHOUT_CREDENTIALS,
    SONATYPE_WITHOUT_SIGNING,
    DefaultKey,
    GpgSignerKind,
    KeyId,
    LoggerFamily,
    LoggerMode,
    NopSignerKind,
    default_batch_mode,
    describe_signer,
    emit_warnings,
    select_logger,
    select_loggers,
    select_signer,
    signer_warnings,
)


def _params(
    *,
    repository: SonatypeRepository | MavenRepository | None = None,
    signature: SignatureParams | None = None,
    verbosity: int = 0,
    batch: bool = False,
    dummy: bool = False,
) -> PublishParameters:
    return PublishParameters(
        repository=RepositoryParams(repository=repository or SonatypeRepository()),
        metadata=MetadataParams(),
        single_package=SinglePackageParams(),
        directory=DirectoryParams(),
        checksum=ChecksumParams(),
        signature=signature or SignatureParams(),
        cache=CacheParams(location=Path("/tmp/cache"), ttl=timedelta(hours=24)),
        verbosity=verbosity,
        batch=batch,
        dummy=dummy,
    )


class _Sink:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


@pytest.mark.parametrize(
    ("signature", "expected", "label"),
    [
        (SignatureParams(), NopSignerKind(), "none"),
        (SignatureParams(gpg=True), GpgSignerKind(key=DefaultKey()), "gpg:default"),
        (
            SignatureParams(gpg=True, gpg_key="ABCD1234"),
            GpgSignerKind(key=KeyId("ABCD1234")),
            "gpg:ABCD1234",
        ),
    ],
)
def test_select_signer(signature: SignatureParams, expected: object, label: str) -> None:
    kind = select_signer(signature)

    assert kind == expected
    assert describe_signer(kind) == label


def test_selection_is_deterministic() -> None:
    params = _params(signature=SignatureParams(gpg=True, gpg_key="K"), batch=True)

    assert select_signer(params.signature) == select_signer(params.signature)
    assert select_loggers(params) == select_loggers(params)


@pytest.mark.parametrize(("batch", "mode"), [(True, LoggerMode.BATCH), (False, LoggerMode.INTERACTIVE)])
def test_logger_mode_follows_batch_flag(batch: bool, mode: LoggerMode) -> None:
    choices = select_loggers(_params(batch=batch, verbosity=1))

    assert set(choices) == set(LoggerFamily)
    assert {choice.mode for choice in choices.values()} == {mode}
    assert {choice.verbosity for choice in choices.values()} == {1}


def test_upload_logger_records_dummy_and_locality() -> None:
    params = _params(dummy=True)

    upload = select_logger(LoggerFamily.UPLOAD, params, is_local=True)
    checksum = select_logger(LoggerFamily.CHECKSUM, params, is_local=True)

    assert upload.dummy is True
    assert upload.is_local is True
    assert checksum.dummy is False
    assert checksum.is_local is False


def test_default_batch_mode_uses_probe() -> None:
    assert default_batch_mode(lambda: False) is True
    assert default_batch_mode(lambda: True) is False


def test_sonatype_without_signing_or_credentials_warns() -> None:
    assert signer_warnings(_params()) == [SONATYPE_WITHOUT_SIGNING, SONATYPE_WITHOUT_CREDENTIALS]


def test_quiet_mode_suppresses_credentials_warning() -> None:
    assert signer_warnings(_params(verbosity=-1)) == [SONATYPE_WITHOUT_SIGNING]


def test_signed_sonatype_with_credentials_is_silent() -> None:
    params = _params(
        repository=SonatypeRepository(credentials=Credentials(user="u", password="p")),
        signature=SignatureParams(gpg=True),
    )

    assert signer_warnings(params) == []


def test_plain_repositories_never_warn() -> None:
    params = _params(repository=MavenRepository(url="https://repo.example.com"))

    assert signer_warnings(params) == []


def test_emit_warnings_writes_to_sink() -> None:
    sink = _Sink()

    emitted = emit_warnings(_params(signature=SignatureParams(gpg=True)), sink)

    assert emitted == [SONATYPE_WITHOUT_CREDENTIALS]
    assert sink.messages == [SONATYPE_WITHOUT_CREDENTIALS]
