# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select signer and logger strategies from resolved parameters.

Everything here is a pure function of :class:`PublishParameters` (or a slice
of it) returning a *kind* value. Constructing the real signer or logger is left
to the caller, so nothing with side effects (gpg prompts, terminal redraws)
runs while parameters are still being validated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol

from .console import detect_tty
from .models import PublishParameters, SignatureParams

SONATYPE_WITHOUT_SIGNING: Final[str] = (
    "Warning: --sonatype passed, but signing not enabled, trying to proceed anyway"
)
SONATYPE_WITHOUT_CREDENTIALS: Final[str] = (
    "Warning: no Sonatype credentials passed, trying to proceed anyway"
)


@dataclass(frozen=True, slots=True)
class DefaultKey:
    """Sign with gpg's default secret key."""


@dataclass(frozen=True, slots=True)
class KeyId:
    """Sign with an explicitly selected gpg key."""

    id: str


GpgKey = DefaultKey | KeyId


@dataclass(frozen=True, slots=True)
class GpgSignerKind:
    key: GpgKey


@dataclass(frozen=True, slots=True)
class NopSignerKind:
    """Signing disabled."""


SignerKind = GpgSignerKind | NopSignerKind


class LoggerFamily(str, Enum):
    """Progress loggers used by the publish pipeline."""

    DOWNLOAD = "download"
    SIGNER = "signer"
    CHECKSUM = "checksum"
    UPLOAD = "upload"


class LoggerMode(str, Enum):
    """Batch loggers print lines; interactive ones redraw the terminal."""

    BATCH = "batch"
    INTERACTIVE = "interactive"


@dataclass(frozen=True, slots=True)
class LoggerChoice:
    """Logger the caller should build for one family."""

    family: LoggerFamily
    mode: LoggerMode
    verbosity: int
    dummy: bool = False
    is_local: bool = False


class WarningSink(Protocol):
    """Anything able to print an advisory warning line."""

    def warn(self, message: str) -> None: ...


def default_batch_mode(tty_probe: Callable[[], bool] = detect_tty) -> bool:
    """Return the batch fallback used when ``--batch`` was not given.

    Batch output is assumed whenever stdout is not an interactive terminal.
    """

    return not tty_probe()


def select_signer(signature: SignatureParams) -> SignerKind:
    """Return the signer kind implied by the signature policy."""

    if not signature.gpg:
        return NopSignerKind()
    key: GpgKey = KeyId(signature.gpg_key) if signature.gpg_key else DefaultKey()
    return GpgSignerKind(key=key)


def select_logger(
    family: LoggerFamily,
    params: PublishParameters,
    *,
    is_local: bool = False,
) -> LoggerChoice:
    """Return the logger choice for ``family``.

    Args:
        family: Logger family requested by the caller.
        params: Resolved publish parameters.
        is_local: Whether uploads target a local repository. Only recorded for
            the upload family.

    Returns:
        LoggerChoice: Batch or interactive variant with the settings it needs.
    """

    mode = LoggerMode.BATCH if params.batch else LoggerMode.INTERACTIVE
    if family is LoggerFamily.UPLOAD:
        return LoggerChoice(
            family=family,
            mode=mode,
            verbosity=params.verbosity,
            dummy=params.dummy,
            is_local=is_local,
        )
    return LoggerChoice(family=family, mode=mode, verbosity=params.verbosity)


def select_loggers(params: PublishParameters, *, is_local: bool = False) -> dict[LoggerFamily, LoggerChoice]:
    """Return the logger choice for every family, keyed by family."""

    return {family: select_logger(family, params, is_local=is_local) for family in LoggerFamily}


def describe_signer(kind: SignerKind) -> str:
    """Return a short label such as ``gpg:default``, ``gpg:ABCD1234`` or ``none``."""

    if isinstance(kind, NopSignerKind):
        return "none"
    if isinstance(kind.key, KeyId):
        return f"gpg:{kind.key.id}"
    return "gpg:default"


def signer_warnings(params: PublishParameters) -> list[str]:
    """Return advisory warnings for a Sonatype target lacking signing or credentials.

    Warnings never block publishing. The credentials warning is suppressed in
    quiet mode.
    """

    repository = params.repository
    if not repository.is_sonatype:
        return []
    warnings: list[str] = []
    if isinstance(select_signer(params.signature), NopSignerKind):
        warnings.append(SONATYPE_WITHOUT_SIGNING)
    if repository.repository.credentials is None and params.verbosity >= 0:
        warnings.append(SONATYPE_WITHOUT_CREDENTIALS)
    return warnings


def emit_warnings(params: PublishParameters, sink: WarningSink) -> list[str]:
    """Write each advisory warning to ``sink`` and return them."""

    warnings = signer_warnings(params)
    for message in warnings:
        sink.warn(message)
    return warnings


__all__ = [
    "SONATYPE_WITHOUT_CREDENTIALS",
    "SONATYPE_WITHOUT_SIGNING",
    "DefaultKey",
    "GpgKey",
    "GpgSignerKind",
    "KeyId",
    "LoggerChoice",
    "LoggerFamily",
    "LoggerMode",
    "NopSignerKind",
    "SignerKind",
    "WarningSink",
    "default_batch_mode",
    "describe_signer",
    "emit_warnings",
    "select_logger",
    "select_loggers",
    "signer_warnings",
]
