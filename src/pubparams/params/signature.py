# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the signature policy."""

from __future__ import annotations

from ..models import SignatureParams
from ..options import SignatureOptions
from ..validation import Validated, invalid, valid


def build_signature(options: SignatureOptions) -> Validated[SignatureParams]:
    """Validate signing options into :class:`SignatureParams`.

    Signing is enabled by ``--gpg`` or implied by ``--gpg-key``.
    """

    key = options.gpg_key.strip() if options.gpg_key is not None else None
    errors: list[str] = []
    if options.gpg_key is not None and not key:
        errors.append("--gpg-key cannot be empty")
    if options.gpg is False and options.gpg_key is not None:
        errors.append("Cannot specify --gpg-key along with --no-gpg")
    if errors:
        return invalid(*errors)
    gpg = options.gpg if options.gpg is not None else key is not None
    return valid(SignatureParams(gpg=gpg, gpg_key=key))


__all__ = ["build_signature"]
