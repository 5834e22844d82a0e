# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Overlay config document values onto fields the CLI left unset."""

from __future__ import annotations

from typing import TypeVar

from ..models import PublishParameters
from .document import ConfigDocument

ValueT = TypeVar("ValueT")


def merge(explicit: ValueT | None, fallback: ValueT | None) -> ValueT | None:
    """Return ``explicit`` when present, otherwise ``fallback``."""

    return explicit if explicit is not None else fallback


def apply_config(params: PublishParameters, document: ConfigDocument) -> PublishParameters:
    """Return ``params`` with absent metadata fields taken from ``document``.

    Each field is merged on its own, so some values may come from the command
    line and others from the document. ``params`` itself is left untouched.

    Args:
        params: Parameters resolved from CLI options.
        document: Loaded config document.

    Returns:
        PublishParameters: New parameters with the overlay applied.
    """

    metadata = params.metadata
    overlaid = metadata.model_copy(
        update={
            "organization": merge(metadata.organization, document.organization.organization),
            "version": merge(metadata.version, document.version),
            "home_page": merge(metadata.home_page, document.home_page),
            "licenses": merge(metadata.licenses, document.licenses),
            "developers": merge(metadata.developers, document.developers),
        }
    )
    return params.model_copy(update={"metadata": overlaid})


__all__ = ["apply_config", "merge"]
