# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build project metadata from CLI options."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial
from typing import Final, TypeVar

from ..models import Developer, License, MetadataParams
from ..options import MetadataOptions
from ..validation import Validated, build_model, catching, collect, combine_fields, valid

ItemT = TypeVar("ItemT")

LICENSE_FORMAT: Final[str] = "name:url"
DEVELOPER_FORMAT: Final[str] = "id|name|url"
_DEVELOPER_SEPARATOR: Final[str] = "|"
_DEVELOPER_FIELDS: Final[int] = 3


def build_metadata(options: MetadataOptions) -> Validated[MetadataParams]:
    """Validate metadata options into :class:`MetadataParams`.

    Fields the user did not supply stay ``None`` so a config document can fill
    them later.
    """

    return combine_fields(
        organization=catching(partial(_optional_text, options.organization, "--organization")),
        name=catching(partial(_optional_text, options.name, "--name")),
        version=catching(partial(_optional_text, options.version, "--version")),
        licenses=_parse_entries(options.licenses, parse_license),
        home_page=catching(partial(_optional_text, options.home_page, "--home-page")),
        developers=_parse_entries(options.developers, parse_developer),
        git=valid(options.git),
    ).map(partial(build_model, MetadataParams))


def _optional_text(raw: str | None, label: str) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        raise ValueError(f"{label} cannot be empty")
    return value


def _parse_entries(
    raw_entries: Sequence[str],
    parser: Callable[[str], ItemT],
) -> Validated[tuple[ItemT, ...] | None]:
    if not raw_entries:
        return valid(None)
    return collect(catching(partial(parser, raw)) for raw in raw_entries)


def parse_license(raw: str) -> License:
    """Parse a ``name:url`` license specification.

    Raises:
        ValueError: If either component is missing.
    """

    name, sep, url = raw.partition(":")
    if not sep or not name.strip() or not url.strip():
        raise ValueError(f"Malformed license '{raw}', expected {LICENSE_FORMAT}")
    return License(name=name.strip(), url=url.strip())


def parse_developer(raw: str) -> Developer:
    """Parse an ``id|name|url`` developer specification.

    Raises:
        ValueError: If the entry does not have exactly three parts or the id is blank.
    """

    parts = [part.strip() for part in raw.split(_DEVELOPER_SEPARATOR)]
    if len(parts) != _DEVELOPER_FIELDS or not parts[0]:
        raise ValueError(f"Malformed developer '{raw}', expected {DEVELOPER_FORMAT}")
    dev_id, name, url = parts
    return Developer(id=dev_id, name=name, url=url)


__all__ = [
    "DEVELOPER_FORMAT",
    "LICENSE_FORMAT",
    "build_metadata",
    "parse_developer",
    "parse_license",
]
