# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for metadata option parsing."""

from __future__ import annotations

import pytest

from pubparams.models import Developer, License, MetadataParams
from pubparams.options import MetadataOptions
from pubparams.params.metadata import build_metadata, parse_developer, parse_license
from pubparams.validation import Invalid, Valid


def test_absent_metadata_stays_unset() -> None:
    assert build_metadata(MetadataOptions()) == Valid(MetadataParams())


def test_metadata_values_are_trimmed_and_parsed() -> None:
    result = build_metadata(
        MetadataOptions(
            organization=" org.example ",
            name="lib",
            version="1.0",
            licenses=("Apache-2.0:https://www.apache.org/licenses/LICENSE-2.0",),
            home_page="https://example.org",
            developers=("jdoe|J. Doe|https://example.org/jdoe",),
            git=True,
        )
    )

    assert isinstance(result, Valid)
    metadata = result.value
    assert metadata.organization == "org.example"
    assert metadata.version == "1.0"
    assert metadata.licenses == (
        License(name="Apache-2.0", url="https://www.apache.org/licenses/LICENSE-2.0"),
    )
    assert metadata.developers == (Developer(id="jdoe", name="J. Doe", url="https://example.org/jdoe"),)
    assert metadata.git is True


def test_metadata_errors_accumulate_in_field_order() -> None:
    result = build_metadata(
        MetadataOptions(
            organization="",
            licenses=("nourl", "MIT:https://opensource.org/licenses/MIT", "broken"),
            developers=("only|two",),
        )
    )

    assert isinstance(result, Invalid)
    assert result.errors == (
        "--organization cannot be empty",
        "Malformed license 'nourl', expected name:url",
        "Malformed license 'broken', expected name:url",
        "Malformed developer 'only|two', expected id|name|url",
    )


def test_license_url_may_contain_colons() -> None:
    assert parse_license("MIT:https://opensource.org/licenses/MIT").url == (
        "https://opensource.org/licenses/MIT"
    )


@pytest.mark.parametrize("raw", ["|name|url", "a|b|c|d"])
def test_parse_developer_rejects_bad_shapes(raw: str) -> None:
    with pytest.raises(ValueError, match="Malformed developer"):
        parse_developer(raw)
