# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Persisted ``publish.json`` document and its loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models import Developer, License
from ..validation import Validated, invalid, valid


class ConfigOrganization(BaseModel):
    """Organization entry; accepts either a bare string or an object."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    organization: str | None = None
    url: str | None = None


class ConfigDocument(BaseModel):
    """Immutable view of a parsed config document.

    Every field is optional. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    organization: ConfigOrganization = Field(default_factory=ConfigOrganization)
    version: str | None = None
    home_page: str | None = Field(default=None, alias="homePage")
    licenses: tuple[License, ...] | None = None
    developers: tuple[Developer, ...] | None = None

    @field_validator("organization", mode="before")
    @classmethod
    def _coerce_organization(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, str):
            return {"organization": value}
        return value


def load_config_document(path: Path) -> Validated[ConfigDocument]:
    """Read and validate the JSON document at ``path``.

    Args:
        path: Regular file holding the document.

    Returns:
        Validated[ConfigDocument]: Parsed document, or a single error naming
        the file when it cannot be read or parsed.
    """

    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        return invalid(f"Error reading conf file {path}: {exc.strerror or exc}")
    except UnicodeDecodeError as exc:
        return invalid(f"Error reading conf file {path}: not valid UTF-8 ({exc.reason} at byte {exc.start})")
    try:
        return valid(ConfigDocument.model_validate_json(payload))
    except ValidationError as exc:
        return invalid(f"Error parsing conf file {path}: {_describe(exc)}")


def _describe(exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(details)


__all__ = ["ConfigDocument", "ConfigOrganization", "load_config_document"]
