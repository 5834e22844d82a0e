# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Accumulating validation results and the combinators that merge them.

Every parameter group is validated independently and produces a
:data:`Validated` value. :func:`combine` and :func:`combine_fields` merge any
number of such values without short-circuiting, so the caller sees every error
from every group in declaration order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
ModelT = TypeVar("ModelT")


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """Successful validation outcome wrapping ``value``."""

    value: T

    @property
    def is_valid(self) -> bool:
        """Return ``True``; provided for symmetry with :class:`Invalid`."""

        return True

    def map(self, func: Callable[[T], U]) -> Valid[U]:
        """Return a new result holding ``func(value)``.

        Args:
            func: Transformation applied to the wrapped value.

        Returns:
            Valid[U]: Result wrapping the transformed value.
        """

        return Valid(func(self.value))

    def and_then(self, func: Callable[[T], Validated[U]]) -> Validated[U]:
        """Chain a dependent validation step onto this result.

        Only use this for steps that genuinely depend on the wrapped value;
        independent checks belong in :func:`combine`.

        Args:
            func: Validation step consuming the wrapped value.

        Returns:
            Validated[U]: Outcome of ``func``.
        """

        return func(self.value)


@dataclass(frozen=True, slots=True)
class Invalid:
    """Failed validation outcome carrying an ordered, non-empty error tuple."""

    errors: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid results require at least one error")

    @property
    def is_valid(self) -> bool:
        """Return ``False``; the result carries errors rather than a value."""

        return False

    def map(self, func: Callable[[Any], Any]) -> Invalid:
        """Return ``self`` unchanged; failures propagate untouched."""

        return self

    def and_then(self, func: Callable[[Any], Any]) -> Invalid:
        """Return ``self`` unchanged; dependent steps are skipped."""

        return self


Validated = Valid[T] | Invalid


def valid(value: T) -> Valid[T]:
    """Wrap ``value`` in a successful result."""

    return Valid(value)


def invalid(*errors: str) -> Invalid:
    """Return a failed result carrying ``errors`` in the given order."""

    return Invalid(tuple(errors))


def catching(func: Callable[[], T], *exceptions: type[Exception]) -> Validated[T]:
    """Run ``func`` and convert the listed exceptions into a failed result.

    Args:
        func: Zero-argument callable performing a single validation.
        *exceptions: Exception types interpreted as validation failures.
            Defaults to :class:`ValueError`.

    Returns:
        Validated[T]: ``Valid`` with the callable's return value or ``Invalid``
        carrying the exception message.
    """

    handled = exceptions or (ValueError,)
    try:
        return Valid(func())
    except handled as exc:
        return Invalid((str(exc),))


def combine(*results: Validated[Any]) -> Validated[tuple[Any, ...]]:
    """Combine independent results, accumulating every error.

    Args:
        *results: Results of independent validations, in declaration order.

    Returns:
        Validated[tuple[Any, ...]]: Tuple of all values when every input is
        valid, otherwise the concatenated errors of all failing inputs.
    """

    values: list[Any] = []
    errors: list[str] = []
    for result in results:
        if isinstance(result, Invalid):
            errors.extend(result.errors)
        else:
            values.append(result.value)
    if errors:
        return Invalid(tuple(errors))
    return Valid(tuple(values))


def combine_fields(**results: Validated[Any]) -> Validated[dict[str, Any]]:
    """Keyword flavour of :func:`combine` returning a field mapping.

    Keyword order is the declaration order used for error reporting.
    """

    names = tuple(results)
    return combine(*results.values()).map(lambda values: dict(zip(names, values, strict=True)))


def collect(results: Iterable[Validated[T]]) -> Validated[tuple[T, ...]]:
    """Combine a homogeneous sequence of results (e.g. one per list entry)."""

    return combine(*results)


def build_model(model_cls: Callable[..., ModelT], fields: Mapping[str, Any]) -> ModelT:
    """Instantiate ``model_cls`` from a validated field mapping."""

    return model_cls(**fields)


__all__ = [
    "Invalid",
    "Valid",
    "Validated",
    "build_model",
    "catching",
    "collect",
    "combine",
    "combine_fields",
    "invalid",
    "valid",
]
