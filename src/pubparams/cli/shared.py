# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

import typer

from ..logging import fail as core_fail
from ..logging import warn as core_warn
from ..validation import Invalid, Validated

T = TypeVar("T")


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool
    use_color: bool | None = None

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger writing through the shared Rich console manager.
    """

    return CLILogger(use_emoji=emoji, use_color=False if no_color else None)


def require_valid(result: Validated[T], *, logger: CLILogger) -> T:
    """Return the value of ``result`` or print every error and raise.

    Args:
        result: Outcome of a resolution step.
        logger: Logger receiving one failure line per error.

    Returns:
        T: The wrapped value when ``result`` is valid.

    Raises:
        CLIError: When ``result`` carries errors.
    """

    if isinstance(result, Invalid):
        for message in result.errors:
            logger.fail(message)
        raise CLIError("publish parameters could not be resolved", exit_code=1)
    return result.value


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "require_valid"]
