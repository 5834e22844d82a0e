# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Executable entrypoint for ``python -m pubparams``."""

from pubparams.cli import app

if __name__ == "__main__":
    app()
