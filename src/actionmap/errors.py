# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for fatal, run-aborting failures."""

from __future__ import annotations

from pathlib import Path


class ActionMapError(RuntimeError):
    """Base class for errors that abort an actionmap run."""


class ConfigurationError(ActionMapError):
    """Raised when the module name or configuration input is unusable."""


class DeclarationSourceError(ActionMapError):
    """Raised when action declarations cannot be collected from a source."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialise the error with a message and the offending file.

        Args:
            message: Human-readable description of the failure.
            path: Source file that could not be read or parsed.
        """

        super().__init__(message)
        self.path = path


class GenerationIOError(ActionMapError):
    """Raised when the generated artifact cannot be written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialise the error with a message and the target path.

        Args:
            message: Human-readable description of the failure.
            path: Destination the artifact was being written to.
        """

        super().__init__(message)
        self.path = path


__all__ = [
    "ActionMapError",
    "ConfigurationError",
    "DeclarationSourceError",
    "GenerationIOError",
]
