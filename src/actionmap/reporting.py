# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Route validation diagnostics to the host tool's error channel."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from .models import Diagnostic


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Return ``location: severity[code]: message`` for ``diagnostic``."""

    location = diagnostic.source_ref.describe()
    return f"{location}: {diagnostic.severity.value}[{diagnostic.code.value}]: {diagnostic.message}"


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Sink receiving diagnostics as they are produced."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Surface ``diagnostic`` to the author."""

        raise NotImplementedError


class CollectingReporter:
    """Keep every reported diagnostic in memory."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


class ConsoleReporter:
    """Forward diagnostics to a line-oriented emitter such as ``CLILogger.fail``."""

    def __init__(self, emit_error: Callable[[str], None], emit_warning: Callable[[str], None] | None = None) -> None:
        self._emit_error = emit_error
        self._emit_warning = emit_warning or emit_error
        self.count = 0

    def report(self, diagnostic: Diagnostic) -> None:
        emit = self._emit_error if diagnostic.blocking else self._emit_warning
        emit(format_diagnostic(diagnostic))
        self.count += 1


__all__ = ["CollectingReporter", "ConsoleReporter", "DiagnosticReporter", "format_diagnostic"]
