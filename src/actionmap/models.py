# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the actionmap package."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity, is_blocking

ModuleName = NewType("ModuleName", str)


class SourceRef(BaseModel):
    """Opaque handle pointing back at the declaration that produced a finding.

    ``line`` and ``column`` are 1-based. For scanned sources they locate the
    decorator expression, the marker name directly after ``@``.
    """

    model_config = ConfigDict(frozen=True)

    file: str | None = None
    line: int | None = None
    column: int | None = None
    symbol: str | None = None

    def describe(self) -> str:
        """Return a ``file:line:col`` style location for humans."""

        if self.file is None:
            return self.symbol or "<unknown>"
        location = self.file
        if self.line is not None:
            location = f"{location}:{self.line}"
            if self.column is not None:
                location = f"{location}:{self.column}"
        return location


class ActionDeclaration(BaseModel):
    """A class marked as a routable action together with its declared path."""

    model_config = ConfigDict(frozen=True)

    path: str
    implementing_type: str
    source_ref: SourceRef = Field(default_factory=SourceRef)


class DiagnosticCode(str, Enum):
    """Enumerate the validation findings emitted while building a route table."""

    PREFIX_MISMATCH = "prefix-mismatch"
    DUPLICATE_PATH = "duplicate-path"


class Diagnostic(BaseModel):
    """Validation finding attributed to a single declaration."""

    model_config = ConfigDict(frozen=True)

    severity: Severity = Severity.ERROR
    code: DiagnosticCode
    message: str
    source_ref: SourceRef = Field(default_factory=SourceRef)

    @property
    def blocking(self) -> bool:
        """Return ``True`` when the diagnostic marks the run as failed."""

        return is_blocking(self.severity)


class SourceArtifact(BaseModel):
    """Generated source unit ready to be written through an output sink."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    filename: str
    text: str


class RouteTable(Mapping[str, str]):
    """Immutable path to implementing-type mapping in canonical path order."""

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[tuple[str, str]] = ()) -> None:
        index = dict(entries)
        self._entries: tuple[tuple[str, str], ...] = tuple(sorted(index.items()))
        self._index = index

    def __getitem__(self, path: str) -> str:
        return self._index[path]

    def __iter__(self) -> Iterator[str]:
        return (path for path, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._entries)!r})"

    @property
    def entries(self) -> tuple[tuple[str, str], ...]:
        """Return ``(path, implementing_type)`` pairs ordered by path."""

        return self._entries


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of folding declarations into a route table."""

    table: RouteTable
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when no blocking diagnostic was produced."""

        return not any(diagnostic.blocking for diagnostic in self.diagnostics)


__all__ = [
    "ActionDeclaration",
    "BuildResult",
    "Diagnostic",
    "DiagnosticCode",
    "ModuleName",
    "RouteTable",
    "SourceArtifact",
    "SourceRef",
]
