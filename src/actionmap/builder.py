# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validate action declarations and fold them into a route table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

from .models import (
    ActionDeclaration,
    BuildResult,
    Diagnostic,
    DiagnosticCode,
    ModuleName,
    RouteTable,
)
from .severity import Severity

LOGGER = logging.getLogger(__name__)


class RouteTableAccumulator:
    """Fold declarations into a path mapping while collecting diagnostics.

    Invalid and duplicate declarations are reported but still inserted; a
    repeated path keeps the most recently inserted implementing type.
    """

    def __init__(self, module_name: ModuleName) -> None:
        self._module_name = module_name
        self._routes: dict[str, str] = {}
        self._diagnostics: list[Diagnostic] = []
        self._lock = Lock()

    @property
    def module_name(self) -> ModuleName:
        """Return the module name paths are validated against."""

        return self._module_name

    def insert(self, declaration: ActionDeclaration) -> list[Diagnostic]:
        """Validate ``declaration`` and add it to the table.

        Args:
            declaration: Declaration to validate and insert.

        Returns:
            list[Diagnostic]: Findings produced for this declaration only.
        """

        with self._lock:
            return self._insert_locked(declaration)

    def merge(self, declarations: Iterable[ActionDeclaration]) -> list[Diagnostic]:
        """Insert a batch of declarations as a single critical section."""

        found: list[Diagnostic] = []
        with self._lock:
            for declaration in declarations:
                found.extend(self._insert_locked(declaration))
        return found

    def result(self) -> BuildResult:
        """Return the canonical, path-ordered table and every diagnostic so far."""

        with self._lock:
            return BuildResult(
                table=RouteTable(self._routes.items()),
                diagnostics=tuple(self._diagnostics),
            )

    def _insert_locked(self, declaration: ActionDeclaration) -> list[Diagnostic]:
        found: list[Diagnostic] = []
        path = declaration.path
        if not path.startswith(self._module_name):
            found.append(
                Diagnostic(
                    severity=Severity.ERROR,
                    code=DiagnosticCode.PREFIX_MISMATCH,
                    message=(
                        f"path name of the action must begin with {self._module_name}/ "
                        f"(found {path!r} on {declaration.implementing_type})"
                    ),
                    source_ref=declaration.source_ref,
                ),
            )
        previous = self._routes.get(path)
        if previous is not None:
            found.append(
                Diagnostic(
                    severity=Severity.ERROR,
                    code=DiagnosticCode.DUPLICATE_PATH,
                    message=(
                        f"path {path!r} already exists (mapped to {previous}); "
                        f"{declaration.implementing_type} replaces it"
                    ),
                    source_ref=declaration.source_ref,
                ),
            )
        self._routes[path] = declaration.implementing_type
        self._diagnostics.extend(found)
        LOGGER.debug("route path=%s type=%s findings=%d", path, declaration.implementing_type, len(found))
        return found


def build_route_table(
    declarations: Iterable[ActionDeclaration],
    module_name: ModuleName,
) -> BuildResult:
    """Return the route table and diagnostics for ``declarations``.

    Args:
        declarations: Declarations in processing order.
        module_name: Sanitised module name every path must start with.

    Returns:
        BuildResult: Path-ordered table plus the diagnostics in processing order.
    """

    accumulator = RouteTableAccumulator(module_name)
    accumulator.merge(declarations)
    return accumulator.result()


__all__ = ["RouteTableAccumulator", "build_route_table"]
