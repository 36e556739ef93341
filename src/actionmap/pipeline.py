# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the resolve, collect, build and generate stages for one module."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .builder import build_route_table
from .constants import DEFAULT_MARKER
from .declarations import DeclarationSource
from .generator import render_route_module
from .models import BuildResult, DiagnosticCode, ModuleName, SourceArtifact
from .module_name import resolve_module_name
from .output import OutputSink
from .reporting import DiagnosticReporter

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Everything a single run produced."""

    module_name: ModuleName
    build: BuildResult
    artifact: SourceArtifact | None = None
    written_to: Path | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the run produced no blocking diagnostics."""

        return self.build.ok

    @property
    def emitted(self) -> bool:
        """Return ``True`` when an artifact was handed to the sink."""

        return self.artifact is not None


def run_pipeline(
    options: Mapping[str, str] | None,
    source: DeclarationSource,
    sink: OutputSink | None,
    *,
    reporter: DiagnosticReporter | None = None,
    marker: str = DEFAULT_MARKER,
    emit_on_error: bool = True,
    strict_duplicates: bool = False,
) -> PipelineResult:
    """Build and emit the route module for the configured module name.

    Args:
        options: Flat option mapping holding ``moduleName``.
        source: Declaration source enumerated once for this run.
        sink: Destination of the generated artifact; ``None`` renders without
            writing.
        reporter: Optional reporter receiving each diagnostic in order.
        marker: Decorator name identifying action classes.
        emit_on_error: When ``False`` the artifact is withheld if any blocking
            diagnostic was produced.
        strict_duplicates: When ``True`` a duplicate path withholds the
            artifact even if ``emit_on_error`` is set.

    Returns:
        PipelineResult: Module name, route table, diagnostics and artifact.

    Raises:
        ConfigurationError: If the module name is missing or blank.
        DeclarationSourceError: If the source cannot enumerate declarations.
        GenerationIOError: If the sink fails to write the artifact.
    """

    module_name = resolve_module_name(options)
    declarations = source.collect(marker)
    build = build_route_table(declarations, module_name)
    if reporter is not None:
        for diagnostic in build.diagnostics:
            reporter.report(diagnostic)

    if not _should_emit(build, emit_on_error=emit_on_error, strict_duplicates=strict_duplicates):
        LOGGER.debug("withholding artifact for %s: %d diagnostic(s)", module_name, len(build.diagnostics))
        return PipelineResult(module_name=module_name, build=build)

    artifact = render_route_module(build.table, module_name)
    written_to = sink.write(artifact) if sink is not None else None
    return PipelineResult(module_name=module_name, build=build, artifact=artifact, written_to=written_to)


def _should_emit(build: BuildResult, *, emit_on_error: bool, strict_duplicates: bool) -> bool:
    if strict_duplicates and any(diag.code is DiagnosticCode.DUPLICATE_PATH for diag in build.diagnostics):
        return False
    return emit_on_error or build.ok


__all__ = ["PipelineResult", "run_pipeline"]
