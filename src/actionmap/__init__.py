# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build-time route table generation for ``@action`` classes."""

from __future__ import annotations

from .api import RouterAction, RouterModule, action, action_path
from .builder import RouteTableAccumulator, build_route_table
from .declarations import DeclarationSource, PythonDeclarationSource, StaticDeclarationSource
from .errors import ActionMapError, ConfigurationError, DeclarationSourceError, GenerationIOError
from .generator import artifact_filename, artifact_identifier, render_route_module
from .models import (
    ActionDeclaration,
    BuildResult,
    Diagnostic,
    DiagnosticCode,
    ModuleName,
    RouteTable,
    SourceArtifact,
    SourceRef,
)
from .module_name import MODULE_NAME_KEY, resolve_module_name, sanitize_module_name
from .output import FileSystemSink, MemorySink, OutputSink
from .pipeline import PipelineResult, run_pipeline
from .severity import Severity

__all__ = [
    "MODULE_NAME_KEY",
    "ActionDeclaration",
    "ActionMapError",
    "BuildResult",
    "ConfigurationError",
    "DeclarationSource",
    "DeclarationSourceError",
    "Diagnostic",
    "DiagnosticCode",
    "FileSystemSink",
    "GenerationIOError",
    "MemorySink",
    "ModuleName",
    "OutputSink",
    "PipelineResult",
    "PythonDeclarationSource",
    "RouteTable",
    "RouteTableAccumulator",
    "RouterAction",
    "RouterModule",
    "Severity",
    "SourceArtifact",
    "SourceRef",
    "StaticDeclarationSource",
    "action",
    "action_path",
    "artifact_filename",
    "artifact_identifier",
    "build_route_table",
    "render_route_module",
    "resolve_module_name",
    "run_pipeline",
    "sanitize_module_name",
]
