# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``actionmap scan``: show the route table without writing anything."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ...declarations import PythonDeclarationSource
from ...errors import ActionMapError
from ...pipeline import PipelineResult, run_pipeline
from ...reporting import ConsoleReporter, DiagnosticReporter
from ..options import (
    DEBUG_OPTION,
    EMOJI_OPTION,
    EXCLUDE_OPTION,
    MARKER_OPTION,
    MODULE_NAME_OPTION,
    PATHS_ARGUMENT,
    PROCESSOR_OPTION,
    ROOT_OPTION,
    build_run_options,
)
from ..shared import CLILogger, ExitCode, build_cli_logger
from ..typer_ext import add_command

JSON_OPTION = Annotated[bool, typer.Option("--json", help="Emit the table and diagnostics as JSON.")]


def scan(
    paths: PATHS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    module_name: MODULE_NAME_OPTION = None,
    option_pairs: PROCESSOR_OPTION = None,
    marker: MARKER_OPTION = None,
    exclude: EXCLUDE_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the route table that ``build`` would generate."""

    logger = build_cli_logger(emoji=emoji and not as_json, debug=debug)
    reporter: DiagnosticReporter | None = None if as_json else ConsoleReporter(logger.fail, logger.warn)
    try:
        run_options = build_run_options(
            root=root,
            paths=paths,
            module_name=module_name,
            option_pairs=option_pairs,
            marker=marker,
            exclude=exclude,
        )
        config = run_options.config
        result = run_pipeline(
            run_options.options,
            PythonDeclarationSource(run_options.root, config.paths, exclude=config.exclude),
            None,
            reporter=reporter,
            marker=config.marker,
        )
    except ActionMapError as exc:
        if as_json:
            typer.echo(json.dumps({"error": str(exc)}, indent=2))
        else:
            logger.fail(str(exc))
        raise typer.Exit(code=ExitCode.FATAL) from exc

    if as_json:
        typer.echo(json.dumps(_as_payload(result), indent=2))
    else:
        _render_table(result, logger)
    raise typer.Exit(code=ExitCode.OK if result.ok else ExitCode.DIAGNOSTICS)


def _as_payload(result: PipelineResult) -> dict[str, object]:
    return {
        "module_name": result.module_name,
        "routes": dict(result.build.table.entries),
        "diagnostics": [diagnostic.model_dump(mode="json") for diagnostic in result.build.diagnostics],
    }


def _render_table(result: PipelineResult, logger: CLILogger) -> None:
    logger.section(f"Routes for module '{result.module_name}'")
    table = Table()
    table.add_column("Path", overflow="fold")
    table.add_column("Class", overflow="fold")
    for path, implementing_type in result.build.table.entries:
        table.add_row(path, implementing_type)
    logger.console.print(table)
    routes = len(result.build.table)
    if result.ok:
        logger.ok(f"{routes} route(s), no diagnostics")
    else:
        logger.info(f"{routes} route(s), {len(result.build.diagnostics)} diagnostic(s)")


def register(app: typer.Typer) -> None:
    """Register the ``scan`` command on ``app``."""

    add_command(app, "scan", scan)


__all__ = ["register", "scan"]
