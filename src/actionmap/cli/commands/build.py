# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``actionmap build``: generate the route module for a project."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...declarations import PythonDeclarationSource
from ...errors import ActionMapError
from ...output import FileSystemSink
from ...pipeline import run_pipeline
from ...reporting import ConsoleReporter
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
from ..shared import ExitCode, build_cli_logger
from ..typer_ext import add_command

OUTPUT_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--output-dir", "-o", help="Directory receiving the generated module."),
]
NO_EMIT_ON_ERROR_OPTION = Annotated[
    bool,
    typer.Option("--no-emit-on-error", help="Withhold the module when validation errors were reported."),
]
STRICT_DUPLICATES_OPTION = Annotated[
    bool,
    typer.Option("--strict-duplicates", help="Withhold the module when two actions share a path."),
]


def build(
    paths: PATHS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    module_name: MODULE_NAME_OPTION = None,
    option_pairs: PROCESSOR_OPTION = None,
    marker: MARKER_OPTION = None,
    exclude: EXCLUDE_OPTION = None,
    output_dir: OUTPUT_DIR_OPTION = None,
    no_emit_on_error: NO_EMIT_ON_ERROR_OPTION = False,
    strict_duplicates: STRICT_DUPLICATES_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Scan for action classes and write the generated route module.

    Raises:
        typer.Exit: ``0`` when clean, ``1`` when diagnostics were reported,
            ``2`` when the run aborted.
    """

    logger = build_cli_logger(emoji=emoji, debug=debug)
    reporter = ConsoleReporter(logger.fail, logger.warn)
    try:
        run_options = build_run_options(
            root=root,
            paths=paths,
            module_name=module_name,
            option_pairs=option_pairs,
            marker=marker,
            exclude=exclude,
            output_dir=output_dir,
            emit_on_error=False if no_emit_on_error else None,
            strict_duplicates=True if strict_duplicates else None,
        )
        config = run_options.config
        result = run_pipeline(
            run_options.options,
            PythonDeclarationSource(run_options.root, config.paths, exclude=config.exclude),
            FileSystemSink(run_options.output_dir),
            reporter=reporter,
            marker=config.marker,
            emit_on_error=config.emit_on_error,
            strict_duplicates=config.strict_duplicates,
        )
    except ActionMapError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=ExitCode.FATAL) from exc

    routes = len(result.build.table)
    if result.written_to is not None:
        logger.ok(f"Wrote {routes} route(s) for module '{result.module_name}' to {result.written_to}")
    else:
        logger.warn(f"Route module for '{result.module_name}' withheld: {len(result.build.diagnostics)} diagnostic(s)")

    if not result.ok:
        logger.fail(f"{reporter.count} diagnostic(s) reported")
        raise typer.Exit(code=ExitCode.DIAGNOSTICS)
    raise typer.Exit(code=ExitCode.OK)


def register(app: typer.Typer) -> None:
    """Register the ``build`` command on ``app``."""

    add_command(app, "build", build)


__all__ = ["build", "register"]
