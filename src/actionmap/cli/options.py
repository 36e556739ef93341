# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer parameter declarations and their normalised option bundle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import ActionMapConfig, build_options, load_config, parse_option_pairs

PATHS_ARGUMENT = Annotated[
    list[Path] | None,
    typer.Argument(metavar="[PATHS]...", help="Files or directories to scan (default: configured paths)."),
]
ROOT_OPTION = Annotated[Path, typer.Option("--root", "-r", help="Project root.")]
MODULE_NAME_OPTION = Annotated[
    str | None,
    typer.Option("--module-name", "-m", help="Module name every action path must start with."),
]
PROCESSOR_OPTION = Annotated[
    list[str] | None,
    typer.Option("--option", "-A", metavar="KEY=VALUE", help="Processor option, e.g. -A moduleName=login."),
]
MARKER_OPTION = Annotated[
    str | None,
    typer.Option("--marker", help="Decorator name marking action classes."),
]
EXCLUDE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude", help="Glob of files or directories to skip (repeatable)."),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in output.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Show debug logging.")]


@dataclass(slots=True)
class RunCLIOptions:
    """Normalised CLI inputs shared by ``build`` and ``scan``."""

    root: Path
    config: ActionMapConfig
    options: dict[str, str]

    @property
    def output_dir(self) -> Path:
        """Return the output directory resolved against ``root``."""

        directory = self.config.output_dir
        return directory if directory.is_absolute() else self.root / directory


def build_run_options(
    *,
    root: Path,
    paths: list[Path] | None,
    module_name: str | None,
    option_pairs: list[str] | None,
    marker: str | None,
    exclude: list[str] | None,
    output_dir: Path | None = None,
    emit_on_error: bool | None = None,
    strict_duplicates: bool | None = None,
) -> RunCLIOptions:
    """Merge ``[tool.actionmap]`` settings with command line overrides.

    Relative ``paths`` stay relative; the scanner resolves them against
    ``root`` exactly like configured paths.

    Raises:
        ConfigurationError: If the configuration or an ``-A`` pair is invalid.
    """

    resolved_root = root.resolve()
    config = load_config(resolved_root).with_overrides(
        module_name=module_name,
        paths=tuple(paths) if paths else None,
        exclude=tuple(exclude) if exclude else None,
        marker=marker,
        output_dir=output_dir,
        emit_on_error=emit_on_error,
        strict_duplicates=strict_duplicates,
    )
    options = build_options(config, parse_option_pairs(option_pairs or ()))
    return RunCLIOptions(root=resolved_root, config=config, options=options)


__all__ = [
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "EXCLUDE_OPTION",
    "MARKER_OPTION",
    "MODULE_NAME_OPTION",
    "PATHS_ARGUMENT",
    "PROCESSOR_OPTION",
    "ROOT_OPTION",
    "RunCLIOptions",
    "build_run_options",
]
