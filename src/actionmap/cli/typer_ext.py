# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer app factory whose command help lists options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

import click
import typer
from typer.core import TyperCommand

_ARGUMENT: Final[str] = "argument"


class SortedHelpCommand(TyperCommand):
    """Command whose ``--help`` keeps arguments in order and sorts options by long name."""

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if param.param_type_name == _ARGUMENT:
                arguments.append(record)
            else:
                options.append((_sort_key(param), record))

        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            options.sort(key=lambda item: item[0])
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in options])


def _sort_key(param: click.Parameter) -> str:
    names = [*param.opts, *param.secondary_opts]
    long_names = [name for name in names if name.startswith("--")]
    return (long_names or names or [param.name or ""])[0].lstrip("-").lower()


def create_typer(**kwargs: Any) -> typer.Typer:
    """Return a Typer app rendering plain help so :class:`SortedHelpCommand` applies."""

    kwargs.setdefault("rich_markup_mode", None)
    return typer.Typer(**kwargs)


def add_command(app: typer.Typer, name: str, callback: Callable[..., Any]) -> None:
    """Register ``callback`` as command ``name`` with sorted option help."""

    app.command(name, cls=SortedHelpCommand)(callback)


__all__ = ["SortedHelpCommand", "add_command", "create_typer"]
