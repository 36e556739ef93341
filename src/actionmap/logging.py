# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console helpers for actionmap's user-facing messages."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

_OK: Final[tuple[str, str]] = ("✅ ", "green")
_WARN: Final[tuple[str, str]] = ("⚠️ ", "yellow")
_FAIL: Final[tuple[str, str]] = ("❌ ", "bold red")
_INFO: Final[tuple[str, str]] = ("ℹ️ ", "cyan")


def make_console(*, stderr: bool = False) -> Console:
    """Return a console that prints text verbatim.

    Markup and ``:emoji:`` codes are disabled so route paths and class names
    are never reinterpreted. Colour follows Rich's terminal detection.
    """

    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(console: Console, msg: str, mark: tuple[str, str], *, use_emoji: bool) -> None:
    symbol, style = mark
    console.print(Text(f"{emoji(symbol, use_emoji)}{msg}", style=style))


def ok(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit a success message."""

    _print_line(console, msg, _OK, use_emoji=use_emoji)


def warn(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit a warning message."""

    _print_line(console, msg, _WARN, use_emoji=use_emoji)


def fail(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit an error message."""

    _print_line(console, msg, _FAIL, use_emoji=use_emoji)


def info(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit a neutral progress or summary message."""

    _print_line(console, msg, _INFO, use_emoji=use_emoji)


def section(console: Console, title: str) -> None:
    """Print ``title`` as a horizontal rule separating output blocks."""

    console.rule(Text(title, style="bold"))


__all__ = ["emoji", "fail", "info", "make_console", "ok", "section", "warn"]
