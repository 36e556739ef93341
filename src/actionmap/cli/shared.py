# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, exit codes)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler

from .. import logging as console_log

_PACKAGE_LOGGER = "actionmap"


class ExitCode(IntEnum):
    """Process exit statuses returned by actionmap commands."""

    OK = 0
    DIAGNOSTICS = 1
    FATAL = 2


@dataclass(slots=True)
class CLILogger:
    """Bind the console helpers to one console and the command's emoji setting."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Print a failure line."""

        console_log.fail(self.console, message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Print a warning line."""

        console_log.warn(self.console, message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Print a success line."""

        console_log.ok(self.console, message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Print a neutral summary line."""

        console_log.info(self.console, message, use_emoji=self.use_emoji)

    def section(self, title: str) -> None:
        """Print a titled rule."""

        console_log.section(self.console, title)


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and route package debug logging when requested.

    Debug records go to a separate stderr console so machine-readable stdout
    (``scan --json``) stays parseable.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging from the core modules should be shown.

    Returns:
        CLILogger: Logger instance bound to a stdout Rich console.
    """

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    if debug:
        package_logger.addHandler(RichHandler(console=console_log.make_console(stderr=True), show_path=False))
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.WARNING)
    return CLILogger(console=console_log.make_console(), use_emoji=emoji)


__all__ = ["CLILogger", "ExitCode", "build_cli_logger"]
