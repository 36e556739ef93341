# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the per-build module name from the flat option mapping."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Final

from .errors import ConfigurationError
from .models import ModuleName

LOGGER = logging.getLogger(__name__)

MODULE_NAME_KEY: Final[str] = "moduleName"

_INVALID_CHARS: Final[re.Pattern[str]] = re.compile(r"[^0-9A-Za-z_]+")

_CONFIGURE_HINT: Final[str] = (
    "Supply a module name, for example:\n"
    "  actionmap build --module-name login\n"
    "  actionmap build -A moduleName=login\n"
    "or in pyproject.toml:\n"
    "  [tool.actionmap]\n"
    '  module-name = "login"\n'
)


def sanitize_module_name(raw: str) -> str:
    """Return ``raw`` with every character outside ``[0-9A-Za-z_]`` removed.

    Args:
        raw: Module name as supplied by the build environment.

    Returns:
        str: Sanitised module name, possibly empty.
    """

    return _INVALID_CHARS.sub("", raw)


def resolve_module_name(options: Mapping[str, str] | None) -> ModuleName:
    """Return the sanitised module name configured in ``options``.

    Args:
        options: Flat option mapping supplied by the host build; may be ``None``.

    Returns:
        ModuleName: Module name restricted to ``[0-9A-Za-z_]+``.

    Raises:
        ConfigurationError: If the option is missing, blank, or sanitises to
            an empty string.
    """

    raw = options.get(MODULE_NAME_KEY) if options else None
    if raw is None or not raw.strip():
        raise ConfigurationError(f"No module name configured ('{MODULE_NAME_KEY}').\n{_CONFIGURE_HINT}")

    sanitized = sanitize_module_name(raw)
    if not sanitized:
        raise ConfigurationError(
            f"Module name {raw!r} contains no characters from [0-9A-Za-z_].\n{_CONFIGURE_HINT}",
        )
    LOGGER.debug("resolved module name raw=%r sanitized=%r", raw, sanitized)
    return ModuleName(sanitized)


__all__ = ["MODULE_NAME_KEY", "resolve_module_name", "sanitize_module_name"]
