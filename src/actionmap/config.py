# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and the ``[tool.actionmap]`` pyproject loader."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_MARKER, DEFAULT_OUTPUT_DIR, PYPROJECT_FILENAME, PYPROJECT_SECTION_KEY
from .errors import ConfigurationError
from .module_name import MODULE_NAME_KEY

PYPROJECT_TOOL_KEY: Final[str] = "tool"
_OPTION_SEPARATOR: Final[str] = "="


class ActionMapConfig(BaseModel):
    """Settings for one actionmap run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    module_name: str | None = None
    paths: tuple[Path, ...] = Field(default_factory=lambda: (Path("."),))
    exclude: tuple[str, ...] = Field(default_factory=tuple)
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    marker: str = DEFAULT_MARKER
    emit_on_error: bool = True
    strict_duplicates: bool = False

    def with_overrides(self, **overrides: Any) -> ActionMapConfig:
        """Return a copy with every non-``None`` override applied."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return ActionMapConfig.model_validate({**self.model_dump(), **updates})


def load_config(root: Path) -> ActionMapConfig:
    """Load ``[tool.actionmap]`` from ``root/pyproject.toml``.

    Args:
        root: Project root containing ``pyproject.toml``.

    Returns:
        ActionMapConfig: Parsed settings, or defaults when no section exists.

    Raises:
        ConfigurationError: If the file is malformed or the section is invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return ActionMapConfig()
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"cannot read {pyproject}: {exc}") from exc

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return ActionMapConfig()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return ActionMapConfig()
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[tool.{PYPROJECT_SECTION_KEY}] in {pyproject} must be a table")
    try:
        return ActionMapConfig.model_validate(_normalise_keys(section))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [tool.{PYPROJECT_SECTION_KEY}] in {pyproject}:\n{exc}") from exc


def _normalise_keys(section: Mapping[str, Any]) -> dict[str, Any]:
    return {key.replace("-", "_"): value for key, value in section.items()}


def parse_option_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into an option mapping.

    Raises:
        ConfigurationError: If a pair has no ``=`` or an empty key.
    """

    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition(_OPTION_SEPARATOR)
        if not sep or not key.strip():
            raise ConfigurationError(f"invalid option {pair!r}; expected KEY=VALUE")
        options[key.strip()] = value
    return options


def build_options(config: ActionMapConfig, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the flat option mapping consumed by the module-name resolver.

    ``overrides`` (``-A KEY=VALUE`` on the command line) take precedence over
    values coming from ``config``.
    """

    options: dict[str, str] = {}
    if config.module_name is not None:
        options[MODULE_NAME_KEY] = config.module_name
    if overrides:
        options.update(overrides)
    return options


__all__ = ["ActionMapConfig", "build_options", "load_config", "parse_option_pairs"]
