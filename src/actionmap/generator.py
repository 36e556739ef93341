# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render a route table into a Python lookup module."""

from __future__ import annotations

from typing import Final

from .constants import ARTIFACT_PREFIX
from .models import ModuleName, RouteTable, SourceArtifact

_INDENT: Final[str] = "    "
_INTERFACE_MODULE: Final[str] = "actionmap.api"
_INTERFACE_NAME: Final[str] = "RouterModule"


def artifact_identifier(module_name: ModuleName) -> str:
    """Return the class name of the generated module for ``module_name``."""

    return f"{ARTIFACT_PREFIX}{module_name}"


def artifact_filename(module_name: ModuleName) -> str:
    """Return the file name the generated module is written to."""

    return f"{ARTIFACT_PREFIX.lower()}{module_name}.py"


def render_route_module(table: RouteTable, module_name: ModuleName) -> SourceArtifact:
    """Render ``table`` as a module defining one :class:`RouterModule` subclass.

    Entries are emitted in the table's canonical path order and every literal
    goes through :func:`repr`, so identical tables render byte-identical text.

    Args:
        table: Route table to embed.
        module_name: Sanitised module name the artifact is named after.

    Returns:
        SourceArtifact: Identifier, file name and source text of the module.
    """

    identifier = artifact_identifier(module_name)
    lines: list[str] = [
        f"# Generated by actionmap for module {module_name!r}. Do not edit.",
        f'"""Action route lookup for the ``{module_name}`` module."""',
        "",
        "from __future__ import annotations",
        "",
        f"from {_INTERFACE_MODULE} import {_INTERFACE_NAME}",
        "",
        "",
        f"class {identifier}({_INTERFACE_NAME}):",
        f'{_INDENT}"""Resolve action paths declared in the ``{module_name}`` module."""',
        "",
        f"{_INDENT}def __init__(self) -> None:",
        *_render_mapping(table, indent=_INDENT * 2),
        "",
        f"{_INDENT}def find_action_class_name(self, path: str) -> str | None:",
        f"{_INDENT * 2}return self._actions.get(path)",
        "",
        "",
        f"__all__ = [{identifier!r}]",
    ]
    return SourceArtifact(
        identifier=identifier,
        filename=artifact_filename(module_name),
        text="\n".join(lines) + "\n",
    )


def _render_mapping(table: RouteTable, *, indent: str) -> list[str]:
    opening = f"{indent}self._actions: dict[str, str] = {{"
    if not table:
        return [f"{opening}}}"]
    body = [f"{indent}{_INDENT}{path!r}: {implementing_type!r}," for path, implementing_type in table.entries]
    return [opening, *body, f"{indent}}}"]


__all__ = ["artifact_filename", "artifact_identifier", "render_route_module"]
