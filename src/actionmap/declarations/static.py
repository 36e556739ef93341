# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory declaration source."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import ActionDeclaration


class StaticDeclarationSource:
    """Serve a fixed set of declarations regardless of marker."""

    def __init__(self, declarations: Iterable[ActionDeclaration]) -> None:
        self._declarations = tuple(declarations)

    def collect(self, marker: str) -> Sequence[ActionDeclaration]:
        _ = marker
        return self._declarations


__all__ = ["StaticDeclarationSource"]
