# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declaration source interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..models import ActionDeclaration


@runtime_checkable
class DeclarationSource(Protocol):
    """Enumerable source of action declarations for one run."""

    def collect(self, marker: str) -> Sequence[ActionDeclaration]:
        """Return every declaration tagged with ``marker``.

        The result must be fully materialised; ordering is not significant.
        """

        raise NotImplementedError


__all__ = ["DeclarationSource"]
