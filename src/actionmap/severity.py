# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to validation diagnostics."""

    ERROR = "error"
    WARNING = "warning"


_SEVERITY_RANK: Final[dict[Severity, int]] = {
    Severity.ERROR: 1,
    Severity.WARNING: 0,
}


def is_blocking(severity: Severity) -> bool:
    """Return ``True`` when ``severity`` marks the run as failed."""

    return _SEVERITY_RANK[severity] >= _SEVERITY_RANK[Severity.ERROR]


__all__ = ["Severity", "is_blocking"]
