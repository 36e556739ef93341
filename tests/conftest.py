# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from actionmap.models import ActionDeclaration, SourceRef


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing dedented Python source beneath ``tmp_path``."""

    def _write(relative: str, body: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(body), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def declare() -> Callable[..., ActionDeclaration]:
    """Return a factory for action declarations with a readable source ref."""

    def _declare(path: str, implementing_type: str, *, line: int = 1) -> ActionDeclaration:
        return ActionDeclaration(
            path=path,
            implementing_type=implementing_type,
            source_ref=SourceRef(file="app/actions.py", line=line, symbol=implementing_type),
        )

    return _declare
