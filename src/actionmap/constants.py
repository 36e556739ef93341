# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants."""

from __future__ import annotations

from typing import Final

DEFAULT_MARKER: Final[str] = "action"
DEFAULT_OUTPUT_DIR: Final[str] = "generated"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION_KEY: Final[str] = "actionmap"

ARTIFACT_PREFIX: Final[str] = "ActionMap__Module__"

# Directories never holding importable action modules. Dot-directories
# (``.git``, ``.venv``, ``.tox``) are pruned by name prefix in addition.
PRUNED_DIR_NAMES: Final[frozenset[str]] = frozenset({"__pycache__"})
VENV_MARKER_FILE: Final[str] = "pyvenv.cfg"

__all__ = [
    "ARTIFACT_PREFIX",
    "DEFAULT_MARKER",
    "DEFAULT_OUTPUT_DIR",
    "PRUNED_DIR_NAMES",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "VENV_MARKER_FILE",
]
