# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Sources of action declarations."""

from __future__ import annotations

from .base import DeclarationSource
from .python_ast import PythonDeclarationSource, iter_python_files, module_name_from_path
from .static import StaticDeclarationSource

__all__ = [
    "DeclarationSource",
    "PythonDeclarationSource",
    "StaticDeclarationSource",
    "iter_python_files",
    "module_name_from_path",
]
