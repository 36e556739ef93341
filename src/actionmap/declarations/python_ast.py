# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collect action declarations by parsing Python sources with :mod:`ast`."""

from __future__ import annotations

import ast
import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from fnmatch import fnmatch
from pathlib import Path
from typing import Final

from ..constants import PRUNED_DIR_NAMES, VENV_MARKER_FILE
from ..errors import DeclarationSourceError
from ..models import ActionDeclaration, SourceRef

LOGGER = logging.getLogger(__name__)

_PYTHON_SUFFIX: Final[str] = ".py"
_INIT_SENTINEL: Final[str] = "__init__"
_SRC_SEGMENT: Final[str] = "src"
_PATH_KEYWORD: Final[str] = "path"
_VISIT_METHOD_NAME: Final[str] = "visit"


def module_name_from_path(path: Path, root: Path) -> str:
    """Return the dotted module name for ``path`` relative to ``root``.

    Args:
        path: Python source file.
        root: Project root the module hierarchy starts from.

    Returns:
        str: Dotted module name. A leading ``src`` segment and a trailing
        ``__init__`` are dropped; files outside ``root`` fall back to their
        bare stem.
    """

    path = path.resolve()
    try:
        parts = path.relative_to(root.resolve()).with_suffix("").parts
    except ValueError:
        parts = (path.stem,)
    if len(parts) > 1 and parts[0] == _SRC_SEGMENT:
        parts = parts[1:]
    if parts and parts[-1] == _INIT_SENTINEL:
        parts = parts[:-1]
    return ".".join(parts) or root.resolve().name


def iter_python_files(root: Path, paths: Iterable[Path], *, exclude: Iterable[str] = ()) -> list[Path]:
    """Return sorted, de-duplicated Python files beneath ``paths``.

    Args:
        root: Project root used to resolve relative ``paths`` and exclusions.
        paths: Files or directories to scan.
        exclude: Glob patterns matched against root-relative POSIX paths.

    Returns:
        list[Path]: Resolved Python source files in lexicographic order.

    Raises:
        DeclarationSourceError: If a scan path does not exist or lies outside
            ``root``.
    """

    root = root.resolve()
    patterns = tuple(exclude)
    found: set[Path] = set()
    for raw in paths:
        candidate = (raw if raw.is_absolute() else root / raw).resolve()
        if not candidate.is_relative_to(root):
            raise DeclarationSourceError(
                f"scan path {candidate} is outside the project root {root}",
                path=candidate,
            )
        if candidate.is_file():
            if candidate.suffix == _PYTHON_SUFFIX and not _is_excluded(candidate, root, patterns):
                found.add(candidate)
        elif candidate.is_dir():
            found.update(_walk(candidate, root, patterns))
        else:
            raise DeclarationSourceError(f"scan path {candidate} does not exist", path=candidate)
    return sorted(found)


def _walk(directory: Path, root: Path, patterns: tuple[str, ...]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(directory):
        current = Path(dirpath)
        dirnames[:] = sorted(name for name in dirnames if not _pruned(current / name, root, patterns))
        for filename in filenames:
            file_path = current / filename
            if file_path.suffix == _PYTHON_SUFFIX and not _is_excluded(file_path, root, patterns):
                yield file_path


def _pruned(directory: Path, root: Path, patterns: tuple[str, ...]) -> bool:
    name = directory.name
    if name.startswith(".") or name in PRUNED_DIR_NAMES:
        return True
    if (directory / VENV_MARKER_FILE).is_file():
        LOGGER.debug("skipping virtual environment %s", directory)
        return True
    return _is_excluded(directory, root, patterns)


def _is_excluded(path: Path, root: Path, patterns: tuple[str, ...]) -> bool:
    if not patterns:
        return False
    try:
        relative = path.relative_to(root).as_posix()
    except ValueError:
        relative = path.as_posix()
    return any(fnmatch(relative, pattern) or fnmatch(path.name, pattern) for pattern in patterns)


def _dispatch_alias(name: str) -> str:
    """Return the CamelCase dispatch name used by ``ast.NodeVisitor``."""

    prefix, _, remainder = name.partition("_")
    if not remainder:
        return name
    camel = "".join(part.capitalize() for part in remainder.split("_"))
    return f"{prefix}_{camel}"


class _SnakeCaseVisitor(ast.NodeVisitor):
    """Mirror snake_case ``visit_*`` helpers onto ``NodeVisitor`` dispatch names."""

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        for attr, value in list(vars(cls).items()):
            if not callable(value) or not attr.startswith("visit_") or attr == _VISIT_METHOD_NAME:
                continue
            if any(ch.isupper() for ch in attr):
                continue
            alias = _dispatch_alias(attr)
            if not hasattr(cls, alias):
                setattr(cls, alias, value)


class _ActionVisitor(_SnakeCaseVisitor):
    """Record classes decorated with the action marker."""

    def __init__(self, *, module: str, display_path: str, marker: str) -> None:
        self._module = module
        self._display_path = display_path
        self._marker = marker
        self._scope: list[str] = []
        self.declarations: list[ActionDeclaration] = []

    def visit_class_def(self, node: ast.ClassDef) -> None:
        self._scope.append(node.name)
        qualified = ".".join(part for part in (self._module, *self._scope) if part)
        for decorator in node.decorator_list:
            path = self._declared_path(decorator, qualified)
            if path is None:
                continue
            self.declarations.append(
                ActionDeclaration(
                    path=path,
                    implementing_type=qualified,
                    source_ref=SourceRef(
                        file=self._display_path,
                        line=decorator.lineno,
                        column=decorator.col_offset + 1,
                        symbol=qualified,
                    ),
                ),
            )
        self.generic_visit(node)
        self._scope.pop()

    def visit_function_def(self, node: ast.FunctionDef) -> None:
        # Classes local to a function are not importable by name.
        _ = node

    def visit_async_function_def(self, node: ast.AsyncFunctionDef) -> None:
        _ = node

    def _declared_path(self, decorator: ast.expr, qualified: str) -> str | None:
        if not _matches_marker(decorator, self._marker):
            return None
        if not isinstance(decorator, ast.Call):
            LOGGER.debug("marker on %s has no path argument; ignoring", qualified)
            return None
        argument: ast.expr | None = decorator.args[0] if decorator.args else None
        for keyword in decorator.keywords:
            if keyword.arg == _PATH_KEYWORD:
                argument = keyword.value
        if isinstance(argument, ast.Constant) and isinstance(argument.value, str):
            return argument.value
        LOGGER.debug("marker on %s does not use a string literal path; ignoring", qualified)
        return None


def _matches_marker(decorator: ast.expr, marker: str) -> bool:
    target = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id == marker
    if isinstance(target, ast.Attribute):
        return target.attr == marker
    return False


class PythonDeclarationSource:
    """Scan Python files beneath a project root for marked action classes."""

    def __init__(
        self,
        root: Path,
        paths: Sequence[Path] | None = None,
        *,
        exclude: Sequence[str] = (),
    ) -> None:
        """Create a source scanning ``paths`` relative to ``root``.

        Args:
            root: Project root; module names are derived relative to it.
            paths: Files or directories to scan. Defaults to ``root``.
            exclude: Glob patterns for files or directories to skip.
        """

        self._root = root.resolve()
        self._paths = tuple(paths) if paths else (self._root,)
        self._exclude = tuple(exclude)

    @property
    def root(self) -> Path:
        """Return the resolved project root."""

        return self._root

    def files(self) -> list[Path]:
        """Return the Python files this source will parse."""

        return iter_python_files(self._root, self._paths, exclude=self._exclude)

    def collect(self, marker: str) -> Sequence[ActionDeclaration]:
        """Parse every file and return the declarations tagged with ``marker``.

        Raises:
            DeclarationSourceError: If a file cannot be read or parsed.
        """

        declarations: list[ActionDeclaration] = []
        for file_path in self.files():
            declarations.extend(self._collect_file(file_path, marker))
        LOGGER.debug("collected %d declaration(s) under %s", len(declarations), self._root)
        return tuple(declarations)

    def _collect_file(self, file_path: Path, marker: str) -> list[ActionDeclaration]:
        try:
            source = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DeclarationSourceError(f"cannot read {file_path}: {exc}", path=file_path) from exc
        try:
            tree = ast.parse(source, filename=str(file_path))
        except SyntaxError as exc:
            raise DeclarationSourceError(
                f"{file_path}:{exc.lineno}:{exc.offset} {exc.msg}",
                path=file_path,
            ) from exc
        visitor = _ActionVisitor(
            module=module_name_from_path(file_path, self._root),
            display_path=_display_path(file_path, self._root),
            marker=marker,
        )
        visitor.visit(tree)
        return visitor.declarations


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["PythonDeclarationSource", "iter_python_files", "module_name_from_path"]
