# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output sinks receiving generated artifacts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import GenerationIOError
from .models import SourceArtifact

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Destination for the single artifact produced by a run."""

    def write(self, artifact: SourceArtifact) -> Path | None:
        """Persist ``artifact`` and return where it landed, when applicable."""

        raise NotImplementedError


class FileSystemSink:
    """Write artifacts as UTF-8 files inside a directory."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        """Return the directory artifacts are written into."""

        return self._directory

    def write(self, artifact: SourceArtifact) -> Path:
        """Write ``artifact`` to ``directory / artifact.filename``.

        Raises:
            GenerationIOError: If the directory or file cannot be written.
        """

        target = self._directory / artifact.filename
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            target.write_text(artifact.text, encoding="utf-8")
        except OSError as exc:
            raise GenerationIOError(f"failed to write {target}: {exc}", path=target) from exc
        LOGGER.debug("wrote %s (%d bytes)", target, len(artifact.text))
        return target


class MemorySink:
    """Keep artifacts in memory, keyed by file name."""

    def __init__(self) -> None:
        self.artifacts: dict[str, SourceArtifact] = {}

    def write(self, artifact: SourceArtifact) -> None:
        self.artifacts[artifact.filename] = artifact


__all__ = ["FileSystemSink", "MemorySink", "OutputSink"]
