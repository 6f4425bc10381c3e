"""Domain exceptions for book loading, assembly, and CLI diagnostics."""

from __future__ import annotations

import errno
import os
from pathlib import Path


class BookParseError(ValueError):
    """Raised when a book file is malformed or does not match the book schema."""

    def __init__(self, detail: str, *, source: Path | None = None) -> None:
        """Initialize a parse error optionally bound to its source file."""

        message = f"{source}: {detail}" if source is not None else detail
        super().__init__(message)
        self.detail = detail
        self.source = source


class SceneNotFoundError(FileNotFoundError):
    """Raised when a chapter references a scene file that does not exist."""

    def __init__(self, scene: Path) -> None:
        """Initialize a not-found error for one resolved scene path."""

        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), str(scene))
        self.scene = scene


class PipelineStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
