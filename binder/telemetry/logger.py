"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level logs for assembly runs.
- Keep log lines on a dedicated sink so stdout stays free for command output.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from loguru import logger

_UNSAFE_TOKEN_CHARS = re.compile(r"[^\w\-.:/]")


class RunLogger:
    """Emit deterministic phase logs for assembly activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) with plain formatting."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    @staticmethod
    def _token(value: object) -> str:
        """Render a context value as a single space-free token."""

        text = str(value).strip()
        return _UNSAFE_TOKEN_CHARS.sub("_", text) if text else "none"

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one `[phase]` line with context pairs sorted by key."""

        fields = [f"level={level}", f"stage={stage}", f"event={event}"]
        fields.extend(f"{key}={self._token(context[key])}" for key in sorted(context))
        logger.log(level, "[phase] " + " ".join(fields))

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without the error message payload."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_chapter_written(self, sequence: int, path: str, scenes: int) -> None:
        """Emit a per-chapter event once a chapter file is closed."""

        self._emit("DEBUG", "written", "assemble", sequence=sequence, path=path, scenes=scenes)
