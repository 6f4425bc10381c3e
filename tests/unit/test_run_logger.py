"""Unit tests for structured phase logging."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from binder.config import AssemblyConfig
from binder.pipeline import ManuscriptAssembler
from binder.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Log lines should be deterministic and shell-safe."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink, level="DEBUG")

    run_logger.log_stage_start("load")
    run_logger.log_chapter_written(3, "003-the long night.md", 2)
    run_logger.log_stage_failure("assemble", "SceneNotFoundError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=load event=start",
        "[phase] level=DEBUG stage=assemble event=written "
        "path=003-the_long_night.md scenes=2 sequence=3",
        "[phase] level=ERROR stage=assemble event=failure error_type=SceneNotFoundError",
    ]


def test_assembler_logs_stage_sequence(files_dir: Path, tmp_path: Path) -> None:
    """Assembly should log start/complete events for every stage in order."""

    sink = io.StringIO()
    assembler = ManuscriptAssembler(run_logger=RunLogger(sink=sink))

    assembler.assemble(
        AssemblyConfig(input_file=files_dir / "valid_book.yaml", output_dir=tmp_path / "out")
    )

    events = [
        line.split(" ", 3)[2:4] for line in sink.getvalue().splitlines()
    ]
    assert events == [
        ["stage=prepare", "event=start"],
        ["stage=prepare", "event=complete"],
        ["stage=load", "event=start"],
        ["stage=load", "event=complete"],
        ["stage=assemble", "event=start"],
        ["stage=assemble", "event=complete"],
        ["stage=metadata", "event=start"],
        ["stage=metadata", "event=complete"],
    ]


def test_assembler_logs_failure_stage(files_dir: Path, tmp_path: Path) -> None:
    """A failing stage should be logged with its error type before re-raising."""

    sink = io.StringIO()
    assembler = ManuscriptAssembler(run_logger=RunLogger(sink=sink))

    with pytest.raises(FileNotFoundError):
        assembler.assemble(
            AssemblyConfig(input_file=files_dir / "missing.yaml", output_dir=tmp_path / "out")
        )

    assert sink.getvalue().splitlines()[-1] == (
        "[phase] level=ERROR stage=load event=failure error_type=FileNotFoundError"
    )


def test_run_logger_renders_blank_and_unsafe_context_as_single_tokens() -> None:
    """Blank values become `none` and separators never split a context pair."""

    sink = io.StringIO()
    RunLogger(sink=sink).log_stage_complete("load", book=" ", note="a b=c", dir="out/md:1")

    assert sink.getvalue().strip() == (
        "[phase] level=INFO stage=load event=complete book=none dir=out/md:1 note=a_b_c"
    )
