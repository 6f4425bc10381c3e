"""Manuscript assembly into per-chapter Markdown files.

Responsibilities:
- Define the stage order for one assembly run.
- Write one Markdown file per chapter plus the metadata block.
- Report per-scene word counts through an optional callback.

Key types:
- `ManuscriptAssembler`: orchestration facade.
- `assemble_markdown`: functional entry point returning front matter and counts.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import BinaryIO, TypeVar

from ..config import AssemblyConfig
from ..io.book_loader import load_book
from ..io.metadata import write_metadata
from ..io.storage import ManuscriptStore
from ..models.datatypes import Book, FrontMatter, ResolvedChapter, WordCountResult
from ..telemetry.logger import RunLogger
from ..text.wordcount import scene_word_count_result
from .chapters import iter_chapters

SCENE_BREAK = b"\n\n***\n\n"

_StageResult = TypeVar("_StageResult")

WordCountCallback = Callable[[WordCountResult], None]


class ManuscriptAssembler:
    """Coordinate all stages for a single assembly run."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        word_count_callback: WordCountCallback | None = None,
    ) -> None:
        """Initialize optional runtime logging and word count reporting hooks."""

        self._run_logger = run_logger
        self._word_count_callback = word_count_callback

    def assemble(self, config: AssemblyConfig) -> tuple[FrontMatter, list[WordCountResult]]:
        """Assemble the book described by `config.input_file` into `config.output_dir`.

        The output directory is cleared first. The first error aborts the run;
        chapter files written before it stay on disk.

        Returns:
            The loaded front matter and the per-scene word counts (empty unless
            `config.word_count` is set).
        """

        store = self._run_stage("prepare", lambda: self._prepare_output(config))
        front_matter, book = self._run_stage("load", lambda: load_book(config.input_file))
        counts = self._run_stage("assemble", lambda: self._write_chapters(book, store, config))
        self._run_stage("metadata", lambda: write_metadata(front_matter, store.root))
        return front_matter, counts

    def _prepare_output(self, config: AssemblyConfig) -> ManuscriptStore:
        """Validate config, then clear and recreate the output directory."""

        config.validate()
        store = ManuscriptStore(config.output_dir)
        store.reset()
        return store

    def _write_chapters(
        self, book: Book, store: ManuscriptStore, config: AssemblyConfig
    ) -> list[WordCountResult]:
        """Validate and write every chapter in reading order."""

        counts: list[WordCountResult] = []
        for sequence, chapter in enumerate(iter_chapters(book), start=1):
            chapter.validate()
            path = store.chapter_path(sequence, chapter.heading)
            with path.open("wb") as stream:
                if chapter.heading:
                    stream.write(f"# {chapter.heading}\n\n".encode("utf-8"))
                if config.word_count:
                    counts.extend(self._count_words(chapter))
                write_markdown_scenes(stream, chapter.scenes, config.scene_headings)
            if self._run_logger is not None:
                self._run_logger.log_chapter_written(sequence, path.name, len(chapter.scenes))
        return counts

    def _count_words(self, chapter: ResolvedChapter) -> list[WordCountResult]:
        results = []
        for scene in chapter.scenes:
            result = scene_word_count_result(scene)
            if self._word_count_callback is not None:
                self._word_count_callback(result)
            results.append(result)
        return results

    def _on_stage_start(self, stage_name: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit stage-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        self._on_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, exc)
            raise
        self._on_stage_complete(stage_name)
        return result


def assemble_markdown(
    config: AssemblyConfig,
    run_logger: RunLogger | None = None,
    word_count_callback: WordCountCallback | None = None,
) -> tuple[FrontMatter, list[WordCountResult]]:
    """Assemble a book into per-chapter Markdown files and `metadata.yaml`."""

    assembler = ManuscriptAssembler(
        run_logger=run_logger,
        word_count_callback=word_count_callback,
    )
    return assembler.assemble(config)


def write_markdown_scenes(
    stream: BinaryIO,
    scene_files: Sequence[Path],
    scene_headings: bool = False,
) -> None:
    """Write scene contents to `stream` with a scene break between scenes.

    Scene bytes are copied verbatim. With `scene_headings`, each scene is
    preceded by `## <scene name>`. The break never leads or trails.

    Raises:
        OSError: If a scene file cannot be read or the stream cannot be written.
    """

    for index, scene_file in enumerate(scene_files):
        scene_path = Path(scene_file)
        scene_text = scene_path.read_bytes()
        if index > 0:
            stream.write(SCENE_BREAK)
        if scene_headings:
            stream.write(f"## {scene_path.stem}\n\n".encode("utf-8"))
        stream.write(scene_text)
