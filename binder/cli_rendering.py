"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
word count lines, and assembly summaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from .errors import BookParseError, PipelineStageError, SceneNotFoundError
from .models.datatypes import WordCountResult
from .text.wordcount import format_word_count


def _hint_for(exc: Exception) -> str | None:
    """Return a follow-up hint for well-known failure kinds."""

    if isinstance(exc, PipelineStageError):
        return exc.hint
    if isinstance(exc, SceneNotFoundError):
        return "Check the scene names, `subdir`, and `base_dir` in the book file."
    if isinstance(exc, BookParseError):
        return "Fix the book file YAML (front matter document, then `book:` document)."
    return None


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    hint = _hint_for(exc)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_word_count(result: WordCountResult) -> None:
    """Print one scene word count line."""

    typer.echo(format_word_count(result))


def echo_assembly_summary(chapter_files: list[Path], metadata_path: Path) -> None:
    """Print the number of chapter files written and the metadata location."""

    typer.echo(f"Chapters written: {len(chapter_files)}")
    typer.echo(f"Metadata: {metadata_path}")
