"""Scene word counting utilities."""

from __future__ import annotations

from pathlib import Path

from ..models.datatypes import WordCountResult


def count_words(text: str) -> int:
    """Count whitespace-separated tokens; punctuation stays attached to words."""

    return len(text.split())


def scene_word_count(path: Path) -> int:
    """Count the words of one scene file.

    Raises:
        OSError: If the scene file cannot be read.
    """

    return count_words(path.read_bytes().decode("utf-8", errors="replace"))


def scene_word_count_result(path: Path) -> WordCountResult:
    """Count a scene and label the result with the scene file basename."""

    return WordCountResult(scene=path.name, count=scene_word_count(path))


def format_word_count(result: WordCountResult) -> str:
    """Format a word count result as a human-readable line."""

    return f"{result.scene}: {result.count} words"
