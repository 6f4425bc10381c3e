"""Chapter iteration for declared books.

Responsibilities:
- Resolve declared chapters into headings and scene file paths.
- Keep auto-numbering consistent across named chapters and interludes.

Key public functions:
- `iter_chapters`: lazy, restartable resolved-chapter iterator.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ..models.datatypes import Book, Chapter, ResolvedChapter
from ..text.headings import chapter_label, title_case

SCENE_SUFFIX = ".md"


def iter_chapters(book: Book) -> Iterator[ResolvedChapter]:
    """Yield one resolved chapter per declared chapter, in declaration order.

    Every call starts a fresh pass with the auto-number counter at 1. Chapters
    are resolved only when requested and nothing is cached, so a consumer may
    stop early without side effects.
    """

    number = 1
    for chapter in book.chapters:
        if chapter.name:
            heading = title_case(chapter.name)
        elif chapter.interlude:
            heading = ""
        else:
            heading = chapter_label(number)
            number += 1
        yield ResolvedChapter(heading=heading, scenes=_scene_paths(book, chapter))


def _scene_paths(book: Book, chapter: Chapter) -> tuple[Path, ...]:
    chapter_dir = chapter.base_dir(book.base_dir)
    return tuple(chapter_dir / f"{scene}{SCENE_SUFFIX}" for scene in chapter.scenes)
