"""Core datatypes shared across Binder modules.

Responsibilities:
- Represent the declared book structure loaded from the book file.
- Represent per-iteration derived records produced during assembly.

Key types:
- `FrontMatter`, `Chapter`, `Book`, `ResolvedChapter`, and `WordCountResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

from ..errors import SceneNotFoundError


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Author and contact metadata for the manuscript title page.

    Attributes mirror the front matter keys of the book file one-to-one.
    Missing keys load as empty strings.
    """

    title: str = ""
    short_title: str = ""
    author: str = ""
    author_lastname: str = ""
    contact_name: str = ""
    contact_address: str = ""
    contact_city_state_zip: str = ""
    contact_phone: str = ""
    contact_email: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return front matter keys in declaration order."""

        return tuple(item.name for item in fields(cls))


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter as declared in the book file.

    Attributes:
        scenes: Scene identifiers, i.e. file names without the `.md` extension.
        name: Explicit display name; empty when the chapter is auto-numbered.
        interlude: Whether the chapter is an unnumbered, unheaded interlude.
        subdir: Optional directory below the book base directory.
    """

    scenes: tuple[str, ...] = field(default_factory=tuple)
    name: str = ""
    interlude: bool = False
    subdir: str = ""

    def base_dir(self, book_base_dir: Path) -> Path:
        """Return the directory that holds this chapter's scene files."""

        if self.subdir:
            return book_base_dir / self.subdir
        return book_base_dir


@dataclass(frozen=True, slots=True)
class Book:
    """Declared book structure.

    Attributes:
        base_dir: Directory holding scene files, resolved against the book
            file location by the loader when that directory exists.
        chapters: Chapters in reading order.
    """

    base_dir: Path
    chapters: tuple[Chapter, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ResolvedChapter:
    """A chapter view with a computed heading and full scene paths.

    Attributes:
        heading: Chapter heading, empty for interludes.
        scenes: Scene file paths in reading order.
    """

    heading: str
    scenes: tuple[Path, ...] = field(default_factory=tuple)

    def validate(self) -> None:
        """Fail on the first scene path that does not exist.

        Raises:
            SceneNotFoundError: If a scene file is missing.
            OSError: If a scene path cannot be inspected for another reason.
        """

        for scene in self.scenes:
            try:
                scene.stat()
            except FileNotFoundError as exc:
                raise SceneNotFoundError(scene) from exc


@dataclass(frozen=True, slots=True)
class WordCountResult:
    """Word count for a single scene file."""

    scene: str
    count: int
