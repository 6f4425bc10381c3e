"""Book file loader.

Responsibilities:
- Read the two-document book file (front matter, then book structure).
- Validate document shapes against the book schema.
- Resolve the declared base directory against the book file location.

Key public functions:
- `load_book`: load `(FrontMatter, Book)` from a book file path.
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
import re
import stat
from typing import Any, Mapping

from loguru import logger
import yaml
from yaml.constructor import ConstructorError

from ..errors import BookParseError
from ..models.datatypes import Book, Chapter, FrontMatter
from ..parsing import parse_boolean_token

_NULL_TAG = "tag:yaml.org,2002:null"


class BookYamlLoader(yaml.BaseLoader):
    """YAML loader that keeps scalars as text, resolves nulls, and rejects duplicate keys."""

    def construct_yaml_null(self, node: yaml.Node) -> None:
        self.construct_scalar(node)
        return None

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if isinstance(node, yaml.MappingNode):
            seen: set[Hashable] = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


BookYamlLoader.add_implicit_resolver(
    _NULL_TAG, re.compile(r"^(?:~|null|Null|NULL|)$"), ["~", "n", "N", ""]
)
BookYamlLoader.add_constructor(_NULL_TAG, BookYamlLoader.construct_yaml_null)


def load_book(path: Path | str) -> tuple[FrontMatter, Book]:
    """Load front matter and book structure from a book file.

    Raises:
        FileNotFoundError: If the book file does not exist.
        OSError: If the book file or the base directory cannot be inspected.
        BookParseError: If the file is not valid YAML or does not match the schema.
    """

    return BookLoader.from_yaml(Path(path))


class BookLoader:
    """Factory methods for building the book model from a YAML book file."""

    _FRONT_MATTER_KEYS = frozenset(FrontMatter.field_names())
    _BOOK_FILE_KEYS = frozenset({"book"})
    _BOOK_KEYS = frozenset({"base_dir", "chapters"})
    _CHAPTER_KEYS = frozenset({"name", "interlude", "subdir", "scenes"})

    @staticmethod
    def from_yaml(path: Path) -> tuple[FrontMatter, Book]:
        """Load and resolve a book file."""

        with path.open("r", encoding="utf-8") as stream:
            documents = BookLoader._read_documents(stream, path)

        front_matter = BookLoader._build_front_matter(documents[0], path)
        book = BookLoader._build_book(documents[1], path)
        return front_matter, BookLoader._resolve_base_dir(book, path)

    @staticmethod
    def _read_documents(stream: Any, path: Path) -> tuple[object, object]:
        """Read the first two YAML documents with every non-null scalar kept as text."""

        documents: list[object] = []
        try:
            for document in yaml.load_all(stream, Loader=BookYamlLoader):
                documents.append(document)
                if len(documents) == 2:
                    break
        except yaml.YAMLError as exc:
            raise BookParseError(f"invalid YAML: {exc}", source=path) from exc

        if len(documents) < 2:
            raise BookParseError(
                "expected two YAML documents (front matter, then book); "
                f"found {len(documents)}.",
                source=path,
            )
        return documents[0], documents[1]

    @staticmethod
    def _build_front_matter(document: object, path: Path) -> FrontMatter:
        """Build front matter from the first document."""

        payload = BookLoader._mapping(document, "front matter", path, allow_empty=True)
        BookLoader._warn_unknown_keys(payload, BookLoader._FRONT_MATTER_KEYS, "front matter", path)
        values = {
            key: BookLoader._text(payload, key, "front matter", path)
            for key in BookLoader._FRONT_MATTER_KEYS
            if key in payload
        }
        return FrontMatter(**values)

    @staticmethod
    def _build_book(document: object, path: Path) -> Book:
        """Build the book structure from the second document."""

        wrapper = BookLoader._mapping(document, "book document", path, allow_empty=True)
        BookLoader._warn_unknown_keys(wrapper, BookLoader._BOOK_FILE_KEYS, "book document", path)
        if "book" not in wrapper:
            raise BookParseError("book document is missing required key `book`.", source=path)

        payload = BookLoader._mapping(wrapper["book"], "book", path, allow_empty=True)
        BookLoader._warn_unknown_keys(payload, BookLoader._BOOK_KEYS, "book", path)

        raw_chapters = BookLoader._sequence(payload, "chapters", "book", path)
        chapters = tuple(
            BookLoader._build_chapter(item, index, path)
            for index, item in enumerate(raw_chapters, start=1)
        )
        base_dir = BookLoader._text(payload, "base_dir", "book", path)
        return Book(base_dir=Path(base_dir), chapters=chapters)

    @staticmethod
    def _build_chapter(item: object, index: int, path: Path) -> Chapter:
        """Build one declared chapter from a `book.chapters` entry."""

        label = f"book.chapters[{index}]"
        payload = BookLoader._mapping(item, label, path)
        BookLoader._warn_unknown_keys(payload, BookLoader._CHAPTER_KEYS, label, path)

        if "scenes" not in payload:
            raise BookParseError(f"{label} is missing required key `scenes`.", source=path)
        scenes = []
        for scene in BookLoader._sequence(payload, "scenes", label, path):
            if not isinstance(scene, str):
                raise BookParseError(
                    f"`{label}.scenes` entries must be scene names.", source=path
                )
            scenes.append(scene)

        interlude = parse_boolean_token(payload.get("interlude"))
        if interlude is None:
            raise BookParseError(
                f"`{label}.interlude` must be a boolean value "
                "(`true`/`false`, `yes`/`no`, `1`/`0`).",
                source=path,
            )

        return Chapter(
            scenes=tuple(scenes),
            name=BookLoader._text(payload, "name", label, path),
            interlude=interlude,
            subdir=BookLoader._text(payload, "subdir", label, path),
        )

    @staticmethod
    def _resolve_base_dir(book: Book, path: Path) -> Book:
        """Prefer a base directory relative to the book file when it exists."""

        relative_dir = path.parent / book.base_dir
        try:
            info = relative_dir.stat()
        except FileNotFoundError:
            return book
        if not stat.S_ISDIR(info.st_mode):
            return book
        return Book(base_dir=relative_dir, chapters=book.chapters)

    @staticmethod
    def _mapping(
        value: object, label: str, path: Path, allow_empty: bool = False
    ) -> Mapping[Any, Any]:
        """Require a mapping value, treating an empty document as an empty mapping."""

        if allow_empty and value in (None, ""):
            return {}
        if not isinstance(value, Mapping):
            raise BookParseError(f"{label} must be a mapping/object.", source=path)
        return value

    @staticmethod
    def _sequence(payload: Mapping[Any, Any], key: str, label: str, path: Path) -> list[Any]:
        """Read an optional list field; null and blank values mean an empty list."""

        value = payload.get(key)
        if value in (None, ""):
            return []
        if not isinstance(value, list):
            raise BookParseError(f"`{label}.{key}` must be a list.", source=path)
        return value

    @staticmethod
    def _warn_unknown_keys(
        payload: Mapping[Any, Any], supported: frozenset[str], label: str, path: Path
    ) -> None:
        """Log keys that the schema does not define; they are otherwise ignored."""

        unknown = sorted(str(key) for key in payload if key not in supported)
        if unknown:
            logger.warning(
                "{}: ignoring unsupported key(s) in {}: {}", path, label, ", ".join(unknown)
            )

    @staticmethod
    def _text(payload: Mapping[Any, Any], key: str, label: str, path: Path) -> str:
        """Read an optional scalar field verbatim; null and missing values become empty."""

        value = payload.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise BookParseError(f"`{label}.{key}` must be a string.", source=path)
        return value
