"""Shared pytest fixtures for the full Binder test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

_FILES_DIR = Path(__file__).resolve().parent / "files"


@pytest.fixture
def files_dir() -> Path:
    """Provide the static fixture directory with sample book files and scenes."""

    return _FILES_DIR


@pytest.fixture
def write_book(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a scratch book file and its scene files.

    The factory takes the book document body (the part after the front matter
    document) and a mapping of scene paths, relative to the book file, to
    their text. It returns the book file path.
    """

    def _write(
        book_document: str,
        scenes: dict[str, str] | None = None,
        front_matter: str = "title: Scratch Book\nauthor: Jane Doe\n",
    ) -> Path:
        book_dir = tmp_path / "project"
        book_dir.mkdir(exist_ok=True)
        for relative_path, text in (scenes or {}).items():
            scene_path = book_dir / relative_path
            scene_path.parent.mkdir(parents=True, exist_ok=True)
            scene_path.write_text(text, encoding="utf-8")
        book_path = book_dir / "book.yaml"
        book_path.write_text(f"---\n{front_matter}---\n{book_document}", encoding="utf-8")
        return book_path

    return _write
