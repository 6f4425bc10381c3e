"""Unit tests for assembly config validation and scalar parsing helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from binder.config import AssemblyConfig
from binder.parsing import normalize_optional_string, parse_boolean_token


def test_assembly_config_defaults_and_path_coercion() -> None:
    """Config should default optional flags off and accept string paths."""

    config = AssemblyConfig(input_file="book.yaml", output_dir="out")

    assert config.input_file == Path("book.yaml")
    assert config.output_dir == Path("out")
    assert config.word_count is False
    assert config.scene_headings is False


def test_assembly_config_validate_accepts_separate_output_dir(tmp_path: Path) -> None:
    """An output directory beside the book file should be valid."""

    AssemblyConfig(input_file=tmp_path / "book.yaml", output_dir=tmp_path / "out").validate()


@pytest.mark.parametrize("output_dir", ["", "."])
def test_assembly_config_validate_rejects_blank_output_dir(output_dir: str) -> None:
    """Blank output directories would clear the working directory and are rejected."""

    with pytest.raises(ValueError, match="non-empty path"):
        AssemblyConfig(input_file=Path("book.yaml"), output_dir=Path(output_dir)).validate()


def test_assembly_config_validate_rejects_output_dir_holding_book_file(tmp_path: Path) -> None:
    """Clearing a parent of the book file would delete the book file itself."""

    config = AssemblyConfig(input_file=tmp_path / "book" / "book.yaml", output_dir=tmp_path)

    with pytest.raises(ValueError, match="contains the book file"):
        config.validate()


def test_normalize_optional_string() -> None:
    """Blank values should normalize to `None`, others to stripped text."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string(" out ") == "out"
    assert normalize_optional_string(Path("out")) == "out"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        (True, True),
        (False, False),
        (None, False),
        ("", False),
        ("true", True),
        ("Yes", True),
        ("1", True),
        ("off", False),
        ("No", False),
        ("maybe", None),
    ],
)
def test_parse_boolean_token(token: object, expected: bool | None) -> None:
    """Boolean tokens should parse permissively and report unknown tokens as `None`."""

    assert parse_boolean_token(token) is expected
