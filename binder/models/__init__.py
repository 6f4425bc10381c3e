"""Shared typed data models for Binder.

This package contains the dataclasses exchanged between the loader, the
chapter iterator, and the assembler.
"""

from .datatypes import (
    Book,
    Chapter,
    FrontMatter,
    ResolvedChapter,
    WordCountResult,
)

__all__ = [
    "Book",
    "Chapter",
    "FrontMatter",
    "ResolvedChapter",
    "WordCountResult",
]
