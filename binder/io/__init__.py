"""Input/output components for Binder.

This package contains the book file loader, the output directory store, and
the metadata writer used by the assembler.
"""

from .book_loader import BookLoader, load_book
from .metadata import write_metadata
from .storage import ManuscriptStore

__all__ = ["BookLoader", "ManuscriptStore", "load_book", "write_metadata"]
