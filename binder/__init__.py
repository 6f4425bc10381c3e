"""Top-level package for Binder.

Binder assembles a manuscript of scene files, organized into chapters by a
YAML book file, into per-chapter Markdown files plus a `metadata.yaml` block
for document generation. The main entry point is `assemble_markdown`.
"""

from .config import AssemblyConfig
from .io.book_loader import load_book
from .pipeline import ManuscriptAssembler, assemble_markdown, iter_chapters

__all__ = [
    "AssemblyConfig",
    "ManuscriptAssembler",
    "__version__",
    "assemble_markdown",
    "iter_chapters",
    "load_book",
]

__version__ = "0.1.0"
