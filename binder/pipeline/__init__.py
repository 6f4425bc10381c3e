"""Binder assembly pipeline package.

This package contains chapter iteration and the orchestration that turns a
declared book into per-chapter Markdown files.
"""

from .assembler import ManuscriptAssembler, assemble_markdown, write_markdown_scenes
from .chapters import iter_chapters

__all__ = [
    "ManuscriptAssembler",
    "assemble_markdown",
    "iter_chapters",
    "write_markdown_scenes",
]
