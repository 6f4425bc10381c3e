"""Text helpers for headings, filenames, and word counts."""

from .headings import chapter_label, number_to_words, title_case
from .slug import chapter_filename, heading_slug
from .wordcount import count_words, format_word_count, scene_word_count

__all__ = [
    "chapter_filename",
    "chapter_label",
    "count_words",
    "format_word_count",
    "heading_slug",
    "number_to_words",
    "scene_word_count",
    "title_case",
]
