"""Chapter output filename helpers.

Responsibilities:
- Turn chapter headings into lowercase hyphenated slugs.
- Build sequence-prefixed chapter filenames for the output directory.
"""

from __future__ import annotations

INTERLUDE_SLUG = "interlude"
CHAPTER_FILE_SUFFIX = ".md"


def heading_slug(heading: str) -> str:
    """Return the filename slug for a chapter heading.

    The slug is the heading lower-cased with spaces replaced by hyphens. An
    empty heading (interlude) maps to `interlude`.
    """

    if not heading:
        return INTERLUDE_SLUG
    return heading.replace(" ", "-").lower()


def chapter_filename(sequence: int, heading: str) -> str:
    """Return the output filename for the `sequence`-th chapter (1-based)."""

    return f"{sequence:03d}-{heading_slug(heading)}{CHAPTER_FILE_SUFFIX}"
