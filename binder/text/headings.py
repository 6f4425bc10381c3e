"""Chapter heading helpers.

Responsibilities:
- Title-case declared chapter names with English word-initial capitalization.
- Build auto-numbered chapter labels from spelled-out numbers.
"""

from __future__ import annotations

import re

from num2words import num2words

_WORD_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


def title_case(value: str) -> str:
    """Capitalize the first letter of every word and lower-case the rest.

    Apostrophes inside a word do not start a new word (`don't` -> `Don't`),
    while hyphens do (`twenty-one` -> `Twenty-One`).
    """

    return _WORD_PATTERN.sub(_capitalize_word, value)


def _capitalize_word(match: re.Match[str]) -> str:
    word = match.group(0)
    return word[:1].upper() + word[1:].lower()


def number_to_words(number: int) -> str:
    """Spell out a positive chapter number in English."""

    return num2words(number, lang="en")


def chapter_label(number: int) -> str:
    """Return the heading for the `number`-th auto-numbered chapter."""

    return f"Chapter {title_case(number_to_words(number))}"
