"""Shared scalar helpers for book file and CLI value normalization."""

from __future__ import annotations


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when it is blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_boolean_token(value: object) -> bool | None:
    """Parse a YAML-style boolean token.

    Book files are read with every scalar kept as text, so flags such as
    `interlude: yes` arrive here as strings.

    Returns:
        The parsed flag, `False` for a blank value, or `None` when the token
        is not recognized.
    """

    if isinstance(value, bool):
        return value
    text = normalize_optional_string(value)
    if text is None:
        return False
    token = text.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None
