"""Substring search and word splitting helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(find: str) -> None:
    if not find:
        raise ValueError("search string must not be empty")


def str_str(text: str, find: str, length: int) -> int:
    """Return the index of the first occurrence of ``find`` in ``text``.

    Returns -1 when ``find`` is longer than ``length`` or does not occur.
    """
    _check_needle(find)
    if len(find) > length:
        return -1
    return text.find(find)


def str_str_quoted(text: str, find: str, length: int) -> int:
    """Like :func:`str_str`, but ignore matches inside double-quoted spans."""
    _check_needle(find)
    if len(find) > length:
        return -1
    in_quote = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]