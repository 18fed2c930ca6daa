"""Simple word extraction: runs of ASCII letters, lower-cased."""

from __future__ import annotations

import os
import re

_WORD = re.compile(r"[A-Za-z]+")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into lower-case words made of ASCII letters."""
    return [match.group().lower() for match in _WORD.finditer(text)]


def read_words(path: str | os.PathLike[str]) -> list[str]:
    """Read the file at ``path`` and return its words.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        return tokenize(handle.read())