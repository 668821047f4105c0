"""Shared helpers for word and ring-text normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def _fold(char: str) -> str:
    decomposed = unicodedata.normalize("NFKD", char)
    return "".join(part for part in decomposed if not unicodedata.combining(part))


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Diacritics are folded to their base letter; anything that is not a
    letter afterwards is dropped.
    """

    if not text:
        return ""
    return WORD_RE.sub("", _fold(text).upper())


def fold_letters(text: str) -> str:
    """Upper-case ``text`` and fold diacritics, one character per character.

    Ring text maps characters to cells, so nothing is dropped or expanded:
    a character whose folded form is not a single character is kept as is.
    """

    folded = []
    for char in text:
        for candidate in (_fold(char).upper(), char.upper()):
            if len(candidate) == 1:
                folded.append(candidate)
                break
        else:
            folded.append(char)
    return "".join(folded)


__all__ = ["clean_word", "fold_letters"]
