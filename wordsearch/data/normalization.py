"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List

from ..core.constants import MIN_WORD_LENGTH

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase A-Z representation of ``text``.

    Accented letters are folded to their base letter; everything outside
    A-Z is dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


def normalize_words(raw_words: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """Clean, length-filter and deduplicate words, keeping first-seen order."""

    seen = set()
    words: List[str] = []
    for raw in raw_words:
        word = clean_word(raw)
        if len(word) < min_length or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


__all__ = ["clean_word", "normalize_words"]
