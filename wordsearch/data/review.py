"""Editable word list reviewed before a puzzle is generated."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.constants import REQUIRED_WORDS, Difficulty, WordRange
from .normalization import clean_word


@dataclass
class WordReview:
    """Word list plus the difficulty it will be generated at."""

    words: List[str] = field(default_factory=list)
    difficulty: Difficulty = Difficulty.EASY

    def add_word(self, raw: str) -> bool:
        """Prepend ``raw`` after cleaning it; False when empty or already listed."""

        word = clean_word(raw.strip())
        if not word or word in self.words:
            return False
        self.words.insert(0, word)
        return True

    def remove_word(self, word: str) -> bool:
        if word not in self.words:
            return False
        self.words = [item for item in self.words if item != word]
        return True

    @property
    def word_range(self) -> WordRange:
        return REQUIRED_WORDS[self.difficulty]

    @property
    def is_ready(self) -> bool:
        return self.word_range.contains(len(self.words))

    @property
    def action_label(self) -> str:
        count = len(self.words)
        required = self.word_range
        if count < required.min:
            diff = required.min - count
            return f"Add {diff} more word{'s' if diff > 1 else ''}"
        if count > required.max:
            diff = count - required.max
            return f"Remove {diff} word{'s' if diff > 1 else ''}"
        return "Generate Puzzle"

    @property
    def status(self) -> str:
        return f"{len(self.words)} / {self.word_range.min}-{self.word_range.max} words"
