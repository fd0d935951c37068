"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for word search failures."""


class PlacementError(WordSearchError):
    """Raised when a word is written where it does not fit."""


class WordSourceError(WordSearchError):
    """Raised when candidate words cannot be derived from an image."""


class ColorizerError(WordSearchError):
    """Raised when an image cannot be reduced to per-cell colors."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""
