"""Word source interfaces: turn a photo (or a typed list) into puzzle words."""

from __future__ import annotations

import asyncio
import json
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Protocol, Sequence

from ..core.exceptions import WordSourceError
from ..io.gemini_client import GeminiClient
from ..utils.logger import get_logger
from .normalization import normalize_words


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ImagePayload:
    """Raw image bytes plus their MIME type."""

    data: bytes
    mime_type: str = "image/jpeg"

    @classmethod
    def from_path(cls, path: Path | str) -> "ImagePayload":
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(data=path.read_bytes(), mime_type=mime_type or "application/octet-stream")


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def generate(self, image: Optional[ImagePayload]) -> List[str]:
        ...


async def generate_async(source: WordSource, image: Optional[ImagePayload]) -> List[str]:
    """Run a blocking word source without stalling the event loop."""

    return await asyncio.to_thread(source.generate, image)


class GeminiWordSource:
    """LLM-powered word source using the Gemini API."""

    PROMPT = (
        "Analyze this image and provide 15-25 relevant words that describe objects, "
        "colors, themes, emotions, and concepts in the image. The words should be "
        "suitable for a word search puzzle, so prefer single words between 3 and 10 "
        "letters long. Return the result as a JSON array of strings, like "
        '["word1", "word2", "word3"].'
    )

    RESPONSE_SCHEMA = {"type": "ARRAY", "items": {"type": "STRING"}}

    PARSE_ERROR = (
        "Could not understand the response from the AI. Please try a different image."
    )

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        self._client = client

    @property
    def client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def generate(self, image: Optional[ImagePayload]) -> List[str]:
        if image is None or not image.data:
            raise WordSourceError("An image is required to derive words")
        try:
            text = self.client.generate_from_image(
                self.PROMPT, image.data, image.mime_type, self.RESPONSE_SCHEMA
            )
        except RuntimeError as exc:  # missing API key or GeminiAPIError
            raise WordSourceError(f"Failed to generate words from the image: {exc}") from exc
        words = self._parse_response(text)
        LOGGER.info("Gemini suggested %d usable words", len(words))
        return words

    @classmethod
    def _parse_response(cls, text: str) -> List[str]:
        stripped = (text or "").strip()
        # Strip markdown code fences if present
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            inner = "\n".join(lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:])
            stripped = inner.strip()
        try:
            data: Any = json.loads(stripped)
        except json.JSONDecodeError as exc:
            LOGGER.warning("Failed to parse Gemini response: %s", text)
            raise WordSourceError(cls.PARSE_ERROR) from exc
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            LOGGER.warning("Gemini response is not a list of strings: %s", text)
            raise WordSourceError(cls.PARSE_ERROR)
        return normalize_words(data)


class UserWordListSource:
    """Returns a user-supplied list of words, normalized like any other source."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._words = normalize_words(item.strip() for item in raw_words if item.strip())

    def generate(self, image: Optional[ImagePayload] = None) -> List[str]:
        return list(self._words)
