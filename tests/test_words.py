import asyncio
import base64
import os
import unittest
from unittest.mock import MagicMock, patch

from wordsearch.core.exceptions import WordSourceError
from wordsearch.data.normalization import clean_word, normalize_words
from wordsearch.data.words import (
    GeminiWordSource,
    ImagePayload,
    UserWordListSource,
    generate_async,
)
from wordsearch.io.gemini_client import GeminiAPIError, GeminiClient


IMAGE = ImagePayload(data=b"\x89PNG fake", mime_type="image/png")


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_non_letters_and_accents(self) -> None:
        self.assertEqual(clean_word("Café-au-lait"), "CAFEAULAIT")
        self.assertEqual(clean_word("sun 2"), "SUN")
        self.assertEqual(clean_word(""), "")

    def test_normalize_words_filters_short_and_duplicates(self) -> None:
        self.assertEqual(
            normalize_words(["sun", "Sun", "at", "sea!", "  tree "]), ["SUN", "SEA", "TREE"]
        )


class GeminiWordSourceTests(unittest.TestCase):
    def make_source(self, response: str) -> tuple:
        client = MagicMock()
        client.generate_from_image.return_value = response
        return GeminiWordSource(client=client), client

    def test_parses_and_normalizes_json_array(self) -> None:
        source, client = self.make_source('["Sunset", "sea", "ok", "beach ball", "SEA"]')
        self.assertEqual(source.generate(IMAGE), ["SUNSET", "SEA", "BEACHBALL"])
        prompt, data, mime_type, schema = client.generate_from_image.call_args.args
        self.assertIn("word search", prompt)
        self.assertEqual(data, IMAGE.data)
        self.assertEqual(mime_type, "image/png")
        self.assertEqual(schema, {"type": "ARRAY", "items": {"type": "STRING"}})

    def test_accepts_fenced_json(self) -> None:
        source, _ = self.make_source('```json\n["river", "stone"]\n```')
        self.assertEqual(source.generate(IMAGE), ["RIVER", "STONE"])

    def test_rejects_non_json(self) -> None:
        source, _ = self.make_source("Here are some words: sun, sea")
        with self.assertRaises(WordSourceError) as ctx:
            source.generate(IMAGE)
        self.assertIn("Could not understand", str(ctx.exception))

    def test_rejects_non_string_items(self) -> None:
        source, _ = self.make_source('["sun", 7]')
        with self.assertRaises(WordSourceError):
            source.generate(IMAGE)

    def test_rejects_object_payload(self) -> None:
        source, _ = self.make_source('{"words": ["sun"]}')
        with self.assertRaises(WordSourceError):
            source.generate(IMAGE)

    def test_api_failure_becomes_word_source_error(self) -> None:
        client = MagicMock()
        client.generate_from_image.side_effect = GeminiAPIError("quota")
        with self.assertRaises(WordSourceError) as ctx:
            GeminiWordSource(client=client).generate(IMAGE)
        self.assertIn("quota", str(ctx.exception))

    def test_missing_image_is_rejected(self) -> None:
        source, client = self.make_source("[]")
        with self.assertRaises(WordSourceError):
            source.generate(None)
        client.generate_from_image.assert_not_called()

    def test_async_wrapper_returns_words(self) -> None:
        source, _ = self.make_source('["lamp", "desk"]')
        self.assertEqual(asyncio.run(generate_async(source, IMAGE)), ["LAMP", "DESK"])


class UserWordListSourceTests(unittest.TestCase):
    def test_words_are_normalized(self) -> None:
        source = UserWordListSource(["zeus", "", "   ", "ares!", "ZEUS", "to"])
        self.assertEqual(source.generate(), ["ZEUS", "ARES"])

    def test_generate_ignores_image(self) -> None:
        self.assertEqual(UserWordListSource(["moon"]).generate(IMAGE), ["MOON"])


class GeminiClientTests(unittest.TestCase):
    def test_missing_api_key_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                GeminiClient()

    def test_generate_from_image_posts_inline_data(self) -> None:
        session = MagicMock()
        response = MagicMock()
        response.json.return_value = {
            "candidates": [{"content": {"parts": [{"text": '["sun"]'}]}}]
        }
        session.post.return_value = response
        with patch.dict(os.environ, {"GEMINI_API_KEY": "secret"}, clear=True):
            client = GeminiClient(session=session)
            text = client.generate_from_image(
                "describe", b"bytes", "image/png", {"type": "ARRAY"}
            )

        self.assertEqual(text, '["sun"]')
        args, kwargs = session.post.call_args
        self.assertTrue(args[0].endswith("/models/gemini-2.5-flash:generateContent"))
        self.assertEqual(kwargs["params"], {"key": "secret"})
        parts = kwargs["json"]["contents"][0]["parts"]
        self.assertEqual(parts[0], {"text": "describe"})
        self.assertEqual(
            parts[1]["inline_data"],
            {"mime_type": "image/png", "data": base64.b64encode(b"bytes").decode("ascii")},
        )
        self.assertEqual(
            kwargs["json"]["generationConfig"],
            {"responseMimeType": "application/json", "responseSchema": {"type": "ARRAY"}},
        )

    def test_model_can_be_overridden_from_environment(self) -> None:
        with patch.dict(
            os.environ, {"GEMINI_API_KEY": "k", "GEMINI_MODEL": "gemini-pro-vision"}, clear=True
        ):
            self.assertEqual(GeminiClient(session=MagicMock()).model_name, "gemini-pro-vision")

    def test_missing_candidates_raise_api_error(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {"candidates": []}
        with patch.dict(os.environ, {"GEMINI_API_KEY": "k"}, clear=True):
            client = GeminiClient(session=session)
            with self.assertRaises(GeminiAPIError):
                client.generate_from_image("p", b"x", "image/jpeg")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
