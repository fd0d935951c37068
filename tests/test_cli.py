import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main as cli
from wordsearch.core.exceptions import WordSourceError

WORDS = ["--words", "sun", "sea", "sand", "shell", "wave"]


class CliTests(unittest.TestCase):
    def run_cli(self, argv, stdin_text: str = ""):
        stdout = io.StringIO()
        code = cli.main(argv + ["--log-level", "ERROR"], stdin=io.StringIO(stdin_text), stdout=stdout)
        return code, stdout.getvalue()

    def test_prints_puzzle_json(self) -> None:
        code, output = self.run_cli(WORDS + ["--seed", "3"])
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(len(payload["grid"]), 10)
        self.assertTrue(set(payload["wordList"]) <= {"SUN", "SEA", "SAND", "SHELL", "WAVE"})
        self.assertEqual(len(payload["words"]), len(payload["wordList"]))

    def test_words_file_and_size_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words_file = Path(tmpdir) / "words.txt"
            words_file.write_text("# beach\nsun\n\nsea\n", encoding="utf-8")
            code, output = self.run_cli(
                ["--words-file", str(words_file), "--size", "6", "--seed", "1"]
            )
        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(len(payload["grid"]), 6)
        self.assertEqual(sorted(payload["wordList"]), ["SEA", "SUN"])

    def test_unplaceable_words_exit_with_error(self) -> None:
        code, _ = self.run_cli(["--words", "elephant", "--size", "4"])
        self.assertEqual(code, 2)

    def test_play_session_reaches_completion(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "puzzle.json"
            code, stats = self.run_cli(WORDS + ["--seed", "5", "--output", str(output)])
            self.assertEqual(code, 0)
            self.assertIn("--- Words ---", stats)
            payload = json.loads(output.read_text(encoding="utf-8"))

        moves = [
            f"{w['start']['row']} {w['start']['col']} {w['end']['row']} {w['end']['col']}"
            for w in payload["words"]
        ]
        stdin_text = "\n".join(["7 7 7 8", "nonsense"] + moves) + "\n"
        code, transcript = self.run_cli(WORDS + ["--seed", "5", "--play"], stdin_text)
        self.assertEqual(code, 0)
        self.assertIn("No match.", transcript)
        for word in payload["wordList"]:
            self.assertIn(f"Found {word}!", transcript)
        self.assertIn("Congratulations!", transcript)

    def test_word_source_failure_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            image = Path(tmpdir) / "photo.jpg"
            image.write_bytes(b"fake")
            with patch.object(cli, "GeminiWordSource") as source_cls:
                source_cls.return_value.generate.side_effect = WordSourceError("offline")
                code, _ = self.run_cli(["--image", str(image)])
        self.assertEqual(code, 1)

    def test_zero_size_exits_with_error(self) -> None:
        code, output = self.run_cli(["--words", "sun", "sea", "--size", "0"])
        self.assertEqual(code, 2)
        self.assertEqual(output, "")

    def test_no_usable_words_exit_with_error(self) -> None:
        stderr = io.StringIO()
        with patch("sys.stderr", stderr):
            code, output = self.run_cli(["--words", "ab", "x1"])
        self.assertEqual(code, 2)
        self.assertEqual(output, "")
        self.assertIn("Add 5 more words", stderr.getvalue())

    def test_missing_image_is_reported(self) -> None:
        stderr = io.StringIO()
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "nope.jpg"
            with patch("sys.stderr", stderr):
                code, output = self.run_cli(["--image", str(missing)])
        self.assertEqual(code, 1)
        self.assertEqual(output, "")
        self.assertIn("Could not read image", stderr.getvalue())

    def test_requires_some_word_input(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli([])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
