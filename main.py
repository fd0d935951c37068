"""CLI entrypoint for the photo word search generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from wordsearch.core.constants import Difficulty
from wordsearch.core.exceptions import ColorizerError, WordSourceError
from wordsearch.core.models import CellPosition
from wordsearch.data.review import WordReview
from wordsearch.data.words import GeminiWordSource, ImagePayload, UserWordListSource
from wordsearch.engine.generator import GeneratorConfig, PlacementStrategy, PuzzleGenerator
from wordsearch.engine.session import PuzzleSession
from wordsearch.io.image import colorize
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import format_grid, format_word_list, print_puzzle_stats


LOGGER = get_logger("wordsearch.cli")

PLAY_HELP = "Enter 'row col row col' to select, 'reveal', 'restart' or 'quit'."


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a word search puzzle from a photo or a word list",
    )
    parser.add_argument("--image", type=Path, help="Photo to derive words (and cell colors) from")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Explicit puzzle words")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="EASY: 10x10 without diagonals, MEDIUM: 15x15 with diagonals",
    )
    parser.add_argument("--size", type=int, help="Override the grid side length")
    diagonals = parser.add_mutually_exclusive_group()
    diagonals.add_argument(
        "--diagonals", dest="diagonals", action="store_true", default=None,
        help="Allow diagonal placements",
    )
    diagonals.add_argument(
        "--no-diagonals", dest="diagonals", action="store_false",
        help="Only horizontal and vertical placements",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in PlacementStrategy],
        default=PlacementStrategy.RANDOM.value,
        help="Placement strategy (random retries or CP-SAT solver)",
    )
    parser.add_argument("--attempts", type=int, default=100, help="Random attempts per word")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--colors", action="store_true", help="Include per-cell image colors in the JSON output"
    )
    parser.add_argument("--play", action="store_true", help="Play the puzzle in the terminal")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace, image: Optional[ImagePayload]) -> List[str]:
    raw: List[str] = []
    if args.words:
        raw.extend(args.words)
    if args.words_file:
        raw.extend(parse_words_file(args.words_file))
    if raw:
        return UserWordListSource(raw).generate(image)
    return GeminiWordSource().generate(image)


def play(session: PuzzleSession, stdin: TextIO, stdout: TextIO) -> None:
    """Line-driven play loop over ``stdin``."""

    puzzle = session.puzzle
    print(PLAY_HELP, file=stdout)
    print(format_grid(puzzle, session), file=stdout)
    print(format_word_list(puzzle, session), file=stdout)
    for line in stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command in {"quit", "exit", "q"}:
            break
        if command == "restart":
            session.restart()
        elif command == "reveal":
            session.toggle_reveal()
        else:
            parts = command.replace(",", " ").split()
            try:
                r1, c1, r2, c2 = (int(part) for part in parts)
            except ValueError:
                print(PLAY_HELP, file=stdout)
                continue
            outcome = session.select(CellPosition(r1, c1), CellPosition(r2, c2))
            if outcome.matched_word:
                print(f"Found {outcome.matched_word}!", file=stdout)
            else:
                print("No match.", file=stdout)
        print(format_grid(puzzle, session), file=stdout)
        print(format_word_list(puzzle, session), file=stdout)
        if session.is_completed:
            print("Congratulations! You've found all the words.", file=stdout)
            break


def main(
    argv: list[str] | None = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not (args.image or args.words or args.words_file):
        parser.error("provide --image or --words / --words-file")
    if args.colors and not args.image:
        parser.error("--colors requires --image")

    try:
        image = ImagePayload.from_path(args.image) if args.image else None
    except OSError as exc:
        LOGGER.error("%s", exc)
        print(f"Could not read image {args.image}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        words = collect_words(args, image)
    except WordSourceError as exc:
        LOGGER.error("%s", exc)
        print(
            "Failed to generate words from the image. "
            "Please try another photo or check your connection.",
            file=sys.stderr,
        )
        return 1

    review = WordReview(words=list(words), difficulty=Difficulty(args.difficulty))
    if not review.words:
        print(
            f"No usable words ({review.status}). {review.action_label} of 3 or more letters.",
            file=sys.stderr,
        )
        return 2
    if not review.is_ready:
        LOGGER.warning("Word list is %s (%s)", review.status, review.action_label)

    overrides: Dict[str, Any] = {
        "placement_attempts": args.attempts,
        "seed": args.seed,
        "strategy": PlacementStrategy(args.strategy),
    }
    if args.size is not None:
        overrides["size"] = args.size
    if args.diagonals is not None:
        overrides["allow_diagonals"] = args.diagonals
    config = GeneratorConfig.for_difficulty(review.difficulty, **overrides)

    result = PuzzleGenerator(config).generate(review.words)
    if result.puzzle is None:
        print(result.failure_message, file=sys.stderr)
        return 2

    payload: Dict[str, Any] = result.puzzle.to_jsonable()
    payload["unplacedWords"] = result.unplaced_words
    if args.colors and image is not None:
        try:
            payload["colors"] = [cell.to_jsonable() for cell in colorize(image.data, config.size)]
        except ColorizerError as exc:
            LOGGER.error("%s", exc)
            return 1

    if args.play:
        if result.unplaced_words:
            print(f"{len(result.unplaced_words)} word(s) could not be placed.", file=stdout)
        play(PuzzleSession(result.puzzle), stdin, stdout)
        return 0

    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print_puzzle_stats(result, stream=stdout)
    else:
        print(json.dumps(payload, indent=2), file=stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
