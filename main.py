"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml

from wordsearch.core.constants import ALL_DIRECTIONS, CaseMode
from wordsearch.core.exceptions import WordsearchError
from wordsearch.data.dictionary import load_word_list
from wordsearch.engine.game import Wordsearch
from wordsearch.utils.logger import configure_logging, level_from_name
from wordsearch.utils.pretty import print_puzzle_stats


def load_config_file(path: Path) -> Dict[str, Any]:
    """Load a YAML (or JSON, which YAML accepts) puzzle configuration."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open(encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
    )
    parser.add_argument("--config", type=Path, help="YAML file with a (partial) puzzle configuration")
    parser.add_argument("--size", type=int, help="Board size in cells (6-50)")
    parser.add_argument("--amount", type=int, help="Number of hidden words (1-50)")
    parser.add_argument("--min-length", type=int, help="Minimum word length")
    parser.add_argument("--max-length", type=int, help="Maximum word length")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Dictionary entries to pick hidden words from",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one dictionary entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--case",
        type=str.upper,
        choices=[case.value for case in CaseMode],
        help="Letter case of the board",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Take dictionary entries in order instead of at random",
    )
    parser.add_argument(
        "--directions",
        nargs="+",
        type=str.upper,
        choices=[direction.value for direction in ALL_DIRECTIONS],
        metavar="DIRECTION",
        help="Allowed word directions, e.g. RIGHT DOWN DOWN_RIGHT",
    )
    parser.add_argument("--no-overlap", action="store_true", help="Forbid words from sharing cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--reveal", action="store_true", help="Mark every hidden word on the printed board")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Overlay command-line flags on the optional config file."""
    config: Dict[str, Any] = load_config_file(args.config) if args.config else {}
    words_config: Dict[str, Any] = {}

    dictionary: List[str] = []
    if args.words:
        dictionary.extend(args.words)
    if args.words_file:
        dictionary.extend(load_word_list(args.words_file))
    if dictionary:
        words_config["dictionary"] = dictionary

    for key, value in (
        ("amount", args.amount),
        ("min_length", args.min_length),
        ("max_length", args.max_length),
        ("case", args.case),
    ):
        if value is not None:
            words_config[key] = value
    if args.sequential:
        words_config["random"] = False

    if args.size is not None:
        config["size"] = args.size
    if args.directions:
        config["allowed_directions"] = args.directions
    if args.no_overlap:
        config["allow_word_overlap"] = False
    if words_config:
        existing = config.get("words_config") or config.get("wordsConfig") or {}
        config.pop("wordsConfig", None)
        config["words_config"] = {**existing, **words_config}
    return config


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    try:
        config = config_from_args(args)
    except WordsearchError as exc:
        parser.error(exc.message)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    puzzle = Wordsearch(seed=args.seed)
    try:
        output = puzzle.generate(config)
    except WordsearchError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    if args.reveal:
        for placed in output.words:
            puzzle.discover_word(placed.word)

    if args.output:
        args.output.write_text(json.dumps(output.to_jsonable(), ensure_ascii=False, indent=2), encoding="utf-8")
    print_puzzle_stats(output, reveal=args.reveal)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
