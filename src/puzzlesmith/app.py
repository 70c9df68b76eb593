"""Command-line entry point: mine puzzles from PGN files into JSON lines."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from puzzlesmith.core.notation.pgn import parse_games
from puzzlesmith.puzzles.miner import MinerConfig, PuzzleMiner
from puzzlesmith.puzzles.models import Difficulty, TacticTag, filter_puzzles
from puzzlesmith.runtime_assets import load_sample_pgn

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlesmith",
        description="Generate tactical training puzzles from PGN games.",
    )
    parser.add_argument(
        "pgn_files",
        nargs="*",
        type=Path,
        help="PGN files to mine (default: the bundled sample games)",
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.ALL.value,
        help="Keep only puzzles in this rating bucket",
    )
    parser.add_argument(
        "--tag",
        choices=[t.value for t in TacticTag],
        help="Keep only puzzles carrying this tag",
    )
    parser.add_argument("--limit", type=int, help="Emit at most this many puzzles")
    parser.add_argument("--seed", type=int, help="Seed for the puzzle shuffle")
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Keep puzzles in discovery order",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Resolve moves with full legality (no self-check, safe castling)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Write JSON lines here instead of stdout"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_pgn(paths: Sequence[Path]) -> str:
    if not paths:
        _LOGGER.info("No PGN files given, using bundled sample games")
        return load_sample_pgn()
    return "\n".join(path.read_text(encoding="utf-8") for path in paths)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the miner and print one JSON object per puzzle."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        pgn_text = _read_pgn(args.pgn_files)
    except OSError as exc:
        _LOGGER.error("Cannot read PGN input: %s", exc)
        return 1

    config = MinerConfig(
        shuffle=not args.no_shuffle,
        seed=args.seed,
        strict_legality=args.strict,
    )
    games = parse_games(pgn_text)
    _LOGGER.info("Parsed %d games", len(games))
    puzzles = PuzzleMiner(config).mine(games)
    puzzles = filter_puzzles(
        puzzles,
        Difficulty(args.difficulty),
        TacticTag(args.tag) if args.tag else None,
    )
    if args.limit is not None:
        puzzles = puzzles[: max(args.limit, 0)]

    lines = [json.dumps(p.to_dict(), ensure_ascii=False) for p in puzzles]
    if args.output is not None:
        args.output.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    else:
        for line in lines:
            sys.stdout.write(f"{line}\n")
    _LOGGER.info("Wrote %d puzzles", len(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
