"""CLI entrypoint for the honeycomb word search."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from honeycomb.core.exceptions import HoneycombError, ValidationError
from honeycomb.data.dictionary import DictionaryConfig, WordList
from honeycomb.data.normalization import fold_letters
from honeycomb.engine.grid import GridConfig, build_grid
from honeycomb.engine.search import WordSearcher
from honeycomb.engine.validator import GridValidator
from honeycomb.io.readers import read_honeycomb
from honeycomb.utils.logger import configure_logging, get_logger
from honeycomb.utils.pretty import pretty_print_grid, print_search_stats


LOGGER = get_logger("honeycomb.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the dictionary words spelled by paths through a honeycomb",
    )
    parser.add_argument("honeycomb", type=Path, help="Honeycomb file: ring count, then one line per ring")
    parser.add_argument("dictionary", type=Path, help="Dictionary file with one word per line")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Upper-case and fold accents in rings and words; drop non-letters from words",
    )
    parser.add_argument(
        "--skip-comments",
        action="store_true",
        help="Ignore dictionary lines starting with #",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the ring size check when building the honeycomb",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify adjacency integrity before searching",
    )
    parser.add_argument("--show-grid", action="store_true", help="Print the honeycomb to stderr")
    parser.add_argument("--stats", action="store_true", help="Print run statistics to stderr")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def run(args: argparse.Namespace) -> list[str]:
    rings = read_honeycomb(args.honeycomb)
    if args.normalize:
        rings = [fold_letters(ring) for ring in rings]
    grid = build_grid(rings, GridConfig(validate_geometry=not args.no_validate))

    if args.check:
        result = GridValidator().validate(grid)
        if not result.ok:
            raise ValidationError("; ".join(result.messages))
    if args.show_grid:
        pretty_print_grid(grid, label=f"Honeycomb {args.honeycomb}", stream=sys.stderr)

    words = WordList.from_config(
        DictionaryConfig(
            path=args.dictionary,
            normalize=args.normalize,
            skip_comments=args.skip_comments,
        )
    )
    searcher = WordSearcher(grid)
    found = searcher.find_all(words)

    if args.stats:
        print_search_stats(grid, words.words, found, searcher.stats, stream=sys.stderr)
    return found


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        found = run(args)
    except HoneycombError as exc:
        LOGGER.error("%s", exc)
        return 1

    for word in found:
        print(word)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
