"""CLI entry point for the word table generator."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from wordtable.alphabet import ALPHABETS, get_alphabet
from wordtable.config import TableConfig, load_config, validate_config
from wordtable.constants import DEFAULT_SURFACE_SIZE
from wordtable.display import print_grid, print_summary
from wordtable.errors import ConfigurationError, WordTableError
from wordtable.surface import ImageSurface
from wordtable.table import WordTable

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def parse_size(raw: str) -> tuple[int, int]:
    """Parse ``"300x300"`` into (300, 300)."""
    try:
        width, height = (int(part) for part in raw.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"size must look like WIDTHxHEIGHT, got {raw!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {raw!r}")
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word table generator: draw a board of frequency-biased letter tiles",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="JSON table config; flags below override it",
    )
    parser.add_argument("--rows", "-r", type=int, help="Number of rows (default: 4)")
    parser.add_argument("--columns", "-k", type=int, help="Number of columns (default: 4)")
    parser.add_argument(
        "--likelihood", "-p",
        type=float,
        help="Chance that a higher-frequency letter is picked (default: 0.3)",
    )
    parser.add_argument(
        "--alphabet", "-a",
        choices=sorted(ALPHABETS),
        help="Alphabet code (default: en-US); fa-IR has no frequency data and needs --likelihood 1",
    )
    parser.add_argument(
        "--size", "-s",
        type=parse_size,
        default=DEFAULT_SURFACE_SIZE,
        help="Image size as WIDTHxHEIGHT (default: 300x300)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="board.png",
        help="PNG file to write (default: board.png)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed a reproducible board instead of using secure randomness",
    )
    parser.add_argument(
        "--no-image",
        action="store_true",
        help="Only print the board; skip writing the PNG",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> TableConfig:
    config = TableConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError as e:
            raise ConfigurationError(f"config file not found: {e.filename}") from e
    config = config.with_overrides(
        rows=args.rows,
        columns=args.columns,
        frequent_word_likelihood=args.likelihood,
        alphabet=get_alphabet(args.alphabet) if args.alphabet else None,
    )
    validate_config(config)
    return config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        # 1. Configure
        config = build_config(args)
        random_source = random.Random(args.seed).random if args.seed is not None else None

        # 2. Fill
        table = WordTable(config, random_source)
        grid = table.fill_with_letters()
        print_grid(grid)
        print_summary(grid, config.alphabet.vowels())

        # 3. Draw
        if not args.no_image:
            width, height = args.size
            surface = ImageSurface(width, height)
            table.draw(surface, (width, height))
            surface.save(args.output)
            print(f"Board written to {args.output}")
    except (WordTableError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
