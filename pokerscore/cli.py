"""
Command-line entry point for poker hand scoring.

Reads one hand per line from a file (or "-" for stdin) and prints the score,
an explanation, or a ranking table when several hands are given.
"""

import argparse
import logging
import sys
from pathlib import Path

from .engine.errors import PokerScoreError
from .presets import DEFAULT_PRESET, list_presets
from .scorer import HandScorer

logger = logging.getLogger(__name__)


def read_hands(source: str) -> list[str]:
    """Read hand lines, skipping blanks and # comments."""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines()
            if line.strip() and not line.strip().startswith("#")]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokerscore", description="Score five-card poker hands")
    parser.add_argument("file", help="File with one hand per line, or - for stdin")
    parser.add_argument("--explain", action="store_true", help="Print the category with the score")
    parser.add_argument("--preset", default=DEFAULT_PRESET, choices=list_presets(),
                        help="Base value table to score with")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log classification details")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = read_hands(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    if not lines:
        print(f"error: no hands found in {args.file}", file=sys.stderr)
        return 1

    scorer = HandScorer(args.preset)
    logger.debug("Scoring %d hand(s) with preset %s", len(lines), args.preset)
    try:
        if len(lines) == 1:
            if args.explain:
                print(scorer.explain(lines[0]))
            else:
                print(scorer.evaluate(lines[0]).score)
        else:
            print(scorer.rank_hands(lines).to_string(index=False))
    except PokerScoreError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
