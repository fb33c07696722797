# apps/cli/play.py
"""
Interactive Wordle helper.

This script:
  1) Validates the dictionary (prints counts + SHA, checks frequency order).
  2) Loads it into a candidate store of the requested kind.
  3) Runs the client loop: after each guess you type the status the game
     showed ('b' black, 'y' yellow, 'g' green) and get the remaining
     candidates back. With --auto the top-ranked candidate is played for you.

Usage:
    python -m apps.cli.play --width 5 --display_limit 10 --dictionary data/5_words_freq.txt
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from wordlenarrow.client import DEFAULT_DISPLAY_LIMIT, WordleClient
from wordlenarrow.datasets import load_dictionary, pretty_summary, validate_dictionary
from wordlenarrow.engine import Wordle
from wordlenarrow.words import DEFAULT_STORE, get_store_ids

DEFAULT_WORD_SIZE = 5
DEFAULT_DICTIONARY = "data/5_words_freq.txt"


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative; got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="A Wordle client!")
    ap.add_argument("-w", "--width", type=int, default=DEFAULT_WORD_SIZE, help="Width of each word in the game")
    ap.add_argument("-d", "--display_limit", type=_non_negative, default=DEFAULT_DISPLAY_LIMIT,
                    help="Number of suggestions for next word")
    ap.add_argument("-a", "--auto", action="store_true",
                    help="play the top-ranked candidate automatically; only ask for the status")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="dictionary file: one `word` or `word,count` per line")
    ap.add_argument("--store", default=DEFAULT_STORE, choices=get_store_ids(),
                    help="candidate store backing the solver")
    ap.add_argument("--seed", type=int, help="RNG seed for the displayed sample")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and summarize the dictionary
    rep = validate_dictionary(args.width, args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Dictionary not found: {args.dictionary}", file=sys.stderr)
        return 2

    # 2) Load entries and build the solver
    entries = load_dictionary(args.dictionary, args.width)
    wordle = Wordle.from_entries(args.width, entries, args.store)

    # 3) Play
    client = WordleClient(wordle, args.display_limit, auto=args.auto, rng=random.Random(args.seed))
    try:
        found = client.run()
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        return 1
    return 0 if found else 1


if __name__ == "__main__":
    sys.exit(main())
