#!/usr/bin/env python3
"""
Pre-compute the Wordle feedback table.

Run once per word list:
    $ python precompute.py [--words FILE] [--cache DIR]

then hand the same DIR to `solver.py --cache`.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from utils import CACHE_DIR, build_table, save_cache
from words import DEFAULT_WORDS, CorpusError, load_words


def precompute(words_path: str | Path = DEFAULT_WORDS,
               cache_dir: str | Path = CACHE_DIR) -> Path:
    words = load_words(words_path)
    print(f"Loaded {len(words)} words.")

    # guesses and solutions come from the same list
    print("Building pattern matrix …")
    table = build_table(words, words)

    print("Saving …")
    out = save_cache(table, cache_dir)
    print(f"Done ✔  Table is in {out}")
    return out


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Pre-compute the feedback table")
    ap.add_argument("--words", type=Path, default=DEFAULT_WORDS, metavar="FILE",
                    help="word list, one 5-letter word per line")
    ap.add_argument("--cache", type=Path, default=CACHE_DIR, metavar="DIR",
                    help="where to write pattern.npy and meta.json")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        precompute(args.words, args.cache)
    except CorpusError as exc:
        sys.exit(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())
