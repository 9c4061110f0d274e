#!/usr/bin/env python3
"""
Expected-remaining Wordle solver.

Run either in simulation mode
    $ python solver.py cigar

or interactive “enter colours yourself” mode
    $ python solver.py

Each turn the solver plays the guess that minimises the sum of squared
bucket sizes when the remaining candidates are grouped by the feedback they
would give, i.e. the expected number of candidates left after the guess.

Options
-------
--words FILE    word list, one 5-letter word per line
--cache DIR     pattern table written by precompute.py
--verbose       debug logging
"""

from __future__ import annotations
import argparse
import itertools
import logging
import sys
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from timeit import default_timer as timer
from typing import Callable, List, NamedTuple, Optional

import numpy as np

from feedback import N_PATTERNS, SOLVED, FeedbackParseError, Pattern, compute, parse
from utils import PatternTable, build_table, colourise, load_cache
from words import DEFAULT_WORDS, CorpusError, Word, WordLengthError, load_words

log = logging.getLogger(__name__)

MAX_ATTEMPTS = 5


class FeedbackUnavailable(RuntimeError):
    pass


class NoCandidatesError(RuntimeError):
    pass


# ---------------------------------------------------------------------------
# 1.  Partitioning and guess selection
# ---------------------------------------------------------------------------

def partition(guess: Word, pool) -> dict[Pattern, set[Word]]:
    """Group POOL by the feedback each word would give against GUESS."""
    buckets = defaultdict(set)
    for solution in pool:
        buckets[compute(guess, solution)].add(solution)
    return dict(buckets)


def _partition_scores(guesses, pool):
    for guess in guesses:
        yield sum(len(b) * len(b) for b in partition(guess, pool).values())


def _table_scores(guesses, pool, table: PatternTable):
    cand_indices = [table.sol_index[w] for w in pool]
    submatrix    = table.pattern[:, cand_indices]

    # Vectorised scoring
    for guess in guesses:
        counts = np.bincount(submatrix[table.guess_index[guess]],
                             minlength=N_PATTERNS)
        yield int((counts * counts).sum())      # Σ n²


def best_guess(guesses, pool, table: Optional[PatternTable] = None):
    """
    Return (guess, expected remaining candidates) for the best of GUESSES.

    The score of a guess is Σ |bucket|² over the partition of POOL, divided
    by the pool size. Ties go to the guess listed first.
    """
    if not guesses:
        raise ValueError("no guesses to choose from")
    pool = list(dict.fromkeys(pool))
    if not pool:
        raise ValueError("candidate pool is empty")

    # Shortcut: solved
    if len(pool) == 1:
        return pool[0], 1.0

    if table is not None and table.covers(guesses, pool):
        scores = _table_scores(guesses, pool, table)
    else:
        scores = _partition_scores(guesses, pool)

    best, best_score = None, None
    for guess, score in zip(guesses, scores):
        if best_score is None or score < best_score:
            best, best_score = guess, score
    return best, best_score / len(pool)


# ---------------------------------------------------------------------------
# 2.  Feedback oracles
# ---------------------------------------------------------------------------

class Oracle(ABC):
    """Source of feedback for a played guess."""

    @abstractmethod
    def answer(self, guess: Word) -> Pattern:
        ...


class KnownSolutionOracle(Oracle):
    def __init__(self, solution: Word):
        self.solution = solution

    def answer(self, guess: Word) -> Pattern:
        return compute(guess, self.solution)


class InteractiveOracle(Oracle):
    """Asks the person playing Wordle to type the colours it showed."""

    PROMPT = ("Enter the feedback for {guess}, one letter per position "
              "(G = green, Y = yellow, B = black/grey), e.g. GYBBG:")

    def __init__(self,
                 read_line: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.read_line    = read_line or input
        self.write        = write or print
        self.max_attempts = max_attempts

    def answer(self, guess: Word) -> Pattern:
        self.write(self.PROMPT.format(guess=guess))
        for attempt in range(1, self.max_attempts + 1):
            try:
                line = self.read_line("> ")
            except EOFError:
                raise FeedbackUnavailable(
                    "Input ended before feedback was entered.") from None
            try:
                return parse(line)
            except FeedbackParseError as exc:
                log.debug("attempt %d rejected: %r", attempt, line)
                left = self.max_attempts - attempt
                self.write(f"{exc} {left} attempt(s) left." if left else str(exc))
        raise FeedbackUnavailable(
            f"No valid feedback after {self.max_attempts} attempts.")


# ---------------------------------------------------------------------------
# 3.  Game loop
# ---------------------------------------------------------------------------

class Turn(NamedTuple):
    number:    int
    guess:     Word
    score:     float
    pattern:   Pattern
    remaining: int


class Game(NamedTuple):
    solution: Word
    history:  List[Pattern]


def print_turn(turn: Turn) -> None:
    print(f"\nTurn {turn.number}: guess {turn.guess} "
          f"(expected remaining solutions: {turn.score:.2f})")
    print(colourise(turn.guess, turn.pattern), turn.pattern)
    print(f"{turn.remaining} remaining solutions")


def solve(oracle: Oracle, guesses, solutions,
          table: Optional[PatternTable] = None,
          report: Callable[[Turn], None] = print_turn) -> Game:
    """
    Play until the oracle answers with the solved pattern.

    Raises NoCandidatesError when an answer matches none of the remaining
    candidates.
    """
    pool = list(dict.fromkeys(solutions))
    history = []

    for number in itertools.count(1):
        start = timer()
        guess, score = best_guess(guesses, pool, table)
        log.debug("turn %d: %d candidates, picked %s in %.3fs",
                  number, len(pool), guess, timer() - start)

        pattern = oracle.answer(guess)
        history.append(pattern)
        if pattern == SOLVED:
            report(Turn(number, guess, score, pattern, 1))
            return Game(guess, history)

        bucket = partition(guess, pool).get(pattern)
        if bucket is None:
            report(Turn(number, guess, score, pattern, 0))
            raise NoCandidatesError(
                "No solutions satisfy the feedback you entered.")
        pool = [w for w in pool if w in bucket]
        report(Turn(number, guess, score, pattern, len(pool)))


# ---------------------------------------------------------------------------
# 4.  Command line
# ---------------------------------------------------------------------------

def _word_arg(text: str) -> Word:
    try:
        return Word(text)
    except WordLengthError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _pattern_table(words, cache_dir: Optional[Path]) -> PatternTable:
    if cache_dir is not None:
        try:
            table = load_cache(cache_dir)
        except FileNotFoundError:
            log.warning("no pattern cache in %s, building table", cache_dir)
        except (ValueError, KeyError, TypeError) as exc:
            log.warning("unusable pattern cache in %s (%s), building table",
                        cache_dir, exc)
        else:
            if table.covers(words, words):
                G, S = table.shape
                print(f"Cache loaded  (guesses {G}  |  solutions {S})")
                return table
            log.warning("pattern cache in %s is for another word list, "
                        "building table", cache_dir)
    return build_table(words, words)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Expected-remaining Wordle solver")
    ap.add_argument("secret", nargs="?", type=_word_arg, metavar="WORD",
                    help="play automatically vs WORD (omit to enter colours); "
                         "put a WORD starting with '-' after '--'")
    ap.add_argument("--words", type=Path, default=DEFAULT_WORDS, metavar="FILE",
                    help="word list, one 5-letter word per line")
    ap.add_argument("--cache", type=Path, metavar="DIR",
                    help="use the pattern table written by precompute.py")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        words = load_words(args.words)
        print(f"Word list loaded  ({len(words)} words)")

        if args.secret is not None:
            if args.secret not in set(words):
                sys.exit("Secret word must be in the word list.")
            print(f"\nSimulating game play for solution '{args.secret}'")
            oracle = KnownSolutionOracle(args.secret)
        else:
            oracle = InteractiveOracle()

        table = _pattern_table(words, args.cache)
        game = solve(oracle, words, words, table)
    except (CorpusError, FeedbackUnavailable, NoCandidatesError) as exc:
        sys.exit(str(exc))

    print(f"\nSolution: {game.solution}")
    for pattern in game.history:
        print(pattern)
    return 0


if __name__ == "__main__":
    sys.exit(main())
