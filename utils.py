#!/usr/bin/env python3
"""
Shared helpers: the feedback pattern table, its on-disk cache, and colour
output.
"""

from __future__ import annotations
import json
import logging
import numpy as np
from pathlib import Path

from feedback import Outcome, Pattern
from words import BASE_DIR, WORD_LENGTH, Word

log = logging.getLogger(__name__)

CACHE_DIR = BASE_DIR / "cache"

# 3⁰ … 3⁴ for little-endian base-3 pattern codes
_POWERS = 3 ** np.arange(WORD_LENGTH, dtype=np.int32)

_EXACT    = np.uint8(Outcome.EXACT.value)
_INCLUDED = np.uint8(Outcome.INCLUDED.value)
_EXCLUDED = np.uint8(Outcome.EXCLUDED.value)

# guess rows evaluated per block by build_table
CHUNK_ROWS = 512


# ---------------------------------------------------------------------------
# 1.  Pattern table
# ---------------------------------------------------------------------------

class PatternTable:
    """
    pattern   : np.ndarray  uint8 [G × S]   feedback codes
    guesses   : list[Word]                  length G
    solutions : list[Word]                  length S
    """

    def __init__(self, pattern, guesses, solutions):
        self.pattern   = pattern
        self.guesses   = [Word(w) for w in guesses]
        self.solutions = [Word(w) for w in solutions]
        # fast lookup maps
        self.guess_index = {w: i for i, w in enumerate(self.guesses)}
        self.sol_index   = {w: i for i, w in enumerate(self.solutions)}

    @property
    def shape(self):
        return self.pattern.shape

    def covers(self, guesses, solutions) -> bool:
        return (all(w in self.guess_index for w in guesses)
                and all(w in self.sol_index for w in solutions))

    def code(self, guess: str, solution: str) -> int:
        return int(self.pattern[self.guess_index[guess], self.sol_index[solution]])


def _letter_matrix(words) -> np.ndarray:
    return np.array([[ord(c) for c in w] for w in words],
                    dtype=np.int32).reshape(-1, WORD_LENGTH)


def build_table(guesses, solutions) -> PatternTable:
    """
    Evaluate feedback.compute for every (guess, solution) pair at once.
    """
    g = _letter_matrix(guesses)      # G × 5
    s = _letter_matrix(solutions)    # S × 5
    pattern = np.zeros((len(g), len(s)), dtype=np.uint8)

    # blocks of guess rows keep the temporaries at CHUNK_ROWS × S (× 5)
    for start in range(0, len(g), CHUNK_ROWS):
        block = pattern[start:start + CHUNK_ROWS]
        for i in range(WORD_LENGTH):
            letter   = g[start:start + CHUNK_ROWS, i:i + 1]          # B × 1
            exact    = letter == s[:, i]                             # B × S
            anywhere = (letter[:, :, None] == s[None, :, :]).any(axis=2)
            trit = np.where(exact, _EXACT, np.where(anywhere, _INCLUDED, _EXCLUDED))
            block += trit * np.uint8(_POWERS[i])
    log.debug("built pattern table %s", pattern.shape)
    return PatternTable(pattern, guesses, solutions)


# ---------------------------------------------------------------------------
# 2.  Cache (pattern matrix + word lists)
# ---------------------------------------------------------------------------

def save_cache(table: PatternTable, cache_dir: str | Path = CACHE_DIR) -> Path:
    cache_dir = Path(cache_dir)
    cache_dir.mkdir(parents=True, exist_ok=True)
    np.save(cache_dir / "pattern.npy", table.pattern, allow_pickle=False)

    meta = {
        "solutions": [str(w) for w in table.solutions],
        "guesses":   [str(w) for w in table.guesses],
        "dtype":     "uint8"
    }
    (cache_dir / "meta.json").write_text(json.dumps(meta, indent=2),
                                         encoding="utf-8")
    return cache_dir


def load_cache(cache_dir: str | Path = CACHE_DIR) -> PatternTable:
    cache_dir = Path(cache_dir)
    pattern = np.load(cache_dir / "pattern.npy", mmap_mode="r")
    meta    = json.loads((cache_dir / "meta.json").read_text(encoding="utf-8"))
    table   = PatternTable(pattern, meta["guesses"], meta["solutions"])

    expected = (len(table.guesses), len(table.solutions))
    if table.shape != expected:
        raise ValueError(f"pattern table in {cache_dir} is {table.shape}, "
                         f"word lists need {expected}")
    return table


# ---------------------------------------------------------------------------
# 3.  Pretty printing
# ---------------------------------------------------------------------------

_COLOURS = {Outcome.EXACT:    "\033[1;42m",   # bright green background
            Outcome.INCLUDED: "\033[1;43m",   # yellow
            Outcome.EXCLUDED: "\033[1;47m"}   # white/grey
_RESET  = "\033[0m"


def colourise(word: str, pattern: Pattern) -> str:
    """Return ANSI-coloured representation of WORD using feedback PATTERN."""
    return "".join(f"{_COLOURS[o]} {letter} {_RESET}"
                   for letter, o in zip(word, pattern))
