#!/usr/bin/env python3
"""
Feedback patterns: computing them, printing them and reading them back.

Each guess position gets one of three outcomes:

    EXACT     (G, 🟩)  letter is in the solution at this position
    INCLUDED  (Y, 🟨)  letter is somewhere else in the solution
    EXCLUDED  (B, ⬛)  letter is not in the solution

Positions are judged independently. A repeated guess letter is marked
INCLUDED at every non-exact position where it occurs, however many times the
solution contains it. This differs from the official game for words with
repeated letters.
"""

from __future__ import annotations
from enum import Enum

from words import WORD_LENGTH


class Outcome(Enum):
    EXCLUDED = 0
    INCLUDED = 1
    EXACT    = 2


GLYPHS  = {Outcome.EXCLUDED: "⬛", Outcome.EXACT: "🟩", Outcome.INCLUDED: "🟨"}
LETTERS = {Outcome.EXCLUDED: "B",  Outcome.EXACT: "G",  Outcome.INCLUDED: "Y"}
_FROM_LETTER = {letter: outcome for outcome, letter in LETTERS.items()}

N_PATTERNS = 3 ** WORD_LENGTH   # 243


class FeedbackParseError(ValueError):
    pass


class Pattern(tuple):
    """Five outcomes, one per guess position."""

    __slots__ = ()

    def __new__(cls, outcomes) -> "Pattern":
        outcomes = tuple(Outcome(o) for o in outcomes)
        if len(outcomes) != WORD_LENGTH:
            raise ValueError(
                f"a pattern has {WORD_LENGTH} outcomes, got {len(outcomes)}")
        return super().__new__(cls, outcomes)

    @classmethod
    def solved(cls) -> "Pattern":
        return cls([Outcome.EXACT] * WORD_LENGTH)

    @classmethod
    def from_code(cls, code: int) -> "Pattern":
        """Inverse of `code`."""
        if not 0 <= code < N_PATTERNS:
            raise ValueError(f"pattern code out of range: {code}")
        trits = []
        for _ in range(WORD_LENGTH):
            code, trit = divmod(code, 3)
            trits.append(trit)
        return cls(trits)

    @property
    def code(self) -> int:
        """Little-endian base-3 integer 0-242, as stored in the pattern table."""
        code, power = 0, 1
        for outcome in self:
            code += outcome.value * power
            power *= 3
        return code

    @property
    def text(self) -> str:
        """The letter code a user types, e.g. 'GYBBY'."""
        return "".join(LETTERS[o] for o in self)

    def __str__(self) -> str:
        return "".join(GLYPHS[o] for o in self)

    def __repr__(self) -> str:
        return f"Pattern({self.text!r})"


SOLVED = Pattern.solved()


def compute(guess: str, solution: str) -> Pattern:
    out = []
    for g, s in zip(guess, solution):
        if g == s:
            out.append(Outcome.EXACT)
        elif g in solution:
            out.append(Outcome.INCLUDED)
        else:
            out.append(Outcome.EXCLUDED)
    return Pattern(out)


def parse(text: str) -> Pattern:
    """
    Read a pattern typed by the user.

    Accepts exactly five of G (green), Y (yellow), B (black/grey), in either
    case, in guess order. Surrounding whitespace is ignored.
    """
    text = text.strip()
    if len(text) != WORD_LENGTH:
        raise FeedbackParseError(
            f"Feedback must have exactly {WORD_LENGTH} symbols, got {len(text)}.")

    outcomes = []
    for pos, ch in enumerate(text, start=1):
        try:
            outcomes.append(_FROM_LETTER[ch.upper()])
        except KeyError:
            raise FeedbackParseError(
                f"Bad symbol {ch!r} at position {pos} "
                f"(use G, Y or B).") from None
    return Pattern(outcomes)
