#!/usr/bin/env python3
"""
Word type and word-list loading.

A word list is plain text, one word per line:

    cigar\n
    rebut\n
    ...

Every record is exactly WORD_LENGTH characters followed by a newline.
Letters are kept exactly as written (no case folding).
"""

from __future__ import annotations
import logging
from pathlib import Path

log = logging.getLogger(__name__)

BASE_DIR      = Path(__file__).resolve().parent
DATA_DIR      = BASE_DIR / "data"
DEFAULT_WORDS = DATA_DIR / "valid_answers.txt"

WORD_LENGTH = 5


class WordLengthError(ValueError):
    pass


class CorpusError(ValueError):
    pass


class Word(str):
    """An immutable 5-letter token. Compares and hashes like its text."""

    __slots__ = ()

    def __new__(cls, text: str) -> "Word":
        if len(text) != WORD_LENGTH:
            raise WordLengthError(
                f"{text!r} has {len(text)} letters, expected {WORD_LENGTH}")
        return super().__new__(cls, text)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_words(text: str) -> list[Word]:
    """
    Parse newline-terminated 5-letter records.

    Raises CorpusError if a record is shorter or longer than WORD_LENGTH
    (the character after the fifth letter must be a newline). A trailing
    record without its newline is ignored.
    """
    words = []
    letters = []
    for ch in text:
        if len(letters) == WORD_LENGTH:
            if ch != "\n":
                raise CorpusError(
                    f"record {len(words) + 1}: expected newline after "
                    f"{''.join(letters)!r}, found {ch!r}")
            words.append(Word("".join(letters)))
            letters = []
            continue
        if ch == "\n":
            raise CorpusError(
                f"record {len(words) + 1}: {''.join(letters)!r} is shorter "
                f"than {WORD_LENGTH} letters")
        letters.append(ch)

    if letters:
        log.warning("ignoring unterminated last record %r", "".join(letters))
    return words


def load_words(path: str | Path = DEFAULT_WORDS) -> list[Word]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"cannot read word list {path}: {exc}") from exc

    words = parse_words(text)
    if not words:
        raise CorpusError(f"word list {path} is empty")
    log.debug("loaded %d words from %s", len(words), path)
    return words
