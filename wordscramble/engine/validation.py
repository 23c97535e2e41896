"""
Word legality predicates.

This module answers the question: "May the player use this word right now?"
Each check is a small pure function so the submission pipeline in
session.py can run them in a fixed order and stop at the first failure:

  - not the root word itself
  - long enough (at least MIN_WORD_LENGTH letters)
  - not already used this round
  - a real word according to the spelling oracle

Letter availability (can the word be built from the root?) lives in
constraints.py.

All predicates expect input that already went through `normalize`.
"""

from typing import Iterable

from .spelling import SpellChecker

# Shortest accepted word length; anything of 3 letters or fewer is TOO_SHORT.
MIN_WORD_LENGTH = 4


def normalize(raw: str) -> str:
    """
    Canonical form of a submission: surrounding whitespace removed, lowercased.
    Whitespace-only input normalizes to "".
    """
    return raw.strip().lower()


def is_not_root_word(word: str, root_word: str) -> bool:
    return word != root_word.lower()


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_real(word: str, checker: SpellChecker, locale: str = "en") -> bool:
    """
    Ask the spelling oracle. Empty strings are never real words.
    """
    if not word:
        return False
    return bool(checker.is_valid(word, locale))
