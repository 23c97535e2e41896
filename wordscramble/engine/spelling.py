"""
Spelling oracle used by the NOT_REAL check.

The engine only depends on the `SpellChecker` protocol, so a platform
spell checker, a web API or an in-memory set can all stand in. The shipped
implementation is a plain dictionary lookup backed by a word list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Set

from .errors import WordListLoadError

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = Path(__file__).resolve().parent.parent / "datasets" / "data" / "dictionary.txt"


class SpellChecker(Protocol):
    def is_valid(self, word: str, locale: str = "en") -> bool:
        ...


class DictionarySpellChecker:
    """
    Word-list backed spell checker. Only the "en" locale is supported;
    lookups for any other locale return False.
    """

    locale = "en"

    def __init__(self, words: Iterable[str]):
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def is_valid(self, word: str, locale: str = "en") -> bool:
        if not word or locale != self.locale:
            return False
        return word.lower() in self._words

    @classmethod
    def from_file(cls, path: Optional[Path | str] = None) -> "DictionarySpellChecker":
        """
        Build a checker from a UTF-8 file with one word per line.
        Raises WordListLoadError if the file is missing or unreadable.
        """
        p = Path(path) if path is not None else DEFAULT_DICTIONARY
        try:
            lines = p.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError as e:
            raise WordListLoadError(p, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise WordListLoadError(p, str(e)) from e
        checker = cls(lines)
        logger.info("Loaded %s dictionary words from %s", len(checker), p)
        return checker
