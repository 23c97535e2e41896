from .constraints import is_possible
from .errors import SessionNotStartedError, WordListLoadError, WordScrambleError
from .rejections import Reason, Rejection
from .scoring import WORD_POINTS, award
from .session import DEFAULT_ROOT_WORD, Outcome, Session, Status, start_game, submit
from .spelling import DictionarySpellChecker, SpellChecker
from .validation import (
    MIN_WORD_LENGTH,
    is_long_enough,
    is_not_root_word,
    is_original,
    is_real,
    normalize,
)

__all__ = [
    "Session", "Outcome", "Status", "start_game", "submit",
    "Reason", "Rejection",
    "SpellChecker", "DictionarySpellChecker",
    "normalize", "is_not_root_word", "is_long_enough", "is_original",
    "is_real", "is_possible", "award",
    "MIN_WORD_LENGTH", "WORD_POINTS", "DEFAULT_ROOT_WORD",
    "WordScrambleError", "WordListLoadError", "SessionNotStartedError",
]
