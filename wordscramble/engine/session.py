"""
Game session state and the two transitions that drive it.

- start_game: pick a root word, clear the round (best score survives).
- submit:     normalize a raw submission, run the legality pipeline, and
              either accept the word or return a typed rejection.

The session is a plain mutable dataclass owned by whoever runs the game
(a UI, the replay harness, a test). The engine never renders anything and
never raises for player mistakes: rejections come back as values, and a
rejected or ignored submission leaves the session exactly as it was.

Pipeline order (first failure wins):
  1) empty after trimming      -> ignored, not an error
  2) equal to the root word    -> SAME_AS_ROOT
  3) shorter than 4 letters    -> TOO_SHORT
  4) already used this round   -> NOT_ORIGINAL
  5) unknown to the dictionary -> NOT_REAL
  6) not buildable from root   -> NOT_POSSIBLE
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from . import rejections
from .constraints import is_possible
from .errors import SessionNotStartedError
from .rejections import Rejection
from .scoring import award
from .spelling import SpellChecker
from .validation import (
    is_long_enough,
    is_not_root_word,
    is_original,
    is_real,
    normalize,
)

logger = logging.getLogger(__name__)

# Used when the start-word list is empty or missing.
DEFAULT_ROOT_WORD = "memorial"


@dataclass
class Session:
    root_word: str = ""
    used_words: List[str] = field(default_factory=list)  # most recent first
    score: int = 0
    best_score: int = 0

    @property
    def started(self) -> bool:
        return bool(self.root_word)


class Status(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Outcome:
    """Result of one submission."""
    status: Status
    word: str                            # normalized input
    score: int                           # session score after the submission
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.status is Status.ACCEPTED


def start_game(
        word_list: Optional[Sequence[str]],
        *,
        rng: Optional[random.Random] = None,
        session: Optional[Session] = None,
) -> Session:
    """
    Begin a new round.

    Args:
      word_list : candidate root words (blank entries are skipped); None or
                  empty falls back to DEFAULT_ROOT_WORD
      rng       : random source for the pick (seed it for reproducible games)
      session   : existing session to restart in place; its best score is kept

    Returns:
      The (re)initialized session.
    """
    rng = rng or random.Random()
    pool = [w.strip().lower() for w in (word_list or []) if w.strip()]
    root = rng.choice(pool) if pool else DEFAULT_ROOT_WORD

    if session is None:
        session = Session()
    session.root_word = root
    session.used_words.clear()
    session.score = 0

    logger.debug("New game: root=%s (pool=%d)", root, len(pool))
    return session


def check(session: Session, word: str, checker: SpellChecker) -> Optional[Rejection]:
    """
    Run the rejection checks on an already-normalized, non-empty word.
    Returns the first rejection, or None if the word is playable.
    """
    if not is_not_root_word(word, session.root_word):
        return rejections.same_as_root()
    if not is_long_enough(word):
        return rejections.too_short(len(word))
    if not is_original(word, session.used_words):
        return rejections.not_original()
    if not is_real(word, checker):
        return rejections.not_real()
    if not is_possible(word, session.root_word):
        return rejections.not_possible(session.root_word)
    return None


def submit(session: Session, raw: str, checker: SpellChecker) -> Outcome:
    """
    Validate `raw` against the session and apply it if legal.

    Raises:
      SessionNotStartedError if start_game has not assigned a root word.
    """
    if not session.started:
        raise SessionNotStartedError("submit called before start_game")

    word = normalize(raw)
    if not word:
        return Outcome(Status.IGNORED, word, session.score)

    rejection = check(session, word, checker)
    if rejection is not None:
        logger.debug("Rejected %r: %s", word, rejection.reason.value)
        return Outcome(Status.REJECTED, word, session.score, rejection)

    session.used_words.insert(0, word)
    session.score, session.best_score = award(session.score, session.best_score)
    logger.debug("Accepted %r: score=%d best=%d", word, session.score, session.best_score)
    return Outcome(Status.ACCEPTED, word, session.score)
