"""
Replay harness core primitives.

- play_transcript: feed a sequence of raw submissions into an existing session.
- run_game:        start a fresh game and replay a transcript against it.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or a front end's integration tests without changes.
"""

from __future__ import annotations
import random
from typing import Dict, Iterable, List, Optional, Sequence

from wordscramble.engine import Outcome, Session, SpellChecker, Status, start_game, submit


def _turn_record(turn: int, raw: str, session: Session, outcome: Outcome) -> Dict:
    rej = outcome.rejection
    return {
        "turn": turn,
        "input": raw,
        "word": outcome.word,
        "accepted": outcome.status is Status.ACCEPTED,
        "ignored": outcome.status is Status.IGNORED,
        "reason": rej.reason.value if rej else "",
        "message": rej.message if rej else "",
        "score": session.score,
        "best_score": session.best_score,
    }


def play_transcript(
        session: Session,
        submissions: Iterable[str],
        checker: SpellChecker,
) -> List[Dict]:
    """
    Submit each entry of `submissions` in order.

    Returns:
        one dict per submission with keys:
            turn, input, word, accepted, ignored, reason, message,
            score, best_score
    """
    turns: List[Dict] = []
    for turn, raw in enumerate(submissions, start=1):
        outcome = submit(session, raw, checker)
        turns.append(_turn_record(turn, raw, session, outcome))
    return turns


def run_game(
        word_list: Optional[Sequence[str]],
        submissions: Iterable[str],
        checker: SpellChecker,
        *,
        seed: int | None = None,
        best_score: int = 0,
        root_word: str | None = None,
) -> Dict:
    """
    Execute one game: pick a root word, replay every submission.

    Args:
        word_list:   candidate root words
        submissions: raw player inputs, in order
        checker:     spelling oracle
        seed:        RNG seed for the root-word pick
        best_score:  best score carried in from earlier games
        root_word:   force this root word instead of picking one

    Returns:
        dict with keys:
            root_word, score, best_score, accepted, rejected, ignored,
            used_words, turns
    """
    session = Session(best_score=best_score)
    pool = [root_word] if root_word else word_list
    start_game(pool, rng=random.Random(seed), session=session)

    turns = play_transcript(session, submissions, checker)
    return {
        "root_word": session.root_word,
        "score": session.score,
        "best_score": session.best_score,
        "accepted": sum(1 for t in turns if t["accepted"]),
        "rejected": sum(1 for t in turns if not t["accepted"] and not t["ignored"]),
        "ignored": sum(1 for t in turns if t["ignored"]),
        "used_words": list(session.used_words),
        "turns": turns,
    }
