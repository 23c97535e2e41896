"""
Score bookkeeping for accepted words.

Conventions:
  - every accepted word is worth a flat WORD_POINTS, regardless of length
  - the best score only ever moves up; it is the max of itself and the
    current score after each accepted word
"""

from typing import Tuple

WORD_POINTS = 25


def award(score: int, best_score: int, points: int = WORD_POINTS) -> Tuple[int, int]:
    """
    Apply one accepted word.

    Returns:
      (new_score, new_best_score)

    Examples:
      award(0, 0)    -> (25, 25)
      award(25, 100) -> (50, 100)
    """
    score += points
    if score > best_score:
        best_score = score
    return score, best_score
