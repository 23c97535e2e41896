"""
Typed rejection reasons for submitted words.

Every failed check in the submission pipeline maps to exactly one
`Reason`. A `Rejection` carries the display title and message the UI shows
in its alert; TOO_SHORT also carries the offending length so the message
can be pluralized.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Reason(str, Enum):
    SAME_AS_ROOT = "same_as_root"
    TOO_SHORT = "too_short"
    NOT_ORIGINAL = "not_original"
    NOT_REAL = "not_real"
    NOT_POSSIBLE = "not_possible"


@dataclass(frozen=True)
class Rejection:
    reason: Reason
    title: str
    message: str
    length: Optional[int] = None  # only set for TOO_SHORT


def _plural(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def same_as_root() -> Rejection:
    return Rejection(Reason.SAME_AS_ROOT, "Not allowed!",
                     "You cannot use a starting word!")


def too_short(length: int) -> Rejection:
    return Rejection(
        Reason.TOO_SHORT,
        "Too short!",
        f"Your word is too short with {_plural(length, 'letter')}",
        length=length,
    )


def not_original() -> Rejection:
    return Rejection(Reason.NOT_ORIGINAL, "Not a new word",
                     "You have already typed this word before.")


def not_real() -> Rejection:
    return Rejection(Reason.NOT_REAL, "What?",
                     "Sorry, it seems like this word does not exist.")


def not_possible(root_word: str) -> Rejection:
    return Rejection(Reason.NOT_POSSIBLE, "Not possible",
                     f"You can't assemble this word from {root_word}!")
