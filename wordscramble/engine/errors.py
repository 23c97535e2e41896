"""
Exception hierarchy for wordscramble.

Player mistakes are never raised: they are returned as `Rejection` values
(see rejections.py). Exceptions here cover the conditions the game cannot
recover from on its own.
"""


class WordScrambleError(Exception):
    """Base class for all wordscramble errors."""


class WordListLoadError(WordScrambleError):
    """The start-word list could not be read; the game cannot start."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        msg = f"could not load word list from {self.path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class SessionNotStartedError(WordScrambleError):
    """A word was submitted before start_game assigned a root word."""
