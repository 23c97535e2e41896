"""
Letter availability check.

A candidate is possible iff it is a sub-multiset of the root word's
letters: every letter of the candidate must be taken out of a working copy
of the root, one instance at a time. Letters are consumed, not reused, so
"memorial" yields "email" and "roam" but not "memorials" (no 's') or
"mammal" (only one 'a').
"""

from collections import Counter


def is_possible(word: str, root_word: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root_word`.

    Examples:
      is_possible("email", "memorial")     -> True
      is_possible("memorials", "memorial") -> False
    """
    # Working pool of letters still available from the root word.
    remaining = Counter(root_word.lower())

    for letter in word:
        if remaining[letter] <= 0:
            return False  # letter absent, or every copy already consumed
        remaining[letter] -= 1

    return True
