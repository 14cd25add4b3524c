"""
Candidate filtering given observed feedback.

Given:
  - a Feedback (guess + per-position statuses)
  - a candidate word

Decide whether the candidate could have been the hidden answer, i.e. whether
scoring the guess against it would have produced the same feedback.

This is the core step that turns feedback into a shrinking candidate set.
Checks run in three ordered stages so repeated letters are accounted for:
  1) EXACT   positions must match; the matched slot is consumed. Any other
             slot holding the guessed letter would have been EXACT.
  2) PRESENT positions must NOT match in place, and an unconsumed occurrence
             must exist elsewhere; one occurrence is consumed.
  3) ABSENT  positions: no unconsumed occurrence of the letter may remain.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .scoring import Feedback, Status
from .word import WORD_LENGTH


def statuses_allow(guess: str, statuses: Sequence[Status], candidate: str) -> bool:
    """String-level check behind is_consistent(); used directly by hot loops."""
    word: List[Optional[str]] = list(candidate)

    for i in range(WORD_LENGTH):
        st = statuses[i]
        if st is Status.EXACT:
            if word[i] != guess[i]:
                return False
            word[i] = None
        elif word[i] == guess[i]:
            # Same letter in the same slot would have been EXACT
            return False

    for i in range(WORD_LENGTH):
        if statuses[i] is Status.PRESENT:
            g = guess[i]
            if g not in word:
                return False
            word[word.index(g)] = None

    for i in range(WORD_LENGTH):
        if statuses[i] is Status.ABSENT and guess[i] in word:
            return False

    return True


def is_consistent(feedback: Feedback, candidate: str) -> bool:
    """
    True if `candidate` could have produced `feedback` as the hidden answer.

    Examples:
      is_consistent(compute("crane", "trace"), "trace") -> True
      is_consistent(compute("crane", "trace"), "crane") -> False
    """
    return statuses_allow(feedback.guess, feedback.statuses, candidate)


def filter_candidates(words: Iterable[str], feedback: Feedback) -> List[str]:
    """
    Keep only words consistent with `feedback` (order preserved as in `words`).

    Returns a new list; callers replace their candidate set with it between
    turns, so parallel readers never see a half-filtered list.
    """
    guess, statuses = feedback.guess, feedback.statuses
    return [w for w in words if statuses_allow(guess, statuses, w)]
