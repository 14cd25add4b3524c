"""
Error taxonomy for the solver.

Load-time and operator errors are exceptions; an exhausted candidate set is
not (the game loop resets in-band unless strict mode asks for
InconsistentFeedback instead).
"""

from __future__ import annotations

from typing import List, Tuple


class WordleError(Exception):
    """Base class for every error raised by this project."""


class MalformedWord(WordleError, ValueError):
    """A word (or dictionary line) is not exactly 5 letters."""


class MalformedFeedback(WordleError, ValueError):
    """Feedback notation has the wrong length or an unknown character."""


class FeedbackSourceTerminated(WordleError):
    """The feedback source (usually a human at a prompt) asked to stop."""


class InconsistentFeedback(WordleError):
    """Strict mode: no known word fits the feedback observed so far."""

    def __init__(self, history: List[Tuple[str, str]]):
        self.history = list(history)
        super().__init__(f"no candidate is consistent with {self.history}")


class TurnLimitExceeded(WordleError):
    """Optional safety net for simulations with a configured max_turns."""
