"""
Feedback sources.

The game loop only needs "given a guess, return feedback", so a source is any
callable `source(guess) -> Feedback`. Two are provided:
  - SimulatedFeedback:   scores the guess against a hidden answer (self-play)
  - InteractiveFeedback: asks a human to type the feedback they were shown
"""

from __future__ import annotations

from typing import Callable, Optional

from packages.engine import (
    DEFAULT_NOTATION, Feedback, FeedbackSourceTerminated, Notation, Word, compute, parse,
)


class SimulatedFeedback:
    """Deterministic source for self-play against a known answer."""

    def __init__(self, answer: str):
        self.answer = Word(answer)

    def __call__(self, guess: Word) -> Feedback:
        return compute(guess, self.answer)


class InteractiveFeedback:
    """
    Prompt-driven source.

    Shows the guess, reads one line through `reader` (input() by default) and
    parses it with `notation`. End-of-input or Ctrl-C raise
    FeedbackSourceTerminated so the caller decides how to stop; malformed
    notation raises MalformedFeedback.
    """

    def __init__(
            self,
            notation: Notation = DEFAULT_NOTATION,
            *,
            reader: Callable[[str], str] = input,
            prompt: str = "> ",
            show: Optional[Callable[[str], None]] = print,
    ):
        self.notation = notation
        self.reader = reader
        self.prompt = prompt
        self.show = show

    def __call__(self, guess: Word) -> Feedback:
        if self.show is not None:
            self.show(f"< {guess}")
        try:
            line = self.reader(self.prompt)
        except (EOFError, KeyboardInterrupt) as e:
            raise FeedbackSourceTerminated("feedback input closed") from e
        return parse(guess, line, self.notation)
