"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - EXACT   : green  = correct letter in the correct position
  - PRESENT : yellow = correct letter in the wrong position
  - ABSENT  : gray   = letter not present (or present fewer times than guessed)

Players type feedback in a 5-character notation. Two are built in:
  - "symbols": '=' exact, '~' present, '.' absent   (default)
  - "letters": 'G' exact, 'Y' present, '-' absent   (case-insensitive)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and removes those letters from a
     scratch copy of the answer.
  2) Second pass marks a non-exact letter PRESENT only if the scratch copy
     still holds it, consuming one instance each time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import MalformedFeedback
from .word import WORD_LENGTH, Word


class Status(Enum):
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


Statuses = Tuple[Status, ...]

ALL_EXACT: Statuses = (Status.EXACT,) * WORD_LENGTH


@dataclass(frozen=True)
class Notation:
    """Three distinct single characters, one per Status."""
    exact: str
    present: str
    absent: str

    def __post_init__(self):
        chars = (self.exact, self.present, self.absent)
        if any(len(c) != 1 for c in chars) or len(set(chars)) != 3:
            raise ValueError(f"notation needs three distinct characters, got {chars}")

    def _decode_table(self) -> Dict[str, Status]:
        table: Dict[str, Status] = {}
        for ch, st in ((self.exact, Status.EXACT),
                       (self.present, Status.PRESENT),
                       (self.absent, Status.ABSENT)):
            table[ch] = st
            # Letter notations accept either case
            table.setdefault(ch.lower(), st)
            table.setdefault(ch.upper(), st)
        return table

    def decode(self, text: str) -> Statuses:
        """
        Map a 5-character notation string to statuses.

        Raises MalformedFeedback on wrong length or an unknown character.
        """
        text = text.strip()
        if len(text) != WORD_LENGTH:
            raise MalformedFeedback(
                f"feedback must be {WORD_LENGTH} characters, got {len(text)}: {text!r}")
        table = self._decode_table()
        out: List[Status] = []
        for ch in text:
            try:
                out.append(table[ch])
            except KeyError:
                raise MalformedFeedback(
                    f"unexpected character {ch!r} in {text!r} "
                    f"(use {self.exact!r}, {self.present!r}, {self.absent!r})") from None
        return tuple(out)

    def encode(self, statuses: Statuses) -> str:
        chars = {Status.EXACT: self.exact, Status.PRESENT: self.present, Status.ABSENT: self.absent}
        return "".join(chars[s] for s in statuses)


NOTATIONS: Dict[str, Notation] = {
    "symbols": Notation(exact="=", present="~", absent="."),
    "letters": Notation(exact="G", present="Y", absent="-"),
}

DEFAULT_NOTATION = NOTATIONS["symbols"]


def get_notation(name: str) -> Notation:
    try:
        return NOTATIONS[name]
    except KeyError as e:
        raise ValueError(f"Unknown notation: {name}. Available: {sorted(NOTATIONS)}") from e


@dataclass(frozen=True)
class Feedback:
    """A guessed word and one Status per letter position."""
    guess: Word
    statuses: Statuses

    def __post_init__(self):
        object.__setattr__(self, "guess", Word(self.guess))
        statuses = tuple(self.statuses)
        if len(statuses) != WORD_LENGTH:
            raise MalformedFeedback(
                f"feedback needs {WORD_LENGTH} statuses, got {len(statuses)}")
        if not all(isinstance(s, Status) for s in statuses):
            raise MalformedFeedback(f"feedback statuses must be Status values, got {statuses}")
        object.__setattr__(self, "statuses", statuses)

    @property
    def is_win(self) -> bool:
        return self.statuses == ALL_EXACT

    def pattern(self, notation: Notation = DEFAULT_NOTATION) -> str:
        return notation.encode(self.statuses)

    def __str__(self) -> str:
        return f"{self.guess} {self.pattern()}"


def statuses_for(guess: str, answer: str) -> Statuses:
    """
    Two-pass scoring on already-normalized strings.

    Kept separate from compute() so hot loops (the evaluator) can skip Word
    construction.
    """
    scratch: List[Optional[str]] = list(answer)
    out = [Status.ABSENT] * WORD_LENGTH

    # Pass 1: exact matches claim their answer letter
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            out[i] = Status.EXACT
            scratch[i] = None

    # Pass 2: present only while the scratch answer still holds the letter
    for i in range(WORD_LENGTH):
        if out[i] is Status.EXACT:
            continue
        g = guess[i]
        if g in scratch:
            out[i] = Status.PRESENT
            scratch[scratch.index(g)] = None  # consume one instance

    return tuple(out)


def compute(guess: str, answer: str) -> Feedback:
    """
    Feedback for `guess` against a known `answer`.

    Examples (symbols notation):
      compute("alloy", "loyal").pattern() -> "~~~~~"
      compute("crane", "trace").pattern() -> "~==.="
    """
    guess = Word(guess)
    return Feedback(guess, statuses_for(guess, Word(answer)))


def parse(guess: str, text: str, notation: Notation = DEFAULT_NOTATION) -> Feedback:
    """Feedback for `guess` as reported by a player in `notation`."""
    return Feedback(Word(guess), notation.decode(text))
