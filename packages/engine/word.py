"""
Word value type.

A Word is a plain string that is guaranteed to be exactly five lowercase
ASCII letters, so it can be used anywhere the engine expects a str (dict
keys, sets, comparisons with literals) while construction rejects bad input.
"""

from __future__ import annotations

from string import ascii_lowercase

from .errors import MalformedWord

WORD_LENGTH = 5

_LETTERS = frozenset(ascii_lowercase)


class Word(str):
    """
    Immutable 5-letter word.

    Examples:
      Word(" CRANE ") == "crane"
      Word("cranes")  -> MalformedWord
    """

    __slots__ = ()

    def __new__(cls, text: str) -> "Word":
        if isinstance(text, Word):
            return text
        if not isinstance(text, str):
            raise MalformedWord(f"expected a string, got {type(text).__name__}")
        w = text.strip().lower()
        if len(w) != WORD_LENGTH or not _LETTERS.issuperset(w):
            raise MalformedWord(f"not a {WORD_LENGTH}-letter word: {text!r}")
        return super().__new__(cls, w)

    def __repr__(self) -> str:
        return f"Word({str.__repr__(self)})"
