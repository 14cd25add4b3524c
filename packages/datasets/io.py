from __future__ import annotations
from pathlib import Path
from typing import List

from packages.engine import MalformedWord, Word


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[Word]:
    """
    Load a newline-delimited dictionary of 5-letter words (order preserved).

    Blank lines are skipped; any other line that isn't a 5-letter word raises
    MalformedWord with the file and line number.
    """
    words: List[Word] = []
    for lineno, line in enumerate(read_lines(p), start=1):
        if not line.strip():
            continue
        try:
            words.append(Word(line))
        except MalformedWord as e:
            raise MalformedWord(f"{p}:{lineno}: {e}") from e
    return words
