"""
Console rendering of feedback with ANSI colours.

EXACT letters are green, PRESENT letters yellow, ABSENT letters plain.
"""

from __future__ import annotations

from packages.engine import Feedback, Status

_COLOURS = {Status.EXACT: "\033[32m",
            Status.PRESENT: "\033[33m",
            Status.ABSENT: ""}
_RESET = "\033[0m"
_RED_BOLD = "\033[1;31m"


def colour_feedback(fb: Feedback, colour: bool = True) -> str:
    if not colour:
        return f"{fb.guess} {fb.pattern()}"
    out = []
    for ch, st in zip(fb.guess, fb.statuses):
        code = _COLOURS[st]
        out.append(f"{code}{ch}{_RESET}" if code else ch)
    return "".join(out)


def highlight(text: str, colour: bool = True) -> str:
    """Bold red, used for games that went over par."""
    return f"{_RED_BOLD}{text}{_RESET}" if colour else text
