"""
Run configuration shared by the game loop and the CLIs.

The opening guess is an offline, empirically chosen first move: searching for
it against the full answer list costs the same every game and always gives
the same word, so it is configured rather than computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from packages.engine import Notation, Word, get_notation
from packages.solvers.partition import EXECUTOR_KINDS

DEFAULT_OPENING = "roate"
DEFAULT_WORKERS = 8

# What to do when feedback leaves no candidate
ON_EXHAUSTED = ("reset", "strict")


@dataclass
class GameConfig:
    opening: str = DEFAULT_OPENING
    workers: int = DEFAULT_WORKERS
    executor: str = "thread"            # "thread" | "process"
    on_exhausted: str = "reset"         # "reset" (lenient) | "strict"
    notation: str = "symbols"           # see packages.engine.NOTATIONS
    exact_scoring: bool = False         # score() instead of partition_score()
    max_turns: Optional[int] = None     # None = play until solved

    def __post_init__(self):
        self.opening = Word(self.opening)
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.executor not in EXECUTOR_KINDS:
            raise ValueError(f"executor must be one of {list(EXECUTOR_KINDS)}; got {self.executor!r}")
        if self.on_exhausted not in ON_EXHAUSTED:
            raise ValueError(f"on_exhausted must be one of {list(ON_EXHAUSTED)}; got {self.on_exhausted!r}")
        get_notation(self.notation)
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1 or None; got {self.max_turns}")

    @property
    def strict(self) -> bool:
        return self.on_exhausted == "strict"

    def get_notation(self) -> Notation:
        return get_notation(self.notation)
