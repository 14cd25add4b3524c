from __future__ import annotations

from concurrent.futures import Executor
from typing import Callable, List, Optional, Sequence

from packages.engine import Word
from .partition import best_guess, partition_score, score


# With this few candidates left, guess one of them instead of searching
DIRECT_GUESS_LIMIT = 2


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, guesses: Sequence[str]):
        self.guesses: List[Word] = [Word(w) for w in guesses]

    def opening(self) -> Word:
        raise NotImplementedError("Override in subclass")

    def next_guess(self, candidates: Sequence[str]) -> Word:
        raise NotImplementedError("Override in subclass")


class PartitionSolver(BaseSolver):
    """
    Fixed opening word, then:
      - 1 or 2 candidates left: guess the first one (a real chance to win now)
      - otherwise: best_guess() over the whole guess dictionary, scored on
        the remaining candidates.
    """
    id = "partition"
    name = "Minimum Expected Remaining"
    version = "1.0.0"

    def __init__(
            self,
            guesses: Sequence[str],
            *,
            opening: str,
            executor: Optional[Executor] = None,
            exact_scoring: bool = False,
            on_progress: Optional[Callable[[int], None]] = None,
    ):
        super().__init__(guesses)
        self._opening = Word(opening)
        self.executor = executor
        self.scorer = score if exact_scoring else partition_score
        self.on_progress = on_progress

    def opening(self) -> Word:
        return self._opening

    def next_guess(self, candidates: Sequence[str]) -> Word:
        if not candidates:
            raise ValueError("no candidates to choose from")
        if len(candidates) <= DIRECT_GUESS_LIMIT:
            return Word(candidates[0])
        return best_guess(
            self.guesses, candidates,
            executor=self.executor, scorer=self.scorer, on_progress=self.on_progress,
        )
