"""
Game loop primitives.

- run_case:  play one game against any feedback source until it reports a win.
- simulate:  self-play against a hidden answer; returns the guess count.
- run_batch: self-play many answers in sequence.
- summarize: aggregate statistics over a batch.

Turn flow (Opening -> Guessing -> Won):
  1) The first guess is the configured opening word.
  2) Each turn asks the source for feedback, filters the candidates and stops
     when every letter is EXACT.
  3) Otherwise the solver picks the next guess from the filtered candidates.

If feedback leaves no candidate (a typo, or a word missing from the answer
list), lenient mode resets the candidates to the whole guess dictionary and asks
the same guess again; strict mode raises InconsistentFeedback instead.

These functions are UI-agnostic so they can be reused by the CLIs, tests or
a notebook without changes.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import Executor
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from packages.engine import (
    Feedback, InconsistentFeedback, TurnLimitExceeded, Word, filter_candidates,
)
from packages.solvers import PartitionSolver, make_executor
from .config import GameConfig
from .sources import SimulatedFeedback

log = logging.getLogger(__name__)

# Official Wordle turn budget; only used to flag slow games in statistics.
WORDLE_PAR = 6

FeedbackSource = Callable[[Word], Feedback]
TurnObserver = Callable[[int, Feedback, int], None]


def run_case(
        source: FeedbackSource,
        *,
        guesses: Sequence[str],
        answers: Iterable[str],
        config: Optional[GameConfig] = None,
        executor: Optional[Executor] = None,
        on_progress: Optional[Callable[[int], None]] = None,
        on_turn: Optional[TurnObserver] = None,
        answer: Optional[str] = None,
) -> Dict:
    """
    Play one game until the source reports all-EXACT feedback.

    Args:
        source:      callable returning Feedback for a guess
        guesses:     every legal guess (the search universe)
        answers:     the answer dictionary (initial candidates)
        config:      GameConfig (defaults if omitted)
        executor:    optional worker pool for the best-guess search
        on_progress: search progress observer (e.g. tqdm.update)
        on_turn:     observer called as on_turn(turn, feedback, remaining)
        answer:      hidden answer, recorded in the result when known

    Returns:
        dict with keys:
            answer (str|None), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), resets (int)
    """
    config = config or GameConfig()
    notation = config.get_notation()

    solver = PartitionSolver(
        guesses,
        opening=config.opening,
        executor=executor,
        exact_scoring=config.exact_scoring,
        on_progress=on_progress,
    )
    candidates: List[Word] = [Word(w) for w in answers]
    history: List[Tuple[str, str]] = []
    resets = 0

    guess = solver.opening()
    turn = 0
    t0 = time.time()
    while True:
        turn += 1
        if config.max_turns is not None and turn > config.max_turns:
            raise TurnLimitExceeded(f"no win within {config.max_turns} turns: {history}")

        fb = source(guess)
        history.append((str(guess), fb.pattern(notation)))

        # Replace (never mutate) so no reader sees a half-filtered list
        candidates = filter_candidates(candidates, fb)
        log.debug("turn %d: %s -> %d candidates left", turn, fb, len(candidates))
        if on_turn is not None:
            on_turn(turn, fb, len(candidates))

        if fb.is_win:
            dt = (time.time() - t0) * 1000.0
            return {
                "answer": answer, "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "resets": resets,
            }

        if not candidates:
            if config.strict:
                raise InconsistentFeedback(history)
            log.warning("feedback %s contradicts every known answer; "
                        "resetting candidates to the full guess dictionary", fb)
            candidates = list(solver.guesses)
            resets += 1
            # Ask the same guess again so the player can correct the feedback
            continue

        guess = solver.next_guess(candidates)


def simulate(
        answer: str,
        *,
        guesses: Sequence[str],
        answers: Iterable[str],
        config: Optional[GameConfig] = None,
        executor: Optional[Executor] = None,
) -> int:
    """Self-play one game against `answer`; return the number of guesses."""
    r = run_case(
        SimulatedFeedback(answer), guesses=guesses, answers=answers,
        config=config, executor=executor, answer=answer,
    )
    return r["guesses"]


def run_batch(
        cases: Iterable[str],
        *,
        guesses: Sequence[str],
        answers: Sequence[str],
        config: Optional[GameConfig] = None,
        executor: Optional[Executor] = None,
        on_case: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Self-play every hidden answer in `cases`, back-to-back.

    A worker pool sized from `config` is created for the batch unless one is
    passed in. `on_case(result)` is called after each game.
    """
    config = config or GameConfig()
    answers = list(answers)

    def _play_all(pool: Executor) -> List[Dict]:
        out: List[Dict] = []
        for ans in cases:
            r = run_case(
                SimulatedFeedback(ans), guesses=guesses, answers=answers,
                config=config, executor=pool, answer=ans,
            )
            out.append(r)
            if on_case is not None:
                on_case(r)
        return out

    if executor is not None:
        return _play_all(executor)
    with make_executor(config.workers, config.executor) as pool:
        return _play_all(pool)


def summarize(results: List[Dict], par: int = WORDLE_PAR) -> Dict:
    """
    Batch statistics: games, mean/worst guesses, histogram, answers over par
    and how many games needed a candidate reset.
    """
    counts = [r["guesses"] for r in results]
    hist = Counter(counts)
    return {
        "games": len(results),
        "mean_guesses": (sum(counts) / len(counts)) if counts else 0.0,
        "worst": max(counts) if counts else 0,
        "histogram": {k: hist[k] for k in sorted(hist)},
        "over_par": [r["answer"] for r in results if r["guesses"] > par],
        "resets": sum(1 for r in results if r.get("resets")),
    }
