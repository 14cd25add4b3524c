"""
Partition scoring + best-guess search.

Idea:
  For guess g, treat every current candidate a as the hidden answer, compute
  the feedback g would get, and count how many candidates stay consistent with
  it. Summing those counts gives the expected remaining candidates (times n).
  Lower is better; pick the guess with the lowest total.

  An answer a stays consistent with feedback f exactly when scoring g against
  a reproduces f, so the count for a is the size of a's feedback bucket and
  the total equals sum_i c_i^2 over bucket sizes c_i. partition_score() uses
  that identity (linear in candidates); score() follows the definition and is
  kept for cross-checking and for GameConfig.exact_scoring.

Parallelism:
  - score() fans out over hypothetical answers when given an executor.
  - best_guess() fans out over the guess dictionary; each chunk then scores
    sequentially, so the two are never nested.
"""

from __future__ import annotations

import logging
import math
import time
from collections import defaultdict
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from packages.engine.constraints import statuses_allow
from packages.engine.scoring import Statuses, statuses_for
from packages.engine.word import Word

log = logging.getLogger(__name__)

Scorer = Callable[[str, Sequence[str]], int]

# Guess dictionary is split into about this many chunks per search
SEARCH_CHUNKS = 64

EXECUTOR_KINDS = ("thread", "process")

EXECUTOR_HELP = (
    "worker pool kind (default: thread). The search is CPU-bound, so threads "
    "share one interpreter lock and mostly add no speedup; 'process' runs the "
    "chunks in parallel at the cost of copying the candidate list to each worker"
)


def make_executor(workers: int, kind: str = "thread") -> Executor:
    """Fixed-size worker pool shared by every search of a run."""
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordle")
    if kind == "process":
        return ProcessPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown executor kind: {kind}. Available: {list(EXECUTOR_KINDS)}")


def _chunks(seq: Sequence, size: int) -> List[Tuple[int, Sequence]]:
    return [(i, seq[i:i + size]) for i in range(0, len(seq), size)]


def _score_hypotheticals(guess: str, hypotheticals: Sequence[str], candidates: Sequence[str]) -> int:
    # Identical feedback always keeps the same candidates; count once per pattern
    seen: Dict[Statuses, int] = {}
    total = 0
    for ans in hypotheticals:
        statuses = statuses_for(guess, ans)
        left = seen.get(statuses)
        if left is None:
            left = sum(1 for w in candidates if statuses_allow(guess, statuses, w))
            seen[statuses] = left
        total += left
    return total


def score(guess: str, candidates: Sequence[str], executor: Optional[Executor] = None) -> int:
    """
    Sum over hypothetical answers of the candidates consistent with the
    feedback `guess` would get. Lower is better.

    Args:
      guess      : word being evaluated
      candidates : current candidate answers (read-only snapshot)
      executor   : optional pool; hypothetical answers are split across it
    """
    if executor is None or len(candidates) < 2:
        return _score_hypotheticals(guess, candidates, candidates)

    size = max(1, math.ceil(len(candidates) / SEARCH_CHUNKS))
    futures = [executor.submit(_score_hypotheticals, guess, chunk, candidates)
               for _, chunk in _chunks(candidates, size)]
    return sum(f.result() for f in futures)


def partition_score(guess: str, candidates: Sequence[str]) -> int:
    """Same value as score(), computed from feedback bucket sizes."""
    buckets: Dict[Statuses, int] = defaultdict(int)
    _statuses = statuses_for
    for ans in candidates:
        buckets[_statuses(guess, ans)] += 1
    return sum(c * c for c in buckets.values())


def _search_chunk(start: int, guesses: Sequence[str], candidates: Sequence[str],
                  scorer: Scorer) -> Tuple[int, int]:
    """Return (best_score, best_index) for one contiguous slice of guesses."""
    best_score = None
    best_index = start
    for offset, g in enumerate(guesses):
        s = scorer(g, candidates)
        if best_score is None or s < best_score:
            best_score, best_index = s, start + offset
    return best_score, best_index


def best_guess(
        guesses: Sequence[str],
        candidates: Sequence[str],
        *,
        executor: Optional[Executor] = None,
        scorer: Scorer = partition_score,
        on_progress: Optional[Callable[[int], None]] = None,
) -> Word:
    """
    Evaluate every word in `guesses` against `candidates` and return the one
    with the minimum score. Ties go to the earliest word in `guesses`.

    `on_progress(n)` is told how many guesses finished as each chunk lands;
    it has no effect on the result.
    """
    if not guesses:
        raise ValueError("guess dictionary is empty")

    t0 = time.perf_counter()
    size = max(1, math.ceil(len(guesses) / SEARCH_CHUNKS))
    chunks = _chunks(guesses, size)
    results: List[Tuple[int, int]] = []

    if executor is None:
        for start, chunk in chunks:
            results.append(_search_chunk(start, chunk, candidates, scorer))
            if on_progress is not None:
                on_progress(len(chunk))
    else:
        pending = {executor.submit(_search_chunk, start, chunk, candidates, scorer): len(chunk)
                   for start, chunk in chunks}
        for fut in as_completed(pending):
            results.append(fut.result())
            if on_progress is not None:
                on_progress(pending[fut])

    # (score, index) ordering restores dictionary-order tie-breaking
    best_score, best_index = min(results)
    choice = Word(guesses[best_index])
    log.debug("best guess %s (score=%d) over %d guesses x %d candidates in %.2fs",
              choice, best_score, len(guesses), len(candidates), time.perf_counter() - t0)
    return choice
