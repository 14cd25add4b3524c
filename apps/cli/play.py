# apps/cli/play.py
"""
Interactive solver.

This script:
  1) Loads the answer and guess dictionaries (a bad line aborts startup).
  2) Suggests a guess, reads the feedback you were shown, and narrows the
     candidates until you report a win.

Feedback notation (default "symbols"): '=' green, '~' yellow, '.' gray,
e.g. "=~..=". With --notation letters: 'G', 'Y', '-'.
Ctrl-D / Ctrl-C quit.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from tqdm import tqdm

from packages.datasets import load_words
from packages.engine import (
    NOTATIONS, FeedbackSourceTerminated, InconsistentFeedback, MalformedFeedback, MalformedWord,
)
from packages.harness import DEFAULT_OPENING, DEFAULT_WORKERS, GameConfig, InteractiveFeedback, run_case
from packages.harness.render import colour_feedback
from packages.solvers import make_executor
from packages.solvers.partition import EXECUTOR_HELP

log = logging.getLogger("wordle.play")


class _SearchProgress:
    """tqdm bar opened lazily for each best-guess search."""

    def __init__(self, total: int):
        self.total = total
        self.bar: Optional[tqdm] = None

    def __call__(self, n: int) -> None:
        if self.bar is None:
            self.bar = tqdm(total=self.total, ncols=80, desc="Searching", unit="word", leave=False)
        self.bar.update(n)
        if self.bar.n >= self.total:
            self.bar.close()
            self.bar = None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wordle solver: interactive play")
    ap.add_argument("--answers", default="answer_words.txt", help="answer dictionary (one word per line)")
    ap.add_argument("--guesses", default="wordle.txt", help="guess dictionary (one word per line)")
    ap.add_argument("--opening", default=DEFAULT_OPENING, help="fixed first guess")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="worker pool size")
    ap.add_argument("--executor", choices=["thread", "process"], default="thread",
                    help=EXECUTOR_HELP)
    ap.add_argument("--notation", choices=sorted(NOTATIONS), default="symbols")
    ap.add_argument("--strict", action="store_true",
                    help="stop on contradictory feedback instead of resetting the candidates")
    ap.add_argument("--no-colour", dest="colour", action="store_false")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        answers = load_words(args.answers)
        guesses = load_words(args.guesses)
        config = GameConfig(
            opening=args.opening,
            workers=args.workers,
            executor=args.executor,
            on_exhausted="strict" if args.strict else "reset",
            notation=args.notation,
        )
    except (FileNotFoundError, MalformedWord, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    log.info("loaded %d answers, %d guesses", len(answers), len(guesses))
    source = InteractiveFeedback(config.get_notation())

    def on_turn(turn, fb, remaining):
        print(f"{colour_feedback(fb, args.colour)}  ({remaining} left)")

    with make_executor(config.workers, config.executor) as pool:
        try:
            r = run_case(
                source, guesses=guesses, answers=answers, config=config,
                executor=pool, on_progress=_SearchProgress(len(guesses)), on_turn=on_turn,
            )
        except FeedbackSourceTerminated:
            print("Exiting...")
            return 130
        except MalformedFeedback as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        except InconsistentFeedback as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    print(f"Solved in {r['guesses']} guess(es).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
