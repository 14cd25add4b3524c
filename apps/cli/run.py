# apps/cli/run.py
"""
CLI entry point for self-play statistics.

This script:
  1) Validates the dictionaries (prints counts + SHA, checks answers ⊆ guesses).
  2) Loads the lists and plays every answer (or a seeded sample) against the
     solver, with a live progress bar.
  3) Prints the summary (mean guesses, histogram, answers over par) and
     optionally writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import load_words, pretty_summary, validate_wordlists
from packages.engine import InconsistentFeedback, MalformedWord, TurnLimitExceeded
from packages.harness import (
    DEFAULT_OPENING, DEFAULT_WORKERS, GameConfig, WORDLE_PAR, run_batch, summarize,
)
from packages.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from packages.harness.render import highlight
from packages.solvers.partition import EXECUTOR_HELP

log = logging.getLogger("wordle.run")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wordle solver: self-play statistics")
    ap.add_argument("--answers", default="answer_words.txt", help="answer dictionary (one word per line)")
    ap.add_argument("--guesses", default="wordle.txt", help="guess dictionary (one word per line)")
    ap.add_argument("--opening", default=DEFAULT_OPENING, help="fixed first guess")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="worker pool size")
    ap.add_argument("--executor", choices=["thread", "process"], default="thread",
                    help=EXECUTOR_HELP)
    ap.add_argument("--sample", type=int, help="play only a random subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-turns", type=int, help="abort a game that runs longer than this")
    ap.add_argument("--outdir", help="write CSV + manifest here")
    ap.add_argument("--no-colour", dest="colour", action="store_false")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, validate dictionaries, self-play with progress, report.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate dictionaries and print a one-liner summary
    rep = validate_wordlists(args.answers, args.guesses)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("dictionary: %s", issue)

    # 2) Load lists (hard failure on any malformed line)
    try:
        answers = load_words(args.answers)
        guesses = load_words(args.guesses)
        config = GameConfig(
            opening=args.opening,
            workers=args.workers,
            executor=args.executor,
            max_turns=args.max_turns,
        )
    except (FileNotFoundError, MalformedWord, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 3) Choose cases (deterministic sample by seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    bar = tqdm(total=len(cases), ncols=80, desc="Playing", unit="game")

    def on_case(r):
        bar.update(1)
        if r["guesses"] > WORDLE_PAR:
            bar.write(f"{r['answer']} => {highlight(str(r['guesses']), args.colour)}")
        else:
            log.debug("%s => %d", r["answer"], r["guesses"])

    # 4) Self-play the batch
    try:
        results = run_batch(cases, guesses=guesses, answers=answers, config=config, on_case=on_case)
    except (InconsistentFeedback, TurnLimitExceeded) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        bar.close()

    summary = summarize(results)
    print(f"Games: {summary['games']}  Average words taken: {summary['mean_guesses']:.4f}  "
          f"Worst: {summary['worst']}")
    print("Histogram: " + "  ".join(f"{k}:{v}" for k, v in summary["histogram"].items()))
    if summary["over_par"]:
        print(f"Over {WORDLE_PAR}: {', '.join(summary['over_par'])}")

    # 5) Optional outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"))
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlists": rep,
            "summary": summary,
        }, str(outdir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
