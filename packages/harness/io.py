"""
I/O utilities for self-play runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep spreadsheet apps from
  reading strings like "=~..=" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt
import json
import subprocess


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "=~..=" -> "'=~..="
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      answer, success, guesses, time_ms, resets,
      guess_1, patt_1, ..., guess_K, patt_K
    where K is the longest game in the batch (games have no fixed turn cap).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["answer", "success", "guesses", "time_ms", "resets"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "answer": r.get("answer") or "",
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "resets": r.get("resets", 0),
            }

            # Expand history into fixed columns (spreadsheet-safe patterns)
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlists: output of datasets.validate_wordlists(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
