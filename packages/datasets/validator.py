"""
Dictionary validator.

What this module does:
- Validate a pair of word lists: the answer dictionary (possible hidden
  words) and the guess dictionary (every legal guess).
- Count valid 5-letter words and invalid lines; detect duplicates; compute
  SHA-256 of the raw files.
- Check that answers ⊆ guesses (the solver may need to guess any answer).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("answer_words.txt", "wordle.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import MalformedWord, Word


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # number of valid words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, guesses) pair."""
    answers: FileReport
    guesses: FileReport
    answers_subset_guesses: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Read a dictionary leniently: blank lines are ignored, anything else that
    isn't a 5-letter word counts as invalid.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            try:
                valid.append(Word(raw))
            except MalformedWord:
                invalid += 1
    return valid, invalid


def _file_report(path: Path) -> Tuple[FileReport, set]:
    words, invalid = _load_and_check(path)
    uniq = set(words)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(uniq),
        invalid_lines=invalid,
    )
    return rep, uniq


def validate_wordlists(answers_path: str, guesses_path: str) -> Dict:
    """
    Validate the answer/guess dictionaries.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both files non-empty, no invalid lines, answers ⊆ guesses.
    """
    issues: List[str] = []
    ans_p = Path(answers_path)
    gss_p = Path(guesses_path)

    if not ans_p.exists() or not gss_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not gss_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        rep = ValidationReport(
            answers=FileReport(answers_path, ans_p.exists(), 0, "", 0, 0),
            guesses=FileReport(guesses_path, gss_p.exists(), 0, "", 0, 0),
            answers_subset_guesses=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    ans_report, answers_set = _file_report(ans_p)
    gss_report, guesses_set = _file_report(gss_p)

    subset_ok = answers_set.issubset(guesses_set)
    if not subset_ok:
        missing = sorted(answers_set - guesses_set)[:5]
        issues.append(f"answers not subset of guesses (e.g., {missing})")

    for label, rep in (("answers", ans_report), ("guesses", gss_report)):
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    passed = (
            subset_ok
            and ans_report.invalid_lines == 0
            and gss_report.invalid_lines == 0
            and ans_report.count > 0
            and gss_report.count > 0
    )

    rep = ValidationReport(
        answers=ans_report,
        guesses=gss_report,
        answers_subset_guesses=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        answers=2315 (uniq=2315, sha=abc123...) | guesses=12972 (uniq=12972, sha=def456...) | answers⊆guesses=True | OK
    """
    a = report["answers"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆guesses={report['answers_subset_guesses']} | {status}"
    )
