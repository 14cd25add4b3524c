from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

import pytest
from packages.solvers import PartitionSolver, best_guess, make_executor, partition_score, score

CANDS = ["crane", "slate", "trace"]
WORDS = [
    "crane", "trace", "slate", "alloy", "loyal", "speed", "abide", "eerie",
    "there", "level", "belle", "geese", "sleep", "llama", "hello", "otter",
]


def test_score_by_hand():
    # crane splits the three into singletons; xxxxx leaves one bucket of 3
    assert score("crane", CANDS) == 3
    assert score("xxxxx", CANDS) == 9


def test_score_matches_partition_score():
    for g in WORDS:
        assert score(g, WORDS) == partition_score(g, WORDS), g


def test_score_parallel_over_hypotheticals():
    with ThreadPoolExecutor(max_workers=3) as pool:
        for g in WORDS[:5]:
            assert score(g, WORDS, executor=pool) == score(g, WORDS)


def test_best_guess_prefers_lowest_score():
    assert best_guess(["xxxxx", "crane"], CANDS) == "crane"


def test_best_guess_ties_go_to_dictionary_order():
    assert best_guess(["xxxxx", "yyyyy", "zzzzz"], CANDS) == "xxxxx"
    guesses = ["qqqqq"] * 100 + ["crane", "trace"]
    with ThreadPoolExecutor(max_workers=4) as pool:
        assert best_guess(guesses, CANDS, executor=pool) == "crane"


def test_best_guess_reports_progress():
    seen = []
    best_guess(WORDS, CANDS, on_progress=seen.append)
    assert sum(seen) == len(WORDS)


def test_best_guess_same_with_exact_scoring():
    assert best_guess(WORDS, WORDS, scorer=score) == best_guess(WORDS, WORDS)


def test_best_guess_in_process_pool():
    with ProcessPoolExecutor(max_workers=2) as pool:
        assert best_guess(WORDS, WORDS, executor=pool) == best_guess(WORDS, WORDS)


def test_best_guess_empty_dictionary():
    with pytest.raises(ValueError):
        best_guess([], CANDS)


def test_make_executor_validates():
    with pytest.raises(ValueError):
        make_executor(0)
    with pytest.raises(ValueError):
        make_executor(2, "fibers")


def test_solver_guesses_directly_when_few_left():
    solver = PartitionSolver(["xxxxx", "crane"], opening="roate")
    assert solver.opening() == "roate"
    assert solver.next_guess(["slate"]) == "slate"
    assert solver.next_guess(["trace", "slate"]) == "trace"
    assert solver.next_guess(CANDS) == "crane"


def test_score_matches_partition_score_with_absent_repeats():
    words = ["crane", "otter", "speed", "eerie", "there", "geese"]
    assert score("speed", words) == partition_score("speed", words) == 6
    for g in words:
        assert score(g, words) == partition_score(g, words), g
