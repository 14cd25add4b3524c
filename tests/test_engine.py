import itertools

import pytest
from packages.engine import (
    NOTATIONS, MalformedFeedback, MalformedWord, Feedback, Notation, Status, Word,
    compute, filter_candidates, is_consistent, parse,
)

LETTERS = NOTATIONS["letters"]

# Small dictionary full of repeated letters for the property checks
WORDS = [
    "crane", "trace", "slate", "alloy", "loyal", "speed", "abide", "eerie",
    "there", "level", "belle", "geese", "sleep", "mamma", "llama", "hello",
    "otter", "roate", "array", "radar", "lemon", "scoop", "cools", "eager",
]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("alloy", "loyal", "~~~~~"),
    ("crane", "trace", "~==.="),
    ("belle", "level", ".=~~~"),
    ("lemon", "level", "==..."),
    ("cools", "scoop", "~~=.~"),
    ("speed", "abide", "..~.~"),
    ("eerie", "there", "~.~.="),
    ("geese", "eager", "~~~.."),
    ("level", "level", "====="),
])
def test_compute_golden(guess, answer, expected):
    assert compute(guess, answer).pattern() == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
])
def test_compute_letters_notation(guess, answer, expected):
    assert compute(guess, answer).pattern(LETTERS) == expected


def test_word_normalizes_and_rejects():
    assert Word(" CRANE\n") == "crane"
    assert Word(Word("crane")) == Word("crane")
    assert {Word("crane"), "crane"} == {"crane"}
    for bad in ["cranes", "cran", "cr4ne", "", "crâne"]:
        with pytest.raises(MalformedWord):
            Word(bad)


def test_parse_symbols_and_letters():
    fb = parse("crane", " ~==.= ")
    assert fb.guess == "crane"
    assert fb.statuses == (Status.PRESENT, Status.EXACT, Status.EXACT, Status.ABSENT, Status.EXACT)
    assert parse("crane", "ygg-g", LETTERS).statuses == fb.statuses


@pytest.mark.parametrize("text", ["=~..", "=~..==", "=~.x=", "GYG-G"])
def test_parse_rejects_malformed(text):
    with pytest.raises(MalformedFeedback):
        parse("crane", text)


def test_feedback_requires_five_statuses():
    with pytest.raises(MalformedFeedback):
        Feedback(Word("crane"), (Status.EXACT,) * 4)


def test_notation_must_be_distinct():
    with pytest.raises(ValueError):
        Notation(exact="=", present="=", absent=".")


@pytest.mark.parametrize("notation", sorted(NOTATIONS))
def test_notation_round_trip(notation):
    n = NOTATIONS[notation]
    for statuses in itertools.product(list(Status), repeat=5):
        assert n.decode(n.encode(statuses)) == statuses


def test_win_flag():
    assert compute("trace", "trace").is_win
    assert not compute("crane", "trace").is_win


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    cand = filter_candidates(words, parse("raise", "YY--G", LETTERS))
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_keeps_order_and_never_grows():
    fb = compute("crane", "trace")
    out = filter_candidates(WORDS, fb)
    assert out == [w for w in WORDS if w in out]
    assert len(out) <= len(WORDS)
    assert out == ["trace"]


def test_repeated_letters_are_not_over_rejected():
    # The second 'l' is absent: no l beyond the exact one, but that one stays
    fb = compute("hello", "below")
    assert fb.pattern() == ".==.~"
    assert is_consistent(fb, "below")
    assert not is_consistent(fb, "hello")
    assert not is_consistent(fb, "bells")


def test_answer_is_consistent_with_its_own_feedback():
    for g, a in itertools.product(WORDS, repeat=2):
        assert is_consistent(compute(g, a), a), (g, a)


def test_filter_matches_compute_exactly():
    for g, a1, a2 in itertools.product(WORDS, repeat=3):
        same = compute(g, a1).statuses == compute(g, a2).statuses
        assert is_consistent(compute(g, a1), a2) is same, (g, a1, a2)


def test_absent_letter_cannot_sit_in_its_guessed_slot():
    # otter has 'e' where speed's absent 'e' was, so it would have scored EXACT
    fb = compute("speed", "crane")
    assert fb.pattern() == "..~.."
    assert compute("speed", "otter").pattern() == "...=."
    assert not is_consistent(fb, "otter")
    assert filter_candidates(["otter", "crane"], fb) == ["crane"]


def test_feedback_normalizes_guess_and_statuses():
    fb = Feedback("CRANE", [Status.EXACT] * 5)
    assert fb.guess == "crane" and isinstance(fb.guess, Word)
    assert fb.statuses == (Status.EXACT,) * 5
    assert fb.is_win
    assert is_consistent(Feedback("CRANE", [Status.EXACT] * 5), "crane")


def test_feedback_rejects_non_status_values():
    with pytest.raises(MalformedFeedback):
        Feedback(Word("crane"), ["=", "=", "=", "=", "="])
