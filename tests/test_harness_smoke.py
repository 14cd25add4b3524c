import pytest
from packages.engine import InconsistentFeedback, MalformedWord, TurnLimitExceeded, compute, parse
from packages.harness import GameConfig, SimulatedFeedback, run_batch, run_case, simulate, summarize

TRIO = ["crane", "slate", "trace"]
ANSWERS = [
    "crane", "trace", "slate", "alloy", "loyal", "speed", "abide", "eerie",
    "there", "level", "belle", "geese", "sleep", "llama", "hello", "otter",
]
GUESSES = ANSWERS + ["roate", "salet", "adieu", "crate"]


def test_scenario_crane_then_trace():
    cfg = GameConfig(opening="crane", workers=1)
    r = run_case(SimulatedFeedback("trace"), guesses=TRIO, answers=TRIO, config=cfg, answer="trace")
    assert r["success"] is True
    assert r["guesses"] == 2
    assert r["history"] == [("crane", "~==.="), ("trace", "=====")]
    assert r["resets"] == 0


def test_opening_can_win_immediately():
    cfg = GameConfig(opening="crane")
    assert simulate("crane", guesses=TRIO, answers=TRIO, config=cfg) == 1


def test_every_answer_terminates_and_candidates_shrink():
    cfg = GameConfig(opening="roate")
    for ans in ANSWERS:
        remaining = []
        r = run_case(
            SimulatedFeedback(ans), guesses=GUESSES, answers=ANSWERS, config=cfg,
            on_turn=lambda turn, fb, left: remaining.append(left),
        )
        assert r["success"] is True
        assert r["guesses"] <= len(ANSWERS)
        assert remaining == sorted(remaining, reverse=True)
        assert remaining[-1] >= 1


def test_batch_with_worker_pool_and_summary():
    cfg = GameConfig(opening="roate", workers=2)
    seen = []
    results = run_batch(ANSWERS, guesses=GUESSES, answers=ANSWERS, config=cfg, on_case=seen.append)
    assert [r["answer"] for r in results] == ANSWERS
    assert len(seen) == len(ANSWERS)
    s = summarize(results)
    assert s["games"] == len(ANSWERS)
    assert 1 <= s["mean_guesses"] <= s["worst"]
    assert sum(s["histogram"].values()) == len(ANSWERS)
    assert s["resets"] == 0


class _Scripted:
    """Feedback source that replays fixed notation strings."""

    def __init__(self, *patterns):
        self.patterns = list(patterns)
        self.asked = []

    def __call__(self, guess):
        self.asked.append(guess)
        return parse(guess, self.patterns.pop(0))


def test_contradictory_feedback_resets_and_repeats_the_guess():
    remaining = []
    source = _Scripted(".....", "~==.=", "=====")
    r = run_case(
        source, guesses=GUESSES, answers=TRIO, config=GameConfig(opening="crane"),
        on_turn=lambda turn, fb, left: remaining.append(left),
    )
    # reset happens only once the filtered set is exactly empty
    assert remaining[0] == 0
    assert r["resets"] == 1
    # the same word is asked again so the player can correct the feedback
    assert source.asked[1] == source.asked[0] == "crane"
    assert source.asked[2] == "trace"
    assert r["guesses"] == 3
    assert [p for _, p in r["history"]] == [".....", "~==.=", "====="]


def test_strict_mode_raises_on_contradiction():
    cfg = GameConfig(opening="crane", on_exhausted="strict")
    with pytest.raises(InconsistentFeedback) as exc:
        run_case(_Scripted("....."), guesses=GUESSES, answers=TRIO, config=cfg)
    assert exc.value.history == [("crane", ".....")]


def test_max_turns_guard():
    cfg = GameConfig(opening="crane", max_turns=1)
    with pytest.raises(TurnLimitExceeded):
        run_case(SimulatedFeedback("trace"), guesses=TRIO, answers=TRIO, config=cfg)


def test_history_uses_configured_notation():
    cfg = GameConfig(opening="crane", notation="letters")
    r = run_case(SimulatedFeedback("trace"), guesses=TRIO, answers=TRIO, config=cfg)
    assert r["history"][0] == ("crane", compute("crane", "trace").pattern(cfg.get_notation()))
    assert r["history"][0][1] == "YGG-G"


@pytest.mark.parametrize("kwargs", [
    {"workers": 0}, {"executor": "fibers"}, {"on_exhausted": "ignore"},
    {"notation": "emoji"}, {"max_turns": 0},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_rejects_bad_opening():
    with pytest.raises(MalformedWord):
        GameConfig(opening="rote")
