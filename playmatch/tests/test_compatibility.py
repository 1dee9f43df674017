"""
Compatibility Scoring Tests

Tests for deterministic scoring functions:
- game_preference_overlap()
- time_slot_compatibility()
- success_rate()
- overall_score() / score_pair()

Run: pytest playmatch/tests/test_compatibility.py -v
"""

import pytest


def slot(date, start, end):
    return {"date": date, "start": start, "end": end}


# ==================== Game Preference Overlap ====================

def test_overlap_empty_lists():
    """Either side empty scores 0."""
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap([], ["g1"]) == 0
    assert game_preference_overlap(["g1"], []) == 0
    assert game_preference_overlap([], []) == 0


def test_overlap_identical_lists():
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap(["g1", "g2"], ["g2", "g1"]) == 1


def test_overlap_partial_match():
    """Two shared out of four distinct games."""
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap(["g1", "g2", "g3"], ["g2", "g3", "g4"]) == pytest.approx(0.5)


def test_overlap_disjoint():
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap(["g1"], ["g2"]) == 0


def test_overlap_ignores_duplicates():
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap(["g1", "g1", "g2"], ["g1", "g2", "g2"]) == 1


@pytest.mark.parametrize("a,b", [
    (["g1", "g2", "g3"], ["g3", "g4"]),
    (["g1"], ["g1", "g2", "g3", "g4"]),
    (["g1", "g1"], []),
])
def test_overlap_is_symmetric(a, b):
    from playmatch.algorithms.compatibility import game_preference_overlap

    assert game_preference_overlap(a, b) == game_preference_overlap(b, a)


# ==================== Time Slot Compatibility ====================

def test_time_compatibility_empty_schedule():
    from playmatch.algorithms.compatibility import time_slot_compatibility

    assert time_slot_compatibility([], [slot("2024-01-01", 600, 720)]) == 0
    assert time_slot_compatibility([slot("2024-01-01", 600, 720)], []) == 0


def test_time_compatibility_identical():
    from playmatch.algorithms.compatibility import time_slot_compatibility

    schedule = [slot("2024-01-01", 600, 720)]
    assert time_slot_compatibility(schedule, list(schedule)) == pytest.approx(1.0)


def test_time_compatibility_partial_overlap():
    """60 shared minutes out of 240 offered -> 2 * 60 / 240."""
    from playmatch.algorithms.compatibility import time_slot_compatibility

    score = time_slot_compatibility(
        [slot("2024-01-01", 600, 720)],
        [slot("2024-01-01", 660, 780)],
    )
    assert score == pytest.approx(0.5)


def test_time_compatibility_different_dates():
    from playmatch.algorithms.compatibility import time_slot_compatibility

    score = time_slot_compatibility(
        [slot("2024-01-01", 600, 720)],
        [slot("2024-01-02", 600, 720)],
    )
    assert score == 0


def test_time_compatibility_no_overlap():
    from playmatch.algorithms.compatibility import time_slot_compatibility

    score = time_slot_compatibility(
        [slot("2024-01-01", 600, 660)],
        [slot("2024-01-01", 660, 720)],
    )
    assert score == 0


def test_time_compatibility_multiple_slots():
    from playmatch.algorithms.compatibility import time_slot_compatibility

    score = time_slot_compatibility(
        [slot("2024-01-01", 600, 720), slot("2024-01-01", 840, 960)],
        [slot("2024-01-01", 660, 780), slot("2024-01-01", 900, 1020)],
    )
    # 120 shared minutes out of 480 offered
    assert score == pytest.approx(0.5)


def test_time_compatibility_clamped_to_one():
    """Self-overlapping raw input can push the ratio past 1."""
    from playmatch.algorithms.compatibility import time_slot_compatibility

    score = time_slot_compatibility(
        [slot("2024-01-01", 600, 720), slot("2024-01-01", 600, 720)],
        [slot("2024-01-01", 600, 720)],
    )
    assert score == 1.0


# ==================== Success Rate ====================

def test_success_rate_no_history(make_interaction):
    from playmatch.algorithms.compatibility import success_rate

    assert success_rate("u1", []) == 0.5
    assert success_rate("u1", [make_interaction("u2", "accepted")]) == 0.5


def test_success_rate_mixed(make_interaction):
    """(1.0 + 1.2 + 0) / (3 * 1.2)"""
    from playmatch.algorithms.compatibility import success_rate

    interactions = [
        make_interaction("u1", "interested", "s1"),
        make_interaction("u1", "accepted", "s2"),
        make_interaction("u1", "declined", "s3"),
        make_interaction("u2", "declined", "s1"),
    ]
    assert success_rate("u1", interactions) == pytest.approx(0.6111, abs=1e-3)


def test_success_rate_all_declined(make_interaction):
    from playmatch.algorithms.compatibility import success_rate

    interactions = [make_interaction("u1", "declined", f"s{i}") for i in range(3)]
    assert success_rate("u1", interactions) == 0


def test_success_rate_accepted_beats_interested(make_interaction):
    from playmatch.algorithms.compatibility import success_rate

    accepted = [make_interaction("u1", "accepted", f"s{i}") for i in range(2)]
    interested = [make_interaction("u1", "interested", f"s{i}") for i in range(2)]

    assert success_rate("u1", accepted) > success_rate("u1", interested)
    assert success_rate("u1", accepted) == pytest.approx(1.0)


# ==================== Overall Score ====================

def test_overall_score_weights():
    from playmatch.algorithms.compatibility import overall_score

    scores = {
        "preference_score": 1.0,
        "time_compatibility_score": 0.0,
        "success_rate_score": 0.0,
    }
    assert overall_score(scores) == pytest.approx(0.5)

    scores = {
        "preference_score": 0.0,
        "time_compatibility_score": 1.0,
        "success_rate_score": 1.0,
    }
    assert overall_score(scores) == pytest.approx(0.5)


def test_score_pair_end_to_end(make_profile):
    """Half the games, half the time, neutral history -> 0.5 overall."""
    from playmatch.algorithms.compatibility import score_pair

    user = make_profile("u1", ["g1", "g2", "g3"], [("2024-01-01", 600, 720)])
    candidate = make_profile("u2", ["g2", "g3", "g4"], [("2024-01-01", 660, 780)])

    scores = score_pair(user, candidate, [])

    assert scores["preference_score"] == pytest.approx(0.5)
    assert scores["time_compatibility_score"] == pytest.approx(0.5)
    assert scores["success_rate_score"] == 0.5
    assert scores["overall_score"] == pytest.approx(0.5)
