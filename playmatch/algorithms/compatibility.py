"""
Compatibility Scoring Algorithm

Deterministic pairwise compatibility between two players, built from three
independent sub-scores in [0, 1]:

- game preference overlap (Jaccard index of game libraries)
- time slot compatibility (shared minutes relative to offered minutes)
- historical success rate (how the candidate responded to past sessions)

and a fixed-weight overall score. No randomness, no I/O.
"""

import logging
from typing import Dict, Any, Iterable, List

from playmatch.algorithms.availability import flatten_availability
from playmatch.constants.proposals import INTERACTION_ACCEPTED, INTERACTION_INTERESTED
from playmatch.constants.thresholds import (
    ACCEPTED_POINTS,
    INTERESTED_POINTS,
    DECLINED_POINTS,
    NEUTRAL_SUCCESS_RATE,
    WEIGHT_PREFERENCE,
    WEIGHT_TIME,
    WEIGHT_SUCCESS,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Sub-scores
# ============================================================================


def game_preference_overlap(games_a: Iterable[str], games_b: Iterable[str]) -> float:
    """
    Jaccard similarity of two game-id collections.

    Both inputs are treated as sets, so duplicates never change the result.

    Returns:
        |A & B| / |A | B|, or 0.0 when either side is empty.
    """
    set_a = set(games_a)
    set_b = set(games_b)

    if not set_a or not set_b:
        return 0.0

    return len(set_a & set_b) / len(set_a | set_b)


def time_slot_compatibility(
    schedule_a: List[Dict[str, Any]],
    schedule_b: List[Dict[str, Any]]
) -> float:
    """
    Score how well two schedules line up.

    Schedules are flat lists of {"date", "start", "end"} and need not be
    merged. Overlap is summed over every same-date pair; the denominator is
    the plain sum of every slot length on both sides (self-overlaps are
    counted twice). Doubling the overlap lets two identical schedules reach
    1.0 while lopsided schedule sizes are penalized.

    Returns:
        min(2 * overlap / total, 1), or 0.0 when either schedule is empty.
    """
    if not schedule_a or not schedule_b:
        return 0.0

    overlap_minutes = 0
    for slot_a in schedule_a:
        for slot_b in schedule_b:
            if slot_a["date"] != slot_b["date"]:
                continue
            overlap_minutes += max(
                0, min(slot_a["end"], slot_b["end"]) - max(slot_a["start"], slot_b["start"])
            )

    total_minutes = sum(slot["end"] - slot["start"] for slot in schedule_a)
    total_minutes += sum(slot["end"] - slot["start"] for slot in schedule_b)

    if total_minutes <= 0:
        return 0.0

    return min(overlap_minutes * 2 / total_minutes, 1.0)


def success_rate(user_id: str, interactions: List[Dict[str, Any]]) -> float:
    """
    Engagement score from a user's past session interactions.

    Accepted sessions are worth slightly more than expressions of interest;
    declines are worth nothing. New users (no records for user_id) get a
    neutral prior.

    Args:
        user_id: User whose history is scored.
        interactions: Interaction records; records of other users are ignored.

    Returns:
        Score in [0, 1].
    """
    own = [i for i in interactions if i.get("user_id") == user_id]

    if not own:
        return NEUTRAL_SUCCESS_RATE

    score = 0.0
    for interaction in own:
        interaction_type = interaction.get("interaction_type")
        if interaction_type == INTERACTION_ACCEPTED:
            score += ACCEPTED_POINTS
        elif interaction_type == INTERACTION_INTERESTED:
            score += INTERESTED_POINTS
        else:
            score += DECLINED_POINTS

    max_possible = len(own) * ACCEPTED_POINTS
    return min(score / max_possible, 1.0)


def overall_score(scores: Dict[str, float]) -> float:
    """Weighted combination of the three sub-scores (weights sum to 1)."""
    return (
        scores["preference_score"] * WEIGHT_PREFERENCE +
        scores["time_compatibility_score"] * WEIGHT_TIME +
        scores["success_rate_score"] * WEIGHT_SUCCESS
    )


# ============================================================================
# Pair Scoring
# ============================================================================


def library_game_ids(profile: Dict[str, Any]) -> List[str]:
    """Game ids of a profile's library, in library order (duplicates kept)."""
    return [game["game_id"] for game in profile.get("game_library", [])]


def score_pair(
    profile: Dict[str, Any],
    candidate: Dict[str, Any],
    candidate_interactions: List[Dict[str, Any]]
) -> Dict[str, float]:
    """
    Score one user/candidate pair.

    The success rate is computed for the candidate from the candidate's own
    interaction list.

    Args:
        profile: Subject user profile.
        candidate: Candidate user profile.
        candidate_interactions: The candidate's interaction records.

    Returns:
        Dict with preference_score, time_compatibility_score,
        success_rate_score and overall_score.
    """
    scores = {
        "preference_score": game_preference_overlap(
            library_game_ids(profile),
            library_game_ids(candidate),
        ),
        "time_compatibility_score": time_slot_compatibility(
            flatten_availability(profile.get("availability", [])),
            flatten_availability(candidate.get("availability", [])),
        ),
        "success_rate_score": success_rate(candidate["id"], candidate_interactions),
    }
    scores["overall_score"] = overall_score(scores)
    return scores
