"""
Algorithms Package

Provides the deterministic matching algorithms:
- availability: Interval normalization, add/remove/intersect, slot enumeration
- compatibility: Pairwise compatibility sub-scores and weighted overall score
- proposal_generator: Candidate filtering, ranking and proposal construction

All algorithms are pure (no I/O, no randomness) and operate on plain dicts.
"""

from playmatch.algorithms.availability import (
    merge_intervals,
    add_interval,
    remove_interval,
    intersect_intervals,
    is_time_available,
    find_available_slots,
    update_day_availability,
    get_availability_for_date,
    flatten_availability,
    find_overlapping_slots,
    time_to_minutes,
    minutes_to_time,
)
from playmatch.algorithms.compatibility import (
    game_preference_overlap,
    time_slot_compatibility,
    success_rate,
    overall_score,
    score_pair,
)
from playmatch.algorithms.proposal_generator import (
    generate_proposals,
    build_reason,
    reason_categories,
    render_reason,
)

__all__ = [
    "merge_intervals",
    "add_interval",
    "remove_interval",
    "intersect_intervals",
    "is_time_available",
    "find_available_slots",
    "update_day_availability",
    "get_availability_for_date",
    "flatten_availability",
    "find_overlapping_slots",
    "time_to_minutes",
    "minutes_to_time",
    "game_preference_overlap",
    "time_slot_compatibility",
    "success_rate",
    "overall_score",
    "score_pair",
    "generate_proposals",
    "build_reason",
    "reason_categories",
    "render_reason",
]
