"""
Proposal Constants

Status values, interaction types and reason categories for session proposals.

Reason categories are the machine-readable form of a proposal's "reason".
The English rendering lives in REASON_TEXT so a presentation layer can
substitute its own locale without touching the scoring code.
"""

from typing import Dict, FrozenSet, List

# ============================================================================
# Proposal Status
# ============================================================================

PENDING = "pending"
ACCEPTED = "accepted"
DECLINED = "declined"
EXPIRED = "expired"

PROPOSAL_STATUSES: List[str] = [PENDING, ACCEPTED, DECLINED, EXPIRED]
TERMINAL_STATUSES: FrozenSet[str] = frozenset({ACCEPTED, DECLINED, EXPIRED})


def is_valid_status_transition(current: str, new: str) -> bool:
    """
    Check a proposal status change.

    Only pending proposals move, and only to a terminal status.

    Example:
        >>> is_valid_status_transition("pending", "accepted")
        True
        >>> is_valid_status_transition("declined", "pending")
        False
    """
    return current == PENDING and new in TERMINAL_STATUSES


# ============================================================================
# Interaction Types
# ============================================================================

INTERACTION_INTERESTED = "interested"
INTERACTION_DECLINED = "declined"
INTERACTION_ACCEPTED = "accepted"

INTERACTION_TYPES: List[str] = [
    INTERACTION_INTERESTED,
    INTERACTION_DECLINED,
    INTERACTION_ACCEPTED,
]


# ============================================================================
# Reason Categories
# ============================================================================

REASON_STRONG_PREFERENCE = "strong_preference"
REASON_GOOD_PREFERENCE = "good_preference"
REASON_EXCELLENT_SCHEDULE = "excellent_schedule"
REASON_GOOD_SCHEDULE = "good_schedule"
REASON_HIGH_ENGAGEMENT = "high_engagement"

ALL_REASON_CODES: List[str] = [
    REASON_STRONG_PREFERENCE,
    REASON_GOOD_PREFERENCE,
    REASON_EXCELLENT_SCHEDULE,
    REASON_GOOD_SCHEDULE,
    REASON_HIGH_ENGAGEMENT,
]

REASON_TEXT: Dict[str, str] = {
    REASON_STRONG_PREFERENCE: "Strong game preference match",
    REASON_GOOD_PREFERENCE: "Good game overlap",
    REASON_EXCELLENT_SCHEDULE: "Excellent schedule compatibility",
    REASON_GOOD_SCHEDULE: "Good availability match",
    REASON_HIGH_ENGAGEMENT: "High engagement history",
}

FALLBACK_REASON_TEXT = "Potential match based on overall compatibility"

UNKNOWN_GAME_NAME = "Unknown Game"
