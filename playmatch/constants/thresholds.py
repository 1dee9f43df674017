"""
Threshold Constants

Centralized weights and thresholds used by the matching algorithms.

IMPORTANT: Changing any value here changes which proposals are emitted and
how they rank. Keep tests in playmatch/tests in step with these values.
"""

# ============================================================================
# Availability
# ============================================================================

MINUTES_PER_DAY = 1440
DEFAULT_SLOT_GRANULARITY_MINUTES = 15


# ============================================================================
# Compatibility Scoring
# SYNC WITH: playmatch/algorithms/compatibility.py
# ============================================================================

# Weights for overall score (must sum to 1.0)
WEIGHT_PREFERENCE = 0.5
WEIGHT_TIME = 0.3
WEIGHT_SUCCESS = 0.2

# Success-rate points per interaction type
ACCEPTED_POINTS = 1.2
INTERESTED_POINTS = 1.0
DECLINED_POINTS = 0.0

# Users with no interaction history get a neutral prior
NEUTRAL_SUCCESS_RATE = 0.5


# ============================================================================
# Proposal Generation
# SYNC WITH: playmatch/algorithms/proposal_generator.py
# ============================================================================

# Pairs must score strictly above this to be proposed
MIN_OVERALL_SCORE = 0.3

DEFAULT_PROPOSAL_LIMIT = 10
PROPOSAL_TTL_MS = 7 * 24 * 60 * 60 * 1000  # 7 days

# Reason category thresholds (strictly greater than)
STRONG_PREFERENCE_THRESHOLD = 0.7
GOOD_PREFERENCE_THRESHOLD = 0.4
EXCELLENT_SCHEDULE_THRESHOLD = 0.7
GOOD_SCHEDULE_THRESHOLD = 0.4
HIGH_ENGAGEMENT_THRESHOLD = 0.8


# ============================================================================
# Helper Functions
# ============================================================================

def passes_threshold(overall_score: float) -> bool:
    """
    Check if a pair's overall score is high enough to be proposed.

    Example:
        >>> passes_threshold(0.5)
        True
        >>> passes_threshold(0.3)
        False
    """
    return overall_score > MIN_OVERALL_SCORE
