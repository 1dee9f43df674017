"""
Constants Package

Centralized constants for the match-proposal service.

Exports:
- Threshold values (score weights, proposal gate, reason thresholds)
- Proposal constants (statuses, interaction types, reason categories)

Safe to import anywhere - no heavy dependencies or circular imports.
"""

from .thresholds import (
    MINUTES_PER_DAY,
    DEFAULT_SLOT_GRANULARITY_MINUTES,
    WEIGHT_PREFERENCE,
    WEIGHT_TIME,
    WEIGHT_SUCCESS,
    NEUTRAL_SUCCESS_RATE,
    MIN_OVERALL_SCORE,
    DEFAULT_PROPOSAL_LIMIT,
    PROPOSAL_TTL_MS,
    passes_threshold,
)

from .proposals import (
    PENDING,
    ACCEPTED,
    DECLINED,
    EXPIRED,
    PROPOSAL_STATUSES,
    TERMINAL_STATUSES,
    INTERACTION_TYPES,
    ALL_REASON_CODES,
    REASON_TEXT,
    is_valid_status_transition,
)

__all__ = [
    # Thresholds
    "MINUTES_PER_DAY",
    "DEFAULT_SLOT_GRANULARITY_MINUTES",
    "WEIGHT_PREFERENCE",
    "WEIGHT_TIME",
    "WEIGHT_SUCCESS",
    "NEUTRAL_SUCCESS_RATE",
    "MIN_OVERALL_SCORE",
    "DEFAULT_PROPOSAL_LIMIT",
    "PROPOSAL_TTL_MS",
    "passes_threshold",
    # Proposals
    "PENDING",
    "ACCEPTED",
    "DECLINED",
    "EXPIRED",
    "PROPOSAL_STATUSES",
    "TERMINAL_STATUSES",
    "INTERACTION_TYPES",
    "ALL_REASON_CODES",
    "REASON_TEXT",
    "is_valid_status_transition",
]
