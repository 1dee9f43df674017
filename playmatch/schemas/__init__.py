"""
Pydantic Schemas Package

Typed request/response models for the match-proposal endpoints.
All schemas match the plain dicts the algorithms consume and produce, so a
parsed model's model_dump() can be handed straight to the engine.

Export Groups:
- Base: Proofs, ApiResponse
- Availability: Interval, DayAvailability, interval request bodies
- Proposal: UserProfile, InteractionRecord, SessionProposal, request bodies
"""

from playmatch.schemas.base import (
    Proofs,
    ApiResponse
)

from playmatch.schemas.availability import (
    Interval,
    DayAvailability,
    MergeRequest,
    IntervalChangeRequest,
    IntersectRequest,
    SlotsRequest
)

from playmatch.schemas.proposal import (
    GameEntry,
    UserProfile,
    InteractionRecord,
    Candidate,
    ProposalScore,
    ProposalMetadata,
    SessionProposal,
    ScorePairRequest,
    ScorePairResult,
    GenerateProposalsRequest,
    ProposalListResult,
    ProposalListResponse
)

__all__ = [
    # Base
    "Proofs",
    "ApiResponse",
    # Availability
    "Interval",
    "DayAvailability",
    "MergeRequest",
    "IntervalChangeRequest",
    "IntersectRequest",
    "SlotsRequest",
    # Proposal
    "GameEntry",
    "UserProfile",
    "InteractionRecord",
    "Candidate",
    "ProposalScore",
    "ProposalMetadata",
    "SessionProposal",
    "ScorePairRequest",
    "ScorePairResult",
    "GenerateProposalsRequest",
    "ProposalListResult",
    "ProposalListResponse",
]
