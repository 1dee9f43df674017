"""
Proposal Schemas

Pydantic models for user profiles, interaction records and session proposals.
Matches the dicts consumed and produced by playmatch.algorithms.proposal_generator.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict

from playmatch.schemas.availability import DayAvailability
from playmatch.schemas.base import Proofs

InteractionType = Literal["interested", "declined", "accepted"]
ProposalStatus = Literal["pending", "accepted", "declined", "expired"]


class GameEntry(BaseModel):
    """One game in a user's library."""
    game_id: str = Field(..., description="Game identifier")
    game_name: Optional[str] = Field(None, description="Display name")
    game_image: Optional[str] = Field(None, description="Image URL")
    expertise_level: Optional[str] = Field(None, description="beginner/intermediate/expert")

    model_config = ConfigDict(extra="allow")


class UserProfile(BaseModel):
    """
    User profile as seen by the matching engine.

    game_library may list a game more than once; scoring treats it as a set.
    """
    id: str = Field(..., description="User identifier")
    game_library: List[GameEntry] = Field(default_factory=list, description="Owned games")
    availability: List[DayAvailability] = Field(default_factory=list, description="Availability by date")

    model_config = ConfigDict(extra="allow")


class InteractionRecord(BaseModel):
    """A user's response to a session."""
    user_id: str = Field(..., description="User who interacted")
    session_id: str = Field(..., description="Session interacted with")
    interaction_type: InteractionType = Field(..., description="interested/declined/accepted")
    created_at: Optional[int] = Field(None, description="Epoch ms")

    model_config = ConfigDict(extra="allow")


class Candidate(BaseModel):
    """A candidate profile with its own interaction history."""
    user: UserProfile
    interactions: List[InteractionRecord] = Field(default_factory=list)


class ProposalScore(BaseModel):
    """Compatibility sub-scores and overall score, each in [0, 1]."""
    preference_score: float = Field(..., ge=0, le=1)
    time_compatibility_score: float = Field(..., ge=0, le=1)
    success_rate_score: float = Field(..., ge=0, le=1)
    overall_score: float = Field(..., ge=0, le=1)


class ProposalMetadata(BaseModel):
    common_games: List[str] = Field(..., description="Shared game ids in the user's library order")
    overlapping_time_slot_count: int = Field(..., ge=0)


class SessionProposal(ProposalScore):
    """
    A proposed play session.

    Created by the generator with status "pending". Later transitions
    (accepted, declined, expired) belong to the proposal store.
    """
    proposed_to_user_id: str
    proposed_by_algorithm: bool = True
    proposed_participants: List[str]
    game_id: str
    game_name: str
    game_image: Optional[str] = None
    proposed_date_time: int = Field(..., description="Epoch ms of the proposed start")
    status: ProposalStatus
    reason: str
    reason_codes: List[str]
    created_at: int
    expires_at: int
    metadata: ProposalMetadata


# ============================================================================
# Requests / Responses
# ============================================================================


class ScorePairRequest(BaseModel):
    """Request body for scoring a single pair."""
    user: UserProfile
    candidate: UserProfile
    candidate_interactions: List[InteractionRecord] = Field(default_factory=list)


class ScorePairResult(ProposalScore):
    reason: str
    reason_codes: List[str]


class GenerateProposalsRequest(BaseModel):
    """Request body for proposal generation."""
    user: UserProfile
    user_interactions: List[InteractionRecord] = Field(default_factory=list)
    candidates: List[Candidate] = Field(default_factory=list)
    limit: Optional[int] = Field(None, description="Maximum proposals returned", ge=1)


class ProposalListResult(BaseModel):
    proposals: List[SessionProposal]
    total_candidates: int = Field(..., ge=0)


class ProposalListResponse(BaseModel):
    message: str
    data: ProposalListResult
    proofs: Proofs
