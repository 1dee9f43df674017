"""
Proposals API Endpoints

Compatibility scoring and session proposal generation.

Endpoints:
- POST /proposals/score - Score one user/candidate pair
- POST /proposals/generate - Generate ranked proposals from a candidate pool

The caller owns loading profiles and interactions, and persisting and
notifying on the returned proposals.
"""

import logging
import time

from fastapi import APIRouter, Request

from playmatch.algorithms.compatibility import score_pair
from playmatch.algorithms.proposal_generator import generate_proposals, reason_categories, render_reason
from playmatch.api.common import get_trace_id, standard_response
from playmatch.core.errors import ValidationError, InternalError, to_http_exception
from playmatch.schemas.base import ApiResponse
from playmatch.schemas.proposal import (
    ScorePairRequest,
    ScorePairResult,
    GenerateProposalsRequest,
    ProposalListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/proposals", tags=["proposals"])

ALGORITHM_ID = "jaccard_weighted_scoring"


@router.post("/score", response_model=ApiResponse)
def score(body: ScorePairRequest, request: Request):
    """
    Score a single pair.

    Returns the three sub-scores, the weighted overall score and the reason
    categories the pair triggers. No threshold is applied.
    """
    trace_id = get_trace_id(request)

    if body.user.id == body.candidate.id:
        raise to_http_exception(
            ValidationError("Cannot score a user against themselves", details={"field": "candidate.id"})
        )

    scores = score_pair(
        body.user.model_dump(),
        body.candidate.model_dump(),
        [i.model_dump() for i in body.candidate_interactions],
    )
    codes = reason_categories(
        scores["preference_score"],
        scores["time_compatibility_score"],
        scores["success_rate_score"],
    )
    result = ScorePairResult(**scores, reason=render_reason(codes), reason_codes=codes)

    return standard_response(
        message=f"Overall compatibility {scores['overall_score']:.2f}",
        data=result.model_dump(),
        proofs={"trace_id": trace_id, "algorithm": ALGORITHM_ID},
        trace_id=trace_id
    )


# Sync handler: scoring is CPU-bound and FastAPI runs it in the threadpool
@router.post("/generate", response_model=ProposalListResponse)
def generate(body: GenerateProposalsRequest, request: Request):
    """
    Generate ranked session proposals.

    Candidates scoring at or below the threshold, or sharing no game or no
    time slot with the user, are left out silently.
    """
    trace_id = get_trace_id(request)
    started = time.perf_counter()

    try:
        proposals = generate_proposals(
            user=body.user.model_dump(),
            user_interactions=[i.model_dump() for i in body.user_interactions],
            candidates=[c.model_dump() for c in body.candidates],
            limit=body.limit,
        )
    except Exception as e:
        logger.exception(f"[{trace_id[:8]}] Failed to generate proposals: {e}")
        raise to_http_exception(InternalError("Failed to generate session proposals"))

    latency_ms = round((time.perf_counter() - started) * 1000, 2)

    return standard_response(
        message=f"Generated {len(proposals)} session proposals",
        data={"proposals": proposals, "total_candidates": len(body.candidates)},
        proofs={"trace_id": trace_id, "algorithm": ALGORITHM_ID, "latency_ms": latency_ms},
        trace_id=trace_id
    )
