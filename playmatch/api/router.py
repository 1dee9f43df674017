"""
Central API Router

Aggregates all endpoint routers for the match-proposal service.
"""

import logging
from fastapi import APIRouter

from playmatch.api.availability import router as availability_router
from playmatch.api.proposals import router as proposals_router

logger = logging.getLogger(__name__)

# Main API router
api_router = APIRouter()

api_router.include_router(availability_router)
api_router.include_router(proposals_router)

logger.info(f"API router initialized with {len(api_router.routes)} routes")
