"""
FastAPI Application Entry Point

Stateless HTTP surface for the match-proposal engine.
"""

import logging
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playmatch.api import api_router, API_VERSION
from playmatch.core.config import settings
from playmatch.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging()
    # Fail at startup on an unknown PROPOSAL_TIMEZONE
    ZoneInfo(settings.PROPOSAL_TIMEZONE)
    logger.info(f"Match service starting up (env={settings.APP_ENV})...")

    yield

    logger.info("Match service shutdown complete")


app = FastAPI(
    title="Playmatch - Session Proposal Service",
    description="Compatibility scoring and session proposals for board-game players",
    version=API_VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "service": "Playmatch",
        "status": "running",
        "version": API_VERSION
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "playmatch",
        "components": {
            "api": "ok",
            "matching_engine": "ok"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
