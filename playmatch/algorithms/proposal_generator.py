"""
Session Proposal Generator

Turns a user and a pool of candidate players into ranked session proposals.

For each candidate the pair is scored (see compatibility.py), gated on the
overall score, and required to share at least one game and one overlapping
time slot. Survivors become "pending" proposals for the first common game
in the user's library order and the first overlapping slot.

Candidates are scored independently of one another, so scoring can fan out
over a thread pool. Results are collected in candidate order before a
stable sort, so the output does not depend on the worker count.
"""

import contextvars
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import date as date_cls, datetime, tzinfo
from typing import Dict, Any, List, Optional, Union
from zoneinfo import ZoneInfo

from playmatch.algorithms.availability import flatten_availability, find_overlapping_slots
from playmatch.algorithms.compatibility import library_game_ids, score_pair
from playmatch.constants.proposals import (
    PENDING,
    REASON_STRONG_PREFERENCE,
    REASON_GOOD_PREFERENCE,
    REASON_EXCELLENT_SCHEDULE,
    REASON_GOOD_SCHEDULE,
    REASON_HIGH_ENGAGEMENT,
    REASON_TEXT,
    FALLBACK_REASON_TEXT,
    UNKNOWN_GAME_NAME,
)
from playmatch.constants.thresholds import (
    PROPOSAL_TTL_MS,
    STRONG_PREFERENCE_THRESHOLD,
    GOOD_PREFERENCE_THRESHOLD,
    EXCELLENT_SCHEDULE_THRESHOLD,
    GOOD_SCHEDULE_THRESHOLD,
    HIGH_ENGAGEMENT_THRESHOLD,
    passes_threshold,
)
from playmatch.core.config import get_settings

logger = logging.getLogger(__name__)


# ============================================================================
# Reasons
# ============================================================================


def reason_categories(preference: float, time_score: float, success: float) -> List[str]:
    """
    Reason category codes triggered by a pair's sub-scores.

    At most one preference code and one schedule code are returned.
    """
    codes = []

    if preference > STRONG_PREFERENCE_THRESHOLD:
        codes.append(REASON_STRONG_PREFERENCE)
    elif preference > GOOD_PREFERENCE_THRESHOLD:
        codes.append(REASON_GOOD_PREFERENCE)

    if time_score > EXCELLENT_SCHEDULE_THRESHOLD:
        codes.append(REASON_EXCELLENT_SCHEDULE)
    elif time_score > GOOD_SCHEDULE_THRESHOLD:
        codes.append(REASON_GOOD_SCHEDULE)

    if success > HIGH_ENGAGEMENT_THRESHOLD:
        codes.append(REASON_HIGH_ENGAGEMENT)

    return codes


def render_reason(codes: List[str]) -> str:
    """English reason text for a list of category codes."""
    parts = [REASON_TEXT[code] for code in codes if code in REASON_TEXT]
    return ", ".join(parts) or FALLBACK_REASON_TEXT


def build_reason(preference: float, time_score: float, success: float) -> str:
    """Human-readable reason for a proposal."""
    return render_reason(reason_categories(preference, time_score, success))


# ============================================================================
# Helpers
# ============================================================================


def find_common_games(profile: Dict[str, Any], candidate: Dict[str, Any]) -> List[str]:
    """
    Game ids in the user's library that the candidate also owns.

    Order follows the user's library; repeated ids are kept once.
    """
    candidate_ids = set(library_game_ids(candidate))
    common: List[str] = []
    for game_id in library_game_ids(profile):
        if game_id in candidate_ids and game_id not in common:
            common.append(game_id)
    return common


def proposed_date_time(slot: Dict[str, Any], timezone: Union[str, tzinfo] = "UTC") -> int:
    """
    Epoch milliseconds for the start of a slot.

    The slot's minutes-of-day are applied as hour/minute to its date in the
    given timezone (an IANA name or an already resolved tzinfo).
    """
    zone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
    day = date_cls.fromisoformat(slot["date"])
    start = datetime(
        day.year, day.month, day.day,
        slot["start"] // 60, slot["start"] % 60,
        tzinfo=zone,
    )
    return int(start.timestamp() * 1000)


def _game_details(profile: Dict[str, Any], game_id: str) -> Dict[str, Any]:
    for game in profile.get("game_library", []):
        if game["game_id"] == game_id:
            return game
    return {}


def _evaluate_candidate(
    user: Dict[str, Any],
    user_schedule: List[Dict[str, Any]],
    entry: Dict[str, Any],
    now_ms: int,
    zone: tzinfo
) -> Optional[Dict[str, Any]]:
    """
    Score one candidate and build its proposal.

    Returns:
        Proposal dict, or None when the pair is filtered out.
    """
    candidate = entry["user"]
    candidate_id = candidate["id"]

    if candidate_id == user["id"]:
        return None

    scores = score_pair(user, candidate, entry.get("interactions", []))

    if not passes_threshold(scores["overall_score"]):
        logger.debug(f"Skipping {candidate_id}: overall score {scores['overall_score']:.3f} below threshold")
        return None

    common_games = find_common_games(user, candidate)
    if not common_games:
        logger.debug(f"Skipping {candidate_id}: no common games")
        return None

    candidate_schedule = flatten_availability(candidate.get("availability", []))
    overlapping_slots = find_overlapping_slots(user_schedule, candidate_schedule)
    if not overlapping_slots:
        logger.debug(f"Skipping {candidate_id}: no overlapping time slots")
        return None

    # First common game and first overlapping slot, not the best ones
    game_id = common_games[0]
    time_slot = overlapping_slots[0]
    game = _game_details(user, game_id)

    codes = reason_categories(
        scores["preference_score"],
        scores["time_compatibility_score"],
        scores["success_rate_score"],
    )

    return {
        "proposed_to_user_id": user["id"],
        "proposed_by_algorithm": True,
        "proposed_participants": [user["id"], candidate_id],
        "game_id": game_id,
        "game_name": game.get("game_name") or UNKNOWN_GAME_NAME,
        "game_image": game.get("game_image"),
        "proposed_date_time": proposed_date_time(time_slot, zone),
        "status": PENDING,
        **scores,
        "reason": render_reason(codes),
        "reason_codes": codes,
        "created_at": now_ms,
        "expires_at": now_ms + PROPOSAL_TTL_MS,
        "metadata": {
            "common_games": common_games,
            "overlapping_time_slot_count": len(overlapping_slots),
        },
    }


# ============================================================================
# Generation
# ============================================================================


def generate_proposals(
    user: Dict[str, Any],
    user_interactions: List[Dict[str, Any]],
    candidates: List[Dict[str, Any]],
    limit: Optional[int] = None,
    now: Optional[int] = None,
    max_workers: Optional[int] = None,
    timezone: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Generate ranked session proposals for a user.

    Args:
        user: Subject profile ({"id", "game_library", "availability"}).
        user_interactions: The subject's own interaction records. Scoring
            uses each candidate's history, so these only feed the run log.
        candidates: List of {"user": profile, "interactions": [...]} entries.
        limit: Maximum proposals returned (default from settings).
        now: Creation time in epoch ms (default: current time).
        max_workers: Threads for candidate scoring; 1 or less is sequential.
        timezone: IANA timezone for proposed_date_time (default from settings).

    Returns:
        Pending proposals sorted by overall_score descending, at most limit.
        Ties keep candidate input order.
    """
    settings = get_settings()
    if limit is None:
        limit = settings.PROPOSAL_LIMIT_DEFAULT
    if max_workers is None:
        max_workers = settings.MATCH_MAX_WORKERS
    if timezone is None:
        timezone = settings.PROPOSAL_TIMEZONE
    if now is None:
        now = int(time.time() * 1000)

    if limit <= 0 or not candidates:
        return []

    # Raises ZoneInfoNotFoundError up front, before any candidate is scored
    zone = ZoneInfo(timezone)
    user_schedule = flatten_availability(user.get("availability", []))

    def evaluate(entry: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return _evaluate_candidate(user, user_schedule, entry, now, zone)

    if max_workers > 1 and len(candidates) > 1:
        # Each task runs in a copy of the caller's context so log lines keep the trace id
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(contextvars.copy_context().run, evaluate, entry)
                for entry in candidates
            ]
            results = [future.result() for future in futures]
    else:
        results = [evaluate(entry) for entry in candidates]

    proposals = [p for p in results if p is not None]
    proposals.sort(key=lambda p: p["overall_score"], reverse=True)

    logger.info(
        f"Generated {len(proposals)} proposals for user {user['id']} "
        f"from {len(candidates)} candidates ({len(user_interactions)} own interactions), "
        f"returning {min(len(proposals), limit)}"
    )

    return proposals[:limit]
