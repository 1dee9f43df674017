"""
Availability API Endpoints

Stateless interval operations. The caller sends interval sets and gets the
result back; nothing is stored.

Endpoints:
- POST /availability/merge - Normalize an interval list
- POST /availability/add - Add one interval to a set
- POST /availability/remove - Cut one interval out of a set
- POST /availability/intersect - Intersect two sets
- POST /availability/slots - Enumerate fixed-length slots
"""

import logging
from typing import List

from fastapi import APIRouter, Request

from playmatch.algorithms.availability import (
    merge_intervals,
    add_interval,
    remove_interval,
    intersect_intervals,
    find_available_slots,
)
from playmatch.api.common import get_trace_id, standard_response
from playmatch.core.config import settings
from playmatch.schemas.availability import (
    Interval,
    MergeRequest,
    IntervalChangeRequest,
    IntersectRequest,
    SlotsRequest,
)
from playmatch.schemas.base import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/availability", tags=["availability"])


def _dump(intervals: List[Interval]) -> List[dict]:
    return [i.model_dump() for i in intervals]


@router.post("/merge", response_model=ApiResponse)
async def merge(body: MergeRequest, request: Request):
    """Normalize intervals: sort and coalesce overlapping or touching ranges."""
    trace_id = get_trace_id(request)
    merged = merge_intervals(_dump(body.intervals))
    return standard_response(
        message=f"Merged {len(body.intervals)} intervals into {len(merged)}",
        data={"intervals": merged},
        trace_id=trace_id
    )


@router.post("/add", response_model=ApiResponse)
async def add(body: IntervalChangeRequest, request: Request):
    """Add an interval and return the normalized set."""
    trace_id = get_trace_id(request)
    result = add_interval(_dump(body.intervals), body.interval.model_dump())
    return standard_response(
        message=f"Availability now has {len(result)} intervals",
        data={"intervals": result},
        trace_id=trace_id
    )


@router.post("/remove", response_model=ApiResponse)
async def remove(body: IntervalChangeRequest, request: Request):
    """Remove an interval, splitting any interval it falls inside."""
    trace_id = get_trace_id(request)
    result = remove_interval(_dump(body.intervals), body.interval.model_dump())
    return standard_response(
        message=f"Availability now has {len(result)} intervals",
        data={"intervals": result},
        trace_id=trace_id
    )


@router.post("/intersect", response_model=ApiResponse)
async def intersect(body: IntersectRequest, request: Request):
    """Common availability of two interval sets."""
    trace_id = get_trace_id(request)
    result = intersect_intervals(_dump(body.a), _dump(body.b))
    return standard_response(
        message=f"Found {len(result)} shared intervals",
        data={"intervals": result},
        trace_id=trace_id
    )


@router.post("/slots", response_model=ApiResponse)
async def slots(body: SlotsRequest, request: Request):
    """Enumerate fixed-length candidate slots inside an interval set."""
    trace_id = get_trace_id(request)
    granularity = body.granularity or settings.SLOT_GRANULARITY_MINUTES
    result = find_available_slots(_dump(body.intervals), body.duration, granularity)
    return standard_response(
        message=f"Found {len(result)} slots of {body.duration} minutes",
        data={"slots": result, "duration": body.duration, "granularity": granularity},
        trace_id=trace_id
    )
