"""
Availability Schemas

Pydantic models for availability intervals and the interval endpoints.
Matches the dict shapes used by playmatch.algorithms.availability.

Validation here is the caller-side contract of the algorithms: once a
request parses, every interval satisfies 0 <= start < end <= 1440.
"""

from datetime import date
from typing import Annotated, List, Optional
from pydantic import AfterValidator, BaseModel, Field, ConfigDict, model_validator

from playmatch.constants.thresholds import MINUTES_PER_DAY


def _check_iso_date(value: str) -> str:
    date.fromisoformat(value)
    return value


IsoDate = Annotated[str, AfterValidator(_check_iso_date)]


class Interval(BaseModel):
    """Half-open [start, end) range in minutes since midnight."""
    start: int = Field(..., description="Start minute (inclusive)", ge=0, lt=MINUTES_PER_DAY)
    end: int = Field(..., description="End minute (exclusive)", gt=0, le=MINUTES_PER_DAY)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_start_before_end(self) -> "Interval":
        if self.start >= self.end:
            raise ValueError(f"start ({self.start}) must be before end ({self.end})")
        return self


class DayAvailability(BaseModel):
    """Intervals offered on one calendar date."""
    date: IsoDate = Field(..., description="ISO date (YYYY-MM-DD)")
    intervals: List[Interval] = Field(default_factory=list, description="Availability intervals")

    model_config = ConfigDict(extra="forbid")


# ============================================================================
# Requests
# ============================================================================


class MergeRequest(BaseModel):
    """Request body for interval normalization."""
    intervals: List[Interval] = Field(..., description="Intervals to normalize")


class IntervalChangeRequest(BaseModel):
    """Request body for adding or removing one interval."""
    intervals: List[Interval] = Field(..., description="Existing interval set")
    interval: Interval = Field(..., description="Interval to add or remove")


class IntersectRequest(BaseModel):
    """Request body for intersecting two interval sets."""
    a: List[Interval] = Field(..., description="First interval set")
    b: List[Interval] = Field(..., description="Second interval set")


class SlotsRequest(BaseModel):
    """Request body for fixed-length slot enumeration."""
    intervals: List[Interval] = Field(..., description="Interval set to enumerate")
    duration: int = Field(..., description="Slot length in minutes", gt=0, le=MINUTES_PER_DAY)
    granularity: Optional[int] = Field(None, description="Step between slot starts in minutes", gt=0)
