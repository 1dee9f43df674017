"""
Availability Interval Algorithms

Pure operations over sets of availability intervals. An interval is a dict
{"start": int, "end": int} in minutes since midnight, half-open [start, end).

A normalized interval set is sorted by start with no two intervals
overlapping or touching. merge_intervals() is the only producer of
normalized sets; every other function here either goes through it or
documents that it does not.

No I/O and no error paths - degenerate inputs map to defined outputs.
"""

import logging
from typing import Dict, Any, List

from playmatch.constants.thresholds import DEFAULT_SLOT_GRANULARITY_MINUTES

logger = logging.getLogger(__name__)

Interval = Dict[str, int]


# ============================================================================
# Time Conversion
# ============================================================================


def time_to_minutes(time_string: str) -> int:
    """
    Convert "HH:MM" to minutes since midnight.

    Missing or non-numeric parts count as zero.

    Example:
        >>> time_to_minutes("10:30")
        630
        >>> time_to_minutes("9")
        540
    """
    parts = (time_string or "").split(":")
    hours = parts[0] if len(parts) > 0 else ""
    minutes = parts[1] if len(parts) > 1 else ""
    hours_value = int(hours) if hours.strip().isdigit() else 0
    minutes_value = int(minutes) if minutes.strip().isdigit() else 0
    return hours_value * 60 + minutes_value


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight to a zero-padded "HH:MM" string.

    Example:
        >>> minutes_to_time(630)
        '10:30'
    """
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


# ============================================================================
# Interval Set Operations
# ============================================================================


def merge_intervals(intervals: List[Interval]) -> List[Interval]:
    """
    Normalize an interval list with a sort and a single sweep.

    Overlapping AND touching intervals are coalesced: [600, 660) and
    [660, 720) become [600, 720). The input list and its dicts are not
    modified.

    Args:
        intervals: Intervals in any order, possibly overlapping.

    Returns:
        Minimal normalized interval list.
    """
    if not intervals:
        return []

    ordered = sorted(intervals, key=lambda i: i["start"])
    merged = [{"start": ordered[0]["start"], "end": ordered[0]["end"]}]

    for current in ordered[1:]:
        last = merged[-1]
        if current["start"] <= last["end"]:
            last["end"] = max(last["end"], current["end"])
        else:
            merged.append({"start": current["start"], "end": current["end"]})

    return merged


def add_interval(existing: List[Interval], new_interval: Interval) -> List[Interval]:
    """Add an interval to a set and return the re-normalized set."""
    return merge_intervals(list(existing) + [new_interval])


def remove_interval(existing: List[Interval], to_remove: Interval) -> List[Interval]:
    """
    Cut a range out of an interval set.

    Each existing interval yields zero, one or two pieces depending on how it
    overlaps the removed range. Pieces are emitted in source order and are
    not re-merged.

    Example:
        >>> remove_interval([{"start": 600, "end": 720}], {"start": 650, "end": 700})
        [{'start': 600, 'end': 650}, {'start': 700, 'end': 720}]
    """
    result: List[Interval] = []

    for interval in existing:
        if interval["end"] <= to_remove["start"] or interval["start"] >= to_remove["end"]:
            result.append({"start": interval["start"], "end": interval["end"]})
            continue

        # Piece before the removed range
        if interval["start"] < to_remove["start"]:
            result.append({
                "start": interval["start"],
                "end": min(interval["end"], to_remove["start"]),
            })

        # Piece after the removed range
        if interval["end"] > to_remove["end"]:
            result.append({
                "start": max(interval["start"], to_remove["end"]),
                "end": interval["end"],
            })

    return result


def intersect_intervals(intervals_a: List[Interval], intervals_b: List[Interval]) -> List[Interval]:
    """
    Intersect two interval sets.

    Intervals that only touch do not intersect (zero-length overlap is
    dropped), unlike merge_intervals() where touching intervals coalesce.

    Returns:
        Normalized intersection.
    """
    result: List[Interval] = []

    for a in intervals_a:
        for b in intervals_b:
            start = max(a["start"], b["start"])
            end = min(a["end"], b["end"])
            if start < end:
                result.append({"start": start, "end": end})

    return merge_intervals(result)


def is_time_available(intervals: List[Interval], time_in_minutes: int) -> bool:
    """True if some interval contains the minute, using [start, end)."""
    return any(i["start"] <= time_in_minutes < i["end"] for i in intervals)


def find_available_slots(
    intervals: List[Interval],
    duration_minutes: int,
    granularity_minutes: int = DEFAULT_SLOT_GRANULARITY_MINUTES
) -> List[Interval]:
    """
    Enumerate fixed-length candidate slots inside each interval.

    A window of duration_minutes slides by granularity_minutes while it still
    fits in the interval. Intervals shorter than the duration yield nothing.

    Args:
        intervals: Interval set to enumerate.
        duration_minutes: Length of each slot.
        granularity_minutes: Step between slot starts.

    Returns:
        Slots in interval order, then start order.
    """
    slots: List[Interval] = []
    if duration_minutes <= 0 or granularity_minutes <= 0:
        return slots

    for interval in intervals:
        start = interval["start"]
        while start + duration_minutes <= interval["end"]:
            slots.append({"start": start, "end": start + duration_minutes})
            start += granularity_minutes

    return slots


# ============================================================================
# Day Availability
# ============================================================================


def update_day_availability(
    availability: List[Dict[str, Any]],
    date: str,
    intervals: List[Interval]
) -> List[Dict[str, Any]]:
    """
    Replace one day's intervals in an availability list.

    The new intervals are normalized first. An empty result removes the day;
    a new day is inserted keeping the list sorted by date. The input list is
    not modified.

    Args:
        availability: List of {"date", "intervals"} dicts sorted by date.
        date: ISO date ("YYYY-MM-DD") to update.
        intervals: New intervals for that date.

    Returns:
        New availability list.
    """
    merged = merge_intervals(intervals)
    updated = [day for day in availability if day["date"] != date]
    existed = len(updated) != len(availability)

    if not merged:
        if existed:
            logger.debug(f"Cleared availability for {date}")
        return updated

    updated.append({"date": date, "intervals": merged})
    updated.sort(key=lambda day: day["date"])
    return updated


def get_availability_for_date(availability: List[Dict[str, Any]], date: str) -> List[Interval]:
    """Intervals for a date, or an empty list if the date has none."""
    for day in availability:
        if day["date"] == date:
            return day["intervals"]
    return []


def flatten_availability(availability: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Flatten day availability into a schedule of time slots.

    Returns:
        One {"date", "start", "end"} dict per interval per date, in order.
    """
    return [
        {"date": day["date"], "start": interval["start"], "end": interval["end"]}
        for day in availability
        for interval in day.get("intervals", [])
    ]


def find_overlapping_slots(
    schedule_a: List[Dict[str, Any]],
    schedule_b: List[Dict[str, Any]]
) -> List[Dict[str, Any]]:
    """
    Pairwise same-date overlap fragments between two schedules.

    Every (a, b) pair on the same date with a non-empty overlap produces one
    fragment, ordered by a then b. Fragments are neither merged nor
    deduplicated, so raw schedules with self-overlaps can yield overlapping
    fragments.
    """
    overlaps: List[Dict[str, Any]] = []

    for slot_a in schedule_a:
        for slot_b in schedule_b:
            if slot_a["date"] != slot_b["date"]:
                continue
            start = max(slot_a["start"], slot_b["start"])
            end = min(slot_a["end"], slot_b["end"])
            if start < end:
                overlaps.append({"date": slot_a["date"], "start": start, "end": end})

    return overlaps
