"""
Availability Interval Tests

Tests for the pure interval operations in playmatch.algorithms.availability.

Run: pytest playmatch/tests/test_availability.py -v
"""

import pytest

from playmatch.algorithms.availability import (
    merge_intervals,
    add_interval,
    remove_interval,
    intersect_intervals,
    is_time_available,
    find_available_slots,
    update_day_availability,
    get_availability_for_date,
    flatten_availability,
    find_overlapping_slots,
    time_to_minutes,
    minutes_to_time,
)


def iv(start, end):
    return {"start": start, "end": end}


def assert_normalized(intervals):
    for prev, nxt in zip(intervals, intervals[1:]):
        assert nxt["start"] > prev["end"]
    for interval in intervals:
        assert interval["start"] < interval["end"]


# ==================== Merge ====================

def test_merge_overlapping_intervals():
    """Overlapping intervals coalesce; disjoint ones stay apart."""
    result = merge_intervals([iv(600, 720), iv(700, 800), iv(900, 960)])
    assert result == [iv(600, 800), iv(900, 960)]


def test_merge_touching_intervals():
    """Touching intervals count as overlapping."""
    assert merge_intervals([iv(600, 660), iv(660, 720)]) == [iv(600, 720)]


def test_merge_sorts_input():
    result = merge_intervals([iv(900, 960), iv(600, 660), iv(300, 360)])
    assert result == [iv(300, 360), iv(600, 660), iv(900, 960)]


def test_merge_contained_interval():
    assert merge_intervals([iv(600, 800), iv(650, 700)]) == [iv(600, 800)]


def test_merge_empty():
    assert merge_intervals([]) == []


def test_merge_does_not_mutate_input():
    original = [iv(600, 720), iv(700, 800)]
    merge_intervals(original)
    assert original == [iv(600, 720), iv(700, 800)]


@pytest.mark.parametrize("intervals", [
    [iv(600, 720), iv(700, 800), iv(800, 810), iv(100, 200)],
    [iv(0, 1440), iv(300, 400)],
    [iv(50, 60), iv(10, 20), iv(20, 30), iv(35, 40)],
    [iv(600, 720)],
])
def test_merge_is_idempotent_and_normalized(intervals):
    """merge(merge(X)) == merge(X), and output is sorted and non-touching."""
    once = merge_intervals(intervals)
    assert merge_intervals(once) == once
    assert_normalized(once)


# ==================== Add / Remove ====================

def test_add_interval_merges():
    assert add_interval([iv(600, 660)], iv(650, 720)) == [iv(600, 720)]


def test_add_interval_disjoint():
    assert add_interval([iv(900, 960)], iv(600, 660)) == [iv(600, 660), iv(900, 960)]


def test_remove_interval_splits():
    """Removing a range from the middle leaves two pieces."""
    assert remove_interval([iv(600, 720)], iv(650, 700)) == [iv(600, 650), iv(700, 720)]


def test_remove_interval_left_overlap():
    assert remove_interval([iv(600, 720)], iv(700, 800)) == [iv(600, 700)]


def test_remove_interval_right_overlap():
    assert remove_interval([iv(600, 720)], iv(500, 650)) == [iv(650, 720)]


def test_remove_interval_full_containment():
    assert remove_interval([iv(600, 720)], iv(500, 800)) == []


def test_remove_interval_no_overlap():
    """Touching the removed range is not an overlap."""
    assert remove_interval([iv(600, 720), iv(900, 960)], iv(720, 900)) == [iv(600, 720), iv(900, 960)]


def test_remove_interval_preserves_fragment_order():
    result = remove_interval([iv(100, 300), iv(400, 600)], iv(200, 500))
    assert result == [iv(100, 200), iv(500, 600)]


def test_add_then_remove_round_trip():
    """Removing a freshly added region restores the original set."""
    original = [iv(900, 960), iv(600, 660)]
    region = iv(700, 800)
    assert remove_interval(add_interval(original, region), region) == merge_intervals(original)


# ==================== Intersect ====================

def test_intersect_partial_overlap():
    assert intersect_intervals([iv(600, 720)], [iv(660, 780)]) == [iv(660, 720)]


def test_intersect_touching_is_empty():
    """Touching intervals share zero minutes, so nothing is returned."""
    assert intersect_intervals([iv(600, 660)], [iv(660, 720)]) == []


def test_intersect_result_is_merged():
    result = intersect_intervals([iv(600, 700), iv(690, 800)], [iv(650, 750)])
    assert result == [iv(650, 750)]


def test_intersect_with_empty():
    assert intersect_intervals([iv(600, 720)], []) == []


# ==================== Membership / Slots ====================

def test_is_time_available_half_open():
    intervals = [iv(600, 720)]
    assert is_time_available(intervals, 600) is True
    assert is_time_available(intervals, 719) is True
    assert is_time_available(intervals, 720) is False
    assert is_time_available(intervals, 599) is False


def test_find_available_slots():
    slots = find_available_slots([iv(600, 720)], 60, 30)
    assert slots == [iv(600, 660), iv(630, 690), iv(660, 720)]


def test_find_available_slots_default_granularity():
    slots = find_available_slots([iv(600, 660)], 30)
    assert [s["start"] for s in slots] == [600, 615, 630]


def test_find_available_slots_interval_too_short():
    assert find_available_slots([iv(600, 630), iv(700, 800)], 60, 60) == [iv(700, 760)]


# ==================== Conversion ====================

def test_time_conversion():
    assert time_to_minutes("10:30") == 630
    assert time_to_minutes("9") == 540
    assert time_to_minutes("") == 0
    assert minutes_to_time(630) == "10:30"
    assert minutes_to_time(65) == "01:05"


# ==================== Day Availability ====================

def test_update_day_availability_inserts_sorted():
    availability = [{"date": "2024-01-03", "intervals": [iv(600, 660)]}]
    result = update_day_availability(availability, "2024-01-01", [iv(700, 760), iv(600, 700)])

    assert [d["date"] for d in result] == ["2024-01-01", "2024-01-03"]
    assert result[0]["intervals"] == [iv(600, 760)]
    # Input untouched
    assert len(availability) == 1


def test_update_day_availability_replaces_and_removes():
    availability = [
        {"date": "2024-01-01", "intervals": [iv(600, 660)]},
        {"date": "2024-01-02", "intervals": [iv(600, 660)]},
    ]

    replaced = update_day_availability(availability, "2024-01-01", [iv(900, 960)])
    assert get_availability_for_date(replaced, "2024-01-01") == [iv(900, 960)]

    removed = update_day_availability(availability, "2024-01-02", [])
    assert [d["date"] for d in removed] == ["2024-01-01"]


def test_get_availability_for_missing_date():
    assert get_availability_for_date([], "2024-01-01") == []


def test_flatten_availability():
    availability = [
        {"date": "2024-01-01", "intervals": [iv(600, 720), iv(840, 960)]},
        {"date": "2024-01-02", "intervals": [iv(60, 120)]},
    ]
    assert flatten_availability(availability) == [
        {"date": "2024-01-01", "start": 600, "end": 720},
        {"date": "2024-01-01", "start": 840, "end": 960},
        {"date": "2024-01-02", "start": 60, "end": 120},
    ]


def test_find_overlapping_slots_raw_fragments():
    """Each same-date overlapping pair yields one fragment, unmerged."""
    a = [
        {"date": "2024-01-01", "start": 600, "end": 720},
        {"date": "2024-01-01", "start": 650, "end": 700},
        {"date": "2024-01-02", "start": 600, "end": 720},
    ]
    b = [
        {"date": "2024-01-01", "start": 660, "end": 780},
        {"date": "2024-01-03", "start": 600, "end": 720},
    ]
    assert find_overlapping_slots(a, b) == [
        {"date": "2024-01-01", "start": 660, "end": 720},
        {"date": "2024-01-01", "start": 660, "end": 700},
    ]
