"""
Unit tests for the day scheduling algorithm.
"""

import math
from datetime import datetime, timedelta, timezone

from dayplanner.models.planner import BusySlot, TaskToSchedule, TimeInterval
from dayplanner.services.day_scheduler import (
    clean_busy_slots,
    clean_tasks,
    compute_free_intervals,
    place_tasks,
)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute, tzinfo=timezone.utc)


def span(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    return (start, end)


def spans(intervals) -> list[tuple[datetime, datetime]]:
    return [(interval.start, interval.end) for interval in intervals]


# ============================================
# compute_free_intervals
# ============================================


def test_free_intervals_without_busy_is_whole_window():
    free = compute_free_intervals(at(8), at(18), [])

    assert spans(free) == [span(at(8), at(18))]


def test_free_intervals_empty_when_window_is_empty():
    assert compute_free_intervals(at(18), at(8), []) == []
    assert compute_free_intervals(at(8), at(8), []) == []


def test_free_intervals_sorts_and_merges_overlapping_busy():
    busy = [
        TimeInterval(at(13), at(14)),
        TimeInterval(at(9), at(10, 30)),
        TimeInterval(at(10), at(11)),
        TimeInterval(at(9, 15), at(9, 45)),
    ]

    free = compute_free_intervals(at(8), at(18), busy)

    assert spans(free) == [
        span(at(8), at(9)),
        span(at(11), at(13)),
        span(at(14), at(18)),
    ]


def test_free_intervals_busy_covering_window_start():
    busy = [TimeInterval(at(7), at(9))]

    free = compute_free_intervals(at(8), at(18), busy)

    assert spans(free) == [span(at(9), at(18))]


def test_free_intervals_busy_past_window_end_is_clipped():
    busy = [TimeInterval(at(17), at(20)), TimeInterval(at(19), at(21))]

    free = compute_free_intervals(at(8), at(18), busy)

    assert spans(free) == [span(at(8), at(17))]


def test_free_intervals_adjacent_busy_leaves_no_zero_length_gap():
    busy = [TimeInterval(at(9), at(10)), TimeInterval(at(10), at(11))]

    free = compute_free_intervals(at(8), at(12), busy)

    assert spans(free) == [span(at(8), at(9)), span(at(11), at(12))]


def test_free_intervals_fully_busy_day():
    busy = [TimeInterval(at(0), at(23, 59))]

    assert compute_free_intervals(at(8), at(18), busy) == []


# ============================================
# place_tasks
# ============================================


def test_place_tasks_skips_gap_too_small_for_task():
    free = compute_free_intervals(at(8), at(18), [TimeInterval(at(9), at(10))])
    tasks = [TaskToSchedule(id="1", duration=90), TaskToSchedule(id="2", duration=30)]

    placed = place_tasks("owner", tasks, free)

    assert spans(free) == [span(at(8), at(9)), span(at(10), at(18))]
    # Task 2 is first-fit into the earlier 60-minute gap that task 1 could not use.
    assert [(p.task, p.planned_start, p.planned_end) for p in placed] == [
        ("1", at(10), at(11, 30)),
        ("2", at(8), at(8, 30)),
    ]
    assert all(p.owner == "owner" for p in placed)


def test_place_tasks_fill_after_first_gap_is_used():
    free = compute_free_intervals(at(8), at(18), [TimeInterval(at(9), at(10))])
    tasks = [
        TaskToSchedule(id="0", duration=60),
        TaskToSchedule(id="1", duration=90),
        TaskToSchedule(id="2", duration=30),
    ]

    placed = place_tasks("owner", tasks, free)

    assert [(p.task, p.planned_start, p.planned_end) for p in placed] == [
        ("0", at(8), at(9)),
        ("1", at(10), at(11, 30)),
        ("2", at(11, 30), at(12)),
    ]


def test_place_tasks_first_fit_keeps_input_order():
    free = [TimeInterval(at(8), at(9, 30))]
    tasks = [TaskToSchedule(id="A", duration=60), TaskToSchedule(id="B", duration=60)]

    placed = place_tasks("owner", tasks, free)

    assert [p.task for p in placed] == ["A"]


def test_place_tasks_later_small_task_backfills_earlier_gap():
    free = [TimeInterval(at(8), at(8, 30)), TimeInterval(at(10), at(12))]
    tasks = [TaskToSchedule(id="long", duration=60), TaskToSchedule(id="short", duration=20)]

    placed = place_tasks("owner", tasks, free)

    assert [(p.task, p.planned_start) for p in placed] == [
        ("long", at(10)),
        ("short", at(8)),
    ]


def test_place_tasks_exact_fit_consumes_interval():
    free = [TimeInterval(at(8), at(9)), TimeInterval(at(10), at(11))]
    tasks = [
        TaskToSchedule(id="a", duration=60),
        TaskToSchedule(id="b", duration=60),
        TaskToSchedule(id="c", duration=1),
    ]

    placed = place_tasks("owner", tasks, free)

    assert [(p.task, p.planned_start, p.planned_end) for p in placed] == [
        ("a", at(8), at(9)),
        ("b", at(10), at(11)),
    ]


def test_place_tasks_does_not_mutate_free_intervals():
    free = [TimeInterval(at(8), at(10))]

    place_tasks("owner", [TaskToSchedule(id="a", duration=30)], free)

    assert spans(free) == [span(at(8), at(10))]


def test_place_tasks_fractional_duration():
    placed = place_tasks(
        "owner",
        [TaskToSchedule(id="a", duration=2.5)],
        [TimeInterval(at(8), at(9))],
    )

    assert placed[0].planned_end - placed[0].planned_start == timedelta(minutes=2.5)


def test_place_tasks_invariants_hold_for_many_tasks():
    busy = [
        TimeInterval(at(9), at(10)),
        TimeInterval(at(12), at(13)),
        TimeInterval(at(15, 30), at(16)),
    ]
    free = compute_free_intervals(at(8), at(18), busy)
    durations = [45, 120, 15, 90, 30, 200, 60, 25, 10]
    tasks = [TaskToSchedule(id=str(i), duration=d) for i, d in enumerate(durations)]

    placed = place_tasks("owner", tasks, free)

    ordered = sorted(placed, key=lambda p: p.planned_start)
    for earlier, later in zip(ordered, ordered[1:]):
        assert earlier.planned_end <= later.planned_start
    for p in placed:
        assert any(f.start <= p.planned_start and p.planned_end <= f.end for f in free)
        assert not any(b.start < p.planned_end and p.planned_start < b.end for b in busy)
    total = sum((p.planned_end - p.planned_start for p in placed), timedelta())
    assert total <= sum((f.end - f.start for f in free), timedelta())


# ============================================
# Input cleaning
# ============================================


def test_clean_busy_slots_skips_malformed_and_normalizes_to_utc():
    jst = timezone(timedelta(hours=9))
    slots = [
        BusySlot(start=at(9), end=at(10)),
        BusySlot(start=at(11), end=at(11)),
        BusySlot(start=at(13), end=at(12)),
        BusySlot(start=None, end=at(12)),
        BusySlot(start=datetime(2026, 3, 2, 23, 0, tzinfo=jst), end=datetime(2026, 3, 2, 23, 30, tzinfo=jst)),
        BusySlot(start=datetime(2026, 3, 2, 16, 0), end=datetime(2026, 3, 2, 17, 0)),
    ]

    cleaned = clean_busy_slots(slots)

    assert spans(cleaned) == [
        span(at(9), at(10)),
        span(at(14), at(14, 30)),
        span(at(16), at(17)),
    ]
    assert all(interval.start.tzinfo == timezone.utc for interval in cleaned)


def test_clean_tasks_skips_missing_and_non_positive_durations():
    tasks = [
        TaskToSchedule(id="ok", duration=30),
        TaskToSchedule(id="zero", duration=0),
        TaskToSchedule(id="negative", duration=-5),
        TaskToSchedule(id="missing"),
        TaskToSchedule(duration=10),
        TaskToSchedule(id=7, duration=15),
    ]

    assert [task.id for task in clean_tasks(tasks)] == ["ok", "7"]


def test_clean_tasks_skips_non_finite_durations():
    tasks = [
        TaskToSchedule(id="nan", duration=math.nan),
        TaskToSchedule(id="inf", duration=math.inf),
        TaskToSchedule(id="-inf", duration=-math.inf),
        TaskToSchedule(id="ok", duration=30),
    ]

    assert [task.id for task in clean_tasks(tasks)] == ["ok"]


def test_place_tasks_skips_duration_beyond_timedelta_range():
    tasks = [TaskToSchedule(id="huge", duration=1e13), TaskToSchedule(id="ok", duration=30)]

    placed = place_tasks("owner", tasks, [TimeInterval(at(8), at(18))])

    assert [(p.task, p.planned_start, p.planned_end) for p in placed] == [
        ("ok", at(8), at(8, 30)),
    ]
