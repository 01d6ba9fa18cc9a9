"""
Day scheduling algorithm.

Pure functions with no I/O:
- compute_free_intervals: subtracts busy slots from a planning window
- place_tasks: greedy first-fit placement of tasks into free intervals, in input order
- clean_tasks / clean_busy_slots: drop malformed inputs before planning
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from dayplanner.core.logger import setup_logger
from dayplanner.models.planner import (
    BusySlot,
    ScheduledTaskCreate,
    TaskToSchedule,
    TimeInterval,
)
from dayplanner.utils.datetime_utils import ensure_utc

logger = setup_logger(__name__)


def clean_busy_slots(busy_slots: Iterable[BusySlot]) -> list[TimeInterval]:
    """Convert busy slots to UTC intervals, skipping ones with a missing bound or start >= end."""
    intervals: list[TimeInterval] = []
    dropped = 0
    for slot in busy_slots:
        if slot.start is None or slot.end is None:
            dropped += 1
            continue
        start = ensure_utc(slot.start)
        end = ensure_utc(slot.end)
        if start >= end:
            dropped += 1
            continue
        intervals.append(TimeInterval(start, end))
    if dropped:
        logger.warning(f"Ignored {dropped} malformed busy slot(s)")
    return intervals


def clean_tasks(tasks: Iterable[TaskToSchedule]) -> list[TaskToSchedule]:
    """Keep tasks with an id and a finite positive duration, preserving order."""
    cleaned: list[TaskToSchedule] = []
    dropped = 0
    for task in tasks:
        if (
            not task.id
            or task.duration is None
            or not math.isfinite(task.duration)
            or task.duration <= 0
        ):
            dropped += 1
            continue
        cleaned.append(task)
    if dropped:
        logger.warning(f"Ignored {dropped} task(s) without an id or a finite positive duration")
    return cleaned


def compute_free_intervals(
    start: datetime,
    until: datetime,
    busy: Sequence[TimeInterval],
) -> list[TimeInterval]:
    """
    Compute the gaps in [start, until) not covered by any busy interval.

    Busy intervals may be unsorted and may overlap or nest. The result is
    ascending and non-overlapping.

    Args:
        start: Beginning of the planning window
        until: End of the planning window
        busy: Busy intervals

    Returns:
        list[TimeInterval]: Free intervals; empty when start >= until
    """
    if start >= until:
        return []

    free: list[TimeInterval] = []
    cursor = start
    for interval in sorted(busy, key=lambda entry: entry.start):
        if cursor >= until:
            break
        if interval.start > cursor:
            free.append(TimeInterval(cursor, min(interval.start, until)))
        cursor = max(cursor, interval.end)

    if cursor < until:
        free.append(TimeInterval(cursor, until))
    return free


def place_tasks(
    owner: str,
    tasks: Sequence[TaskToSchedule],
    free_intervals: Sequence[TimeInterval],
) -> list[ScheduledTaskCreate]:
    """
    Place tasks into free intervals with greedy first-fit.

    Each task, in input order, goes to the start of the earliest free interval
    with enough room left; that interval then shrinks from the front. A task
    that fits nowhere is skipped. ``free_intervals`` is not modified.

    Returns:
        list[ScheduledTaskCreate]: Placements in the order they were made
    """
    slots = [
        TimeInterval(interval.start, interval.end)
        for interval in sorted(free_intervals, key=lambda entry: entry.start)
    ]
    placed: list[ScheduledTaskCreate] = []

    for task in tasks:
        for slot in slots:
            # Compared in minutes: a duration longer than any slot never becomes a timedelta.
            if slot.minutes >= task.duration:
                planned_end = slot.start + timedelta(minutes=task.duration)
                placed.append(
                    ScheduledTaskCreate(
                        owner=owner,
                        task=task.id,
                        planned_start=slot.start,
                        planned_end=planned_end,
                    )
                )
                slot.start = planned_end
                break
        else:
            logger.debug(f"Task {task.id} ({task.duration} min) does not fit in the remaining free time")

    return placed
