"""
Planner service.

Owns a user's scheduled tasks: plans the day, replans from now, clears the
day, and answers "what comes after the task I just finished".
"""

from __future__ import annotations

import asyncio
import weakref
from datetime import datetime
from typing import Callable, Optional

from dayplanner.core.exceptions import TaskNotInScheduleError
from dayplanner.core.logger import setup_logger
from dayplanner.interfaces.focus_repository import IFocusRepository
from dayplanner.interfaces.scheduled_task_repository import IScheduledTaskRepository
from dayplanner.models.planner import BusySlot, ScheduledTask, TaskToSchedule, TimeInterval
from dayplanner.services.day_scheduler import (
    clean_busy_slots,
    clean_tasks,
    compute_free_intervals,
    place_tasks,
)
from dayplanner.utils.datetime_utils import day_bounds, ensure_utc, now_utc

logger = setup_logger(__name__)


class PlannerService:
    """
    Day planning for a user's tasks.

    Writes for one owner are serialized with a per-owner lock, so a single
    service instance must be shared by all callers (see api.deps). Locks are
    weakly held and disappear once no call is using them.
    """

    def __init__(
        self,
        scheduled_task_repo: IScheduledTaskRepository,
        focus_repo: Optional[IFocusRepository] = None,
        timezone: str = "UTC",
        clock: Callable[[], datetime] = now_utc,
    ):
        self._repo = scheduled_task_repo
        self._focus_repo = focus_repo
        self._timezone = timezone
        self._clock = clock
        # An entry lives only while some call holds or waits on its lock.
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = weakref.WeakValueDictionary()

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    def _now(self) -> datetime:
        return ensure_utc(self._clock())

    async def _focus_on(self, user_id: str, task: Optional[str]) -> None:
        if self._focus_repo is None or task is None:
            return
        await self._focus_repo.set(user_id, task)

    async def plan_day(
        self,
        user_id: str,
        tasks: list[TaskToSchedule],
        busy_slots: list[BusySlot],
    ) -> Optional[str]:
        """
        Build a fresh schedule for the rest of today.

        Every existing scheduled task of the user is removed first.

        Returns:
            Optional[str]: Task id of the first task placed, or None
        """
        now = self._now()
        day_start, day_end = day_bounds(now, self._timezone)
        plan_from = max(now, day_start)

        async with self._lock_for(user_id):
            placed = await self._schedule(
                user_id,
                tasks,
                clean_busy_slots(busy_slots),
                plan_from,
                day_end,
                delete_from=None,
            )

        first_task = placed[0].task if placed else None
        logger.info(f"Planned day for {user_id}: {len(placed)} of {len(tasks)} task(s) placed")
        await self._focus_on(user_id, first_task)
        return first_task

    async def replan(
        self,
        user_id: str,
        tasks: list[TaskToSchedule],
        busy_slots: list[BusySlot],
    ) -> Optional[str]:
        """
        Re-plan from now until the end of today.

        Scheduled tasks that start before now are kept. Those still running
        count as busy time for the new placements.

        Returns:
            Optional[str]: Task id of the first new task placed, or None
        """
        now = self._now()
        _, day_end = day_bounds(now, self._timezone)

        async with self._lock_for(user_id):
            busy = clean_busy_slots(busy_slots)
            existing = await self._repo.list_for_owner(user_id)
            busy.extend(
                TimeInterval(record.planned_start, record.planned_end)
                for record in existing
                if record.planned_start < now < record.planned_end
            )
            placed = await self._schedule(
                user_id,
                tasks,
                busy,
                now,
                day_end,
                delete_from=now,
            )

        first_task = placed[0].task if placed else None
        logger.info(f"Replanned {user_id} from {now.isoformat()}: {len(placed)} task(s) placed")
        await self._focus_on(user_id, first_task)
        return first_task

    async def _schedule(
        self,
        user_id: str,
        tasks: list[TaskToSchedule],
        busy: list[TimeInterval],
        plan_from: datetime,
        plan_until: datetime,
        delete_from: Optional[datetime],
    ) -> list[ScheduledTask]:
        free = compute_free_intervals(plan_from, plan_until, busy)
        placements = place_tasks(user_id, clean_tasks(tasks), free)
        return await self._repo.replace(user_id, placements, start_from=delete_from)

    async def clear_day(self, user_id: str) -> None:
        """Remove the user's scheduled tasks that start today."""
        day_start, day_end = day_bounds(self._now(), self._timezone)
        async with self._lock_for(user_id):
            deleted = await self._repo.delete_range(
                user_id,
                start_from=day_start,
                start_until=day_end,
            )
        logger.info(f"Cleared {deleted} scheduled task(s) for {user_id}")

    async def delete_all_for_user(self, user_id: str) -> None:
        """Remove every scheduled task of the user, any day."""
        async with self._lock_for(user_id):
            deleted = await self._repo.delete_range(user_id)
        logger.info(f"Deleted all {deleted} scheduled task(s) for {user_id}")

    async def list_scheduled_tasks(self, user_id: str) -> list[ScheduledTask]:
        return await self._repo.list_for_owner(user_id)

    async def get_next_task(self, user_id: str, completed_task: str) -> Optional[str]:
        """
        Find the task scheduled right after ``completed_task``.

        Raises:
            TaskNotInScheduleError: If the user has no scheduled entry for it
        """
        schedule = await self._repo.list_for_owner(user_id)
        for index, record in enumerate(schedule):
            if record.task == completed_task:
                if index + 1 < len(schedule):
                    return schedule[index + 1].task
                return None
        raise TaskNotInScheduleError(user_id, completed_task)

    async def complete_task(self, user_id: str, completed_task: str) -> Optional[str]:
        """Advance focus to the task after ``completed_task`` (clears focus after the last one)."""
        next_task = await self.get_next_task(user_id, completed_task)
        if self._focus_repo is not None:
            if next_task is None:
                await self._focus_repo.clear(user_id)
            else:
                await self._focus_repo.set(user_id, next_task)
        return next_task
