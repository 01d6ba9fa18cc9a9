"""
Scheduled task repository interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from dayplanner.models.planner import ScheduledTask, ScheduledTaskCreate


class IScheduledTaskRepository(ABC):
    @abstractmethod
    async def list_for_owner(self, owner: str) -> list[ScheduledTask]:
        """List every scheduled task of an owner, ordered by planned start."""
        pass

    @abstractmethod
    async def replace(
        self,
        owner: str,
        records: list[ScheduledTaskCreate],
        start_from: Optional[datetime] = None,
        start_until: Optional[datetime] = None,
    ) -> list[ScheduledTask]:
        """
        Delete the owner's tasks whose planned start falls in
        [start_from, start_until] (unbounded where None), then insert
        ``records``. Both steps commit together.
        """
        pass

    @abstractmethod
    async def delete_range(
        self,
        owner: str,
        start_from: Optional[datetime] = None,
        start_until: Optional[datetime] = None,
    ) -> int:
        """Delete the owner's tasks by planned start range. Returns deleted count."""
        pass
