"""
SQLite implementation of scheduled task repository.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, select

from dayplanner.infrastructure.local.database import ScheduledTaskORM, get_session_factory
from dayplanner.interfaces.scheduled_task_repository import IScheduledTaskRepository
from dayplanner.models.planner import ScheduledTask, ScheduledTaskCreate
from dayplanner.utils.datetime_utils import ensure_utc, now_utc, to_naive_utc


class SqliteScheduledTaskRepository(IScheduledTaskRepository):
    """SQLite implementation of scheduled task repository."""

    def __init__(self, session_factory=None):
        """
        Initialize repository.

        Args:
            session_factory: Optional session factory (for testing)
        """
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: ScheduledTaskORM) -> ScheduledTask:
        """Convert ORM object to Pydantic model."""
        return ScheduledTask(
            id=UUID(orm.id),
            owner=orm.owner,
            task=orm.task,
            planned_start=ensure_utc(orm.planned_start),
            planned_end=ensure_utc(orm.planned_end),
            created_at=ensure_utc(orm.created_at),
        )

    @staticmethod
    def _range_delete(
        owner: str,
        start_from: Optional[datetime],
        start_until: Optional[datetime],
    ):
        stmt = delete(ScheduledTaskORM).where(ScheduledTaskORM.owner == owner)
        if start_from is not None:
            stmt = stmt.where(ScheduledTaskORM.planned_start >= to_naive_utc(start_from))
        if start_until is not None:
            stmt = stmt.where(ScheduledTaskORM.planned_start <= to_naive_utc(start_until))
        return stmt

    async def list_for_owner(self, owner: str) -> list[ScheduledTask]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ScheduledTaskORM)
                .where(ScheduledTaskORM.owner == owner)
                .order_by(ScheduledTaskORM.planned_start.asc())
            )
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def replace(
        self,
        owner: str,
        records: list[ScheduledTaskCreate],
        start_from: Optional[datetime] = None,
        start_until: Optional[datetime] = None,
    ) -> list[ScheduledTask]:
        async with self._session_factory() as session:
            await session.execute(self._range_delete(owner, start_from, start_until))
            created_at = to_naive_utc(now_utc())
            orms = [
                ScheduledTaskORM(
                    id=str(uuid4()),
                    owner=owner,
                    task=record.task,
                    planned_start=to_naive_utc(record.planned_start),
                    planned_end=to_naive_utc(record.planned_end),
                    created_at=created_at,
                )
                for record in records
            ]
            session.add_all(orms)
            await session.commit()
            return [self._orm_to_model(orm) for orm in orms]

    async def delete_range(
        self,
        owner: str,
        start_from: Optional[datetime] = None,
        start_until: Optional[datetime] = None,
    ) -> int:
        async with self._session_factory() as session:
            result = await session.execute(self._range_delete(owner, start_from, start_until))
            await session.commit()
            return result.rowcount or 0
