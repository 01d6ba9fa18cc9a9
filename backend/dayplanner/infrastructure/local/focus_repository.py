from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from dayplanner.infrastructure.local.database import FocusEntryORM, get_session_factory
from dayplanner.interfaces.focus_repository import IFocusRepository
from dayplanner.models.focus import FocusEntry
from dayplanner.utils.datetime_utils import ensure_utc, now_utc, to_naive_utc


class SqliteFocusRepository(IFocusRepository):
    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: FocusEntryORM) -> FocusEntry:
        return FocusEntry(
            user_id=orm.user_id,
            task=orm.task,
            updated_at=ensure_utc(orm.updated_at),
        )

    async def get(self, user_id: str) -> Optional[FocusEntry]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(FocusEntryORM).where(FocusEntryORM.user_id == user_id)
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def set(self, user_id: str, task: str) -> FocusEntry:
        async with self._session_factory() as session:
            result = await session.execute(
                select(FocusEntryORM).where(FocusEntryORM.user_id == user_id)
            )
            orm = result.scalar_one_or_none()
            now = to_naive_utc(now_utc())
            if orm:
                orm.task = task
                orm.updated_at = now
            else:
                orm = FocusEntryORM(user_id=user_id, task=task, updated_at=now)
                session.add(orm)
            await session.commit()
            return self._orm_to_model(orm)

    async def clear(self, user_id: str) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                select(FocusEntryORM).where(FocusEntryORM.user_id == user_id)
            )
            orm = result.scalar_one_or_none()
            if not orm:
                return False
            await session.delete(orm)
            await session.commit()
            return True
