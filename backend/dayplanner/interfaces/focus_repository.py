from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from dayplanner.models.focus import FocusEntry


class IFocusRepository(ABC):
    @abstractmethod
    async def get(self, user_id: str) -> Optional[FocusEntry]:
        pass

    @abstractmethod
    async def set(self, user_id: str, task: str) -> FocusEntry:
        pass

    @abstractmethod
    async def clear(self, user_id: str) -> bool:
        pass
