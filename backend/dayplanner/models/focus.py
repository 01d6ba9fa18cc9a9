"""
Focus model definitions.

Focus is the single task a user should be working on right now.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FocusEntry(BaseModel):
    user_id: str
    task: str
    updated_at: datetime

    class Config:
        from_attributes = True


class FocusUpdate(BaseModel):
    task: str = Field(..., min_length=1)


class CurrentTaskResponse(BaseModel):
    task: Optional[str] = None
