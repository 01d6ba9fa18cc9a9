"""
Planner model definitions.

A ScheduledTask is a task placed onto a user's day. Tasks and busy slots are
supplied by callers for each planning request and are never stored here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class TaskToSchedule(BaseModel):
    """A task to place, with the time it needs in minutes."""

    id: Optional[str] = Field(None, description="External task id")
    duration: Optional[float] = Field(None, description="Required time in minutes")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        if value is None:
            return None
        return str(value)


class BusySlot(BaseModel):
    """Externally committed time the planner must not touch."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass
class TimeInterval:
    start: datetime
    end: datetime

    @property
    def minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60


class ScheduledTaskCreate(BaseModel):
    owner: str
    task: str
    planned_start: datetime
    planned_end: datetime


class ScheduledTask(ScheduledTaskCreate):
    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


# ===========================================
# Request / response bodies
# ===========================================


class PlanRequest(BaseModel):
    tasks: list[TaskToSchedule] = Field(default_factory=list)
    busy_slots: list[BusySlot] = Field(default_factory=list)


class PlanResponse(BaseModel):
    first_task: Optional[str] = None


class NextTaskRequest(BaseModel):
    completed_task: str = Field(..., min_length=1)


class NextTaskResponse(BaseModel):
    next_task: Optional[str] = None


class ScheduledTasksResponse(BaseModel):
    tasks: list[ScheduledTask] = Field(default_factory=list)


class StatusResponse(BaseModel):
    status: str = "ok"
