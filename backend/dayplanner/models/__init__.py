"""Pydantic models (schemas) for the application."""

from dayplanner.models.focus import CurrentTaskResponse, FocusEntry, FocusUpdate
from dayplanner.models.planner import (
    BusySlot,
    NextTaskRequest,
    NextTaskResponse,
    PlanRequest,
    PlanResponse,
    ScheduledTask,
    ScheduledTaskCreate,
    ScheduledTasksResponse,
    StatusResponse,
    TaskToSchedule,
    TimeInterval,
)

__all__ = [
    "BusySlot",
    "CurrentTaskResponse",
    "FocusEntry",
    "FocusUpdate",
    "NextTaskRequest",
    "NextTaskResponse",
    "PlanRequest",
    "PlanResponse",
    "ScheduledTask",
    "ScheduledTaskCreate",
    "ScheduledTasksResponse",
    "StatusResponse",
    "TaskToSchedule",
    "TimeInterval",
]
