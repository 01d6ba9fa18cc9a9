"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class DayPlannerError(Exception):
    """Base exception for the day planner."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(DayPlannerError):
    """Resource not found."""

    pass


class ValidationError(DayPlannerError):
    """Validation error."""

    pass


class AuthenticationError(DayPlannerError):
    """Authentication failed."""

    pass


class InfrastructureError(DayPlannerError):
    """Infrastructure-related error (DB, external services, etc.)."""

    pass


class TaskNotInScheduleError(NotFoundError):
    """A completed task has no scheduled entry for the user."""

    def __init__(self, user_id: str, task: str):
        super().__init__(
            "Completed task not found in schedule.",
            details={"user_id": user_id, "task": task},
        )
        self.user_id = user_id
        self.task = task
