"""Abstract interfaces for infrastructure abstraction."""

from dayplanner.interfaces.auth_provider import IAuthProvider, User
from dayplanner.interfaces.focus_repository import IFocusRepository
from dayplanner.interfaces.scheduled_task_repository import IScheduledTaskRepository

__all__ = [
    "IAuthProvider",
    "IFocusRepository",
    "IScheduledTaskRepository",
    "User",
]
