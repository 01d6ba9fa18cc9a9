"""API routers."""

from dayplanner.api import focus, planner, users

__all__ = [
    "focus",
    "planner",
    "users",
]
