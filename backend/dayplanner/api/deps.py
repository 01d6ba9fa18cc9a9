"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the infrastructure
implementations and shared services.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from dayplanner.core.config import get_settings
from dayplanner.core.exceptions import AuthenticationError
from dayplanner.interfaces.auth_provider import IAuthProvider, User
from dayplanner.interfaces.focus_repository import IFocusRepository
from dayplanner.interfaces.scheduled_task_repository import IScheduledTaskRepository
from dayplanner.services.planner_service import PlannerService


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_scheduled_task_repository() -> IScheduledTaskRepository:
    """Get scheduled task repository instance."""
    from dayplanner.infrastructure.local.scheduled_task_repository import (
        SqliteScheduledTaskRepository,
    )
    return SqliteScheduledTaskRepository()


@lru_cache()
def get_focus_repository() -> IFocusRepository:
    """Get focus repository instance."""
    from dayplanner.infrastructure.local.focus_repository import SqliteFocusRepository
    return SqliteFocusRepository()


# ===========================================
# Services
# ===========================================


@lru_cache()
def get_planner_service() -> PlannerService:
    """Get the shared planner service (one instance keeps the per-user write locks)."""
    settings = get_settings()
    return PlannerService(
        scheduled_task_repo=get_scheduled_task_repository(),
        focus_repo=get_focus_repository(),
        timezone=settings.PLANNER_TIMEZONE,
    )


@lru_cache()
def get_auth_provider() -> IAuthProvider:
    """Get auth provider instance."""
    settings = get_settings()
    from dayplanner.infrastructure.local.mock_auth import MockAuthProvider
    return MockAuthProvider(enabled=settings.AUTH_PROVIDER != "disabled")


# ===========================================
# User Authentication
# ===========================================


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> User:
    """
    Get current authenticated user.

    With authentication disabled, returns a fixed development user.
    """
    if not auth_provider.is_enabled():
        return User(id="dev_user", email="dev@example.com", display_name="Developer")

    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    try:
        return await auth_provider.verify_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

ScheduledTaskRepo = Annotated[IScheduledTaskRepository, Depends(get_scheduled_task_repository)]
FocusRepo = Annotated[IFocusRepository, Depends(get_focus_repository)]
Planner = Annotated[PlannerService, Depends(get_planner_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
