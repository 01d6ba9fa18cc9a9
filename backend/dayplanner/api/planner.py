"""
Planner API endpoints.

Tasks and busy slots come in the request body; the planner stores only the
resulting placements.
"""

from fastapi import APIRouter, HTTPException, status

from dayplanner.api.deps import CurrentUser, Planner
from dayplanner.core.exceptions import TaskNotInScheduleError
from dayplanner.models.planner import (
    NextTaskRequest,
    NextTaskResponse,
    PlanRequest,
    PlanResponse,
    ScheduledTasksResponse,
    StatusResponse,
)

router = APIRouter()


@router.get("/scheduled-tasks", response_model=ScheduledTasksResponse)
async def get_scheduled_tasks(user: CurrentUser, planner: Planner):
    """List the user's scheduled tasks by planned start."""
    tasks = await planner.list_scheduled_tasks(user.id)
    return ScheduledTasksResponse(tasks=tasks)


@router.post("/plan-day", response_model=PlanResponse)
async def plan_day(payload: PlanRequest, user: CurrentUser, planner: Planner):
    """Replace the user's schedule with a fresh plan for the rest of today."""
    first_task = await planner.plan_day(user.id, payload.tasks, payload.busy_slots)
    return PlanResponse(first_task=first_task)


@router.post("/replan", response_model=PlanResponse)
async def replan(payload: PlanRequest, user: CurrentUser, planner: Planner):
    """Re-plan from now on, keeping tasks that already started."""
    first_task = await planner.replan(user.id, payload.tasks, payload.busy_slots)
    return PlanResponse(first_task=first_task)


@router.post("/clear-day", response_model=StatusResponse)
async def clear_day(user: CurrentUser, planner: Planner):
    await planner.clear_day(user.id)
    return StatusResponse()


@router.post("/next-task", response_model=NextTaskResponse)
async def get_next_task(payload: NextTaskRequest, user: CurrentUser, planner: Planner):
    try:
        next_task = await planner.get_next_task(user.id, payload.completed_task)
    except TaskNotInScheduleError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return NextTaskResponse(next_task=next_task)


@router.post("/complete", response_model=NextTaskResponse)
async def complete_task(payload: NextTaskRequest, user: CurrentUser, planner: Planner):
    """Mark a scheduled task done and move focus to the one after it."""
    try:
        next_task = await planner.complete_task(user.id, payload.completed_task)
    except TaskNotInScheduleError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    return NextTaskResponse(next_task=next_task)
