"""
Focus API endpoints.
"""

from fastapi import APIRouter

from dayplanner.api.deps import CurrentUser, FocusRepo
from dayplanner.models.focus import CurrentTaskResponse, FocusUpdate
from dayplanner.models.planner import StatusResponse

router = APIRouter()


@router.get("/current", response_model=CurrentTaskResponse)
async def get_current_task(user: CurrentUser, repo: FocusRepo):
    entry = await repo.get(user.id)
    return CurrentTaskResponse(task=entry.task if entry else None)


@router.put("/current", response_model=StatusResponse)
async def set_current_task(payload: FocusUpdate, user: CurrentUser, repo: FocusRepo):
    await repo.set(user.id, payload.task)
    return StatusResponse()


@router.delete("/current", response_model=StatusResponse)
async def clear_current_task(user: CurrentUser, repo: FocusRepo):
    await repo.clear(user.id)
    return StatusResponse()
