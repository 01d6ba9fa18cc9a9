"""
User API endpoints.

Account records live with the identity provider; deleting an account here
removes the planner data that belongs to it.
"""

from fastapi import APIRouter

from dayplanner.api.deps import CurrentUser, FocusRepo, Planner
from dayplanner.core.logger import setup_logger
from dayplanner.models.planner import StatusResponse

router = APIRouter()
logger = setup_logger(__name__)


@router.delete("/me", response_model=StatusResponse)
async def delete_account_data(user: CurrentUser, planner: Planner, focus_repo: FocusRepo):
    await planner.delete_all_for_user(user.id)
    await focus_repo.clear(user.id)
    logger.info(f"Removed planner data for deleted account {user.id}")
    return StatusResponse()
