from fastapi import APIRouter, Depends

from resort_booking.api.dependencies import get_current_user_id, get_use_cases
from resort_booking.api.schemas.events import DashboardResponse

router = APIRouter()


@router.get("/user/dashboard", response_model=DashboardResponse)
async def dashboard(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> DashboardResponse:
    """The user's first stays by check-in date and upcoming event signups."""
    overview = await use_cases["dashboard"].execute(user_id)
    return DashboardResponse.model_validate(overview)
