from fastapi import APIRouter, Depends, status

from resort_booking.api.dependencies import get_current_user_id, get_use_cases
from resort_booking.api.schemas.events import (
    EventResponse,
    EventSlotResponse,
    EventsResponse,
    MyEventSignupsResponse,
    SignupRequest,
    SignupResponse,
    UpcomingSignupResponse,
)
from resort_booking.application.dtos.event_dto import SignupForEventDTO
from resort_booking.config import Settings, get_settings
from resort_booking.infrastructure.db.retry import retry_on_transient_error

router = APIRouter()


@router.get("/events", response_model=EventsResponse)
async def list_events(use_cases=Depends(get_use_cases)) -> EventsResponse:
    entries = await use_cases["list_events"].execute()
    return EventsResponse(
        events=[
            EventResponse(
                id=entry.event.id,
                title=entry.event.title,
                description=entry.event.description,
                slots=[EventSlotResponse.model_validate(slot) for slot in entry.slots],
            )
            for entry in entries
        ]
    )


@router.get("/events/my", response_model=MyEventSignupsResponse)
async def my_event_signups(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> MyEventSignupsResponse:
    rows = await use_cases["list_my_event_signups"].execute(user_id)
    return MyEventSignupsResponse(
        items=[UpcomingSignupResponse.model_validate(row) for row in rows]
    )


@router.post(
    "/events/{event_id}/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup_for_event(
    event_id: int,
    payload: SignupRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> SignupResponse:
    request = SignupForEventDTO(**payload.model_dump())
    confirmation = await retry_on_transient_error(
        lambda: use_cases["signup_for_event"].execute(user_id, event_id, request),
        max_attempts=settings.transient_retry_attempts,
        base_delay=settings.transient_retry_base_delay,
    )
    return SignupResponse.model_validate(confirmation)
