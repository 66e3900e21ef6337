from fastapi import APIRouter, Depends, Query, status

from resort_booking.api.dependencies import get_current_user_id, get_use_cases
from resort_booking.api.schemas.rooms import (
    BookRoomRequest,
    BookRoomResponse,
    MyReservationsResponse,
    ReservationSummaryResponse,
    RoomTypeAvailabilityResponse,
    SearchRoomsResponse,
)
from resort_booking.application.dtos.room_dto import BookRoomDTO, SearchAvailabilityDTO
from resort_booking.config import Settings, get_settings
from resort_booking.infrastructure.db.retry import retry_on_transient_error

router = APIRouter()


@router.get("/rooms/search", response_model=SearchRoomsResponse)
async def search_rooms(
    date_from: str = Query(alias="from"),
    date_to: str = Query(alias="to"),
    guests: int = Query(default=1),
    use_cases=Depends(get_use_cases),
) -> SearchRoomsResponse:
    rows = await use_cases["search_availability"].execute(
        SearchAvailabilityDTO(date_from=date_from, date_to=date_to, guests=guests)
    )
    return SearchRoomsResponse(
        items=[RoomTypeAvailabilityResponse.model_validate(row) for row in rows]
    )


@router.post(
    "/rooms/book",
    response_model=BookRoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def book_room(
    payload: BookRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> BookRoomResponse:
    request = BookRoomDTO(**payload.model_dump())
    confirmation = await retry_on_transient_error(
        lambda: use_cases["book_room"].execute(user_id, request),
        max_attempts=settings.transient_retry_attempts,
        base_delay=settings.transient_retry_base_delay,
    )
    return BookRoomResponse.model_validate(confirmation)


@router.get("/rooms/my", response_model=MyReservationsResponse)
async def my_reservations(
    user_id: int = Depends(get_current_user_id),
    use_cases=Depends(get_use_cases),
) -> MyReservationsResponse:
    rows = await use_cases["list_my_reservations"].execute(user_id)
    return MyReservationsResponse(
        items=[ReservationSummaryResponse.model_validate(row) for row in rows]
    )
