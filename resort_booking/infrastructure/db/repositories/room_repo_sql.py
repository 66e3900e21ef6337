from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from resort_booking.application.interfaces.room_repo import RoomRepo, RoomTypeAvailability
from resort_booking.domain.entities.reservation import BLOCKING_STATUSES
from resort_booking.domain.entities.room import Room
from resort_booking.domain.value_objects.money import Money
from resort_booking.domain.value_objects.stay_range import StayRange
from resort_booking.infrastructure.db.tables import room_reservations, rooms

BLOCKING_STATUS_VALUES = [status.value for status in BLOCKING_STATUSES]


def _row_to_room(row) -> Room:
    return Room(
        id=row["id"],
        number=row["number"],
        room_type=row["room_type"],
        price_per_night=Money(row["price_per_night"]),
        max_occupancy=row["max_occupancy"],
        description=row["description"] or "",
        is_active=bool(row["is_active"]),
    )


class RoomRepoSQL(RoomRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def search_availability(
        self, stay: StayRange, guests: int
    ) -> list[RoomTypeAvailability]:
        booked = (
            select(room_reservations.c.id)
            .where(
                room_reservations.c.room_id == rooms.c.id,
                room_reservations.c.status.in_(BLOCKING_STATUS_VALUES),
                room_reservations.c.check_in < stay.check_out,
                room_reservations.c.check_out > stay.check_in,
            )
            .exists()
        )
        min_price = func.min(rooms.c.price_per_night)
        stmt = (
            select(
                rooms.c.room_type,
                min_price.label("min_price"),
                func.max(rooms.c.max_occupancy).label("max_capacity"),
                func.min(rooms.c.description).label("description"),
                func.count(rooms.c.id).label("total_rooms"),
                func.sum(case((~booked, 1), else_=0)).label("available_rooms"),
            )
            .where(
                rooms.c.is_active.is_(True),
                rooms.c.max_occupancy >= guests,
            )
            .group_by(rooms.c.room_type)
            .order_by(min_price, rooms.c.room_type)
        )
        result = await self._session.execute(stmt)
        return [
            RoomTypeAvailability(
                room_type=row["room_type"],
                min_price=Money(row["min_price"]).amount,
                max_capacity=row["max_capacity"],
                description=row["description"] or "",
                total_rooms=row["total_rooms"],
                available_rooms=int(row["available_rooms"] or 0),
            )
            for row in result.mappings().all()
        ]

    async def room_type_exists(self, room_type: str) -> bool:
        stmt = (
            select(rooms.c.id)
            .where(rooms.c.room_type == room_type, rooms.c.is_active.is_(True))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar() is not None

    async def lock_candidate_rooms(self, room_type: str, guests: int) -> list[Room]:
        stmt = (
            select(rooms)
            .where(
                rooms.c.room_type == room_type,
                rooms.c.is_active.is_(True),
                rooms.c.max_occupancy >= guests,
            )
            .order_by(rooms.c.price_per_night, rooms.c.id)
            .with_for_update()
        )
        result = await self._session.execute(stmt)
        return [_row_to_room(row) for row in result.mappings().all()]
