import asyncio

from resort_booking.application.interfaces.room_repo import RoomRepo, RoomTypeAvailability
from resort_booking.domain.entities.room import Room
from resort_booking.domain.value_objects.stay_range import StayRange
from resort_booking.infrastructure.in_memory.database import InMemorySession


class InMemoryRoomRepo(RoomRepo):
    def __init__(self, session: InMemorySession) -> None:
        self._session = session

    @property
    def _db(self):
        return self._session.database

    def _is_booked(self, room_id: int, stay: StayRange) -> bool:
        return any(
            reservation.room_id == room_id and reservation.collides_with(stay)
            for reservation in self._db.reservations.values()
        )

    async def search_availability(
        self, stay: StayRange, guests: int
    ) -> list[RoomTypeAvailability]:
        await asyncio.sleep(0)
        by_type: dict[str, list[Room]] = {}
        for room in self._db.rooms.values():
            if room.can_host(guests):
                by_type.setdefault(room.room_type, []).append(room)

        rows = []
        for room_type, type_rooms in by_type.items():
            rows.append(
                RoomTypeAvailability(
                    room_type=room_type,
                    min_price=min(r.price_per_night.amount for r in type_rooms),
                    max_capacity=max(r.max_occupancy for r in type_rooms),
                    description=min(r.description for r in type_rooms),
                    total_rooms=len(type_rooms),
                    available_rooms=sum(
                        1 for r in type_rooms if not self._is_booked(r.id, stay)
                    ),
                )
            )
        rows.sort(key=lambda row: (row.min_price, row.room_type))
        return rows

    async def room_type_exists(self, room_type: str) -> bool:
        await asyncio.sleep(0)
        return any(
            room.is_active and room.room_type == room_type for room in self._db.rooms.values()
        )

    async def lock_candidate_rooms(self, room_type: str, guests: int) -> list[Room]:
        candidates = sorted(
            (
                room
                for room in self._db.rooms.values()
                if room.room_type == room_type and room.can_host(guests)
            ),
            key=lambda room: room.sort_key,
        )
        # always locked in allocation order
        for room in candidates:
            await self._session.lock(("room", room.id))
        return candidates

