import asyncio
import dataclasses
from datetime import datetime
from typing import Sequence

from resort_booking.application.interfaces.reservation_repo import (
    ReservationRepo,
    ReservationSummary,
)
from resort_booking.domain.entities.reservation import Reservation
from resort_booking.domain.value_objects.stay_range import StayRange
from resort_booking.infrastructure.in_memory.database import InMemorySession


class InMemoryReservationRepo(ReservationRepo):
    def __init__(self, session: InMemorySession) -> None:
        self._session = session

    @property
    def _db(self):
        return self._session.database

    async def find_conflicting_room_ids(
        self, room_ids: Sequence[int], stay: StayRange
    ) -> set[int]:
        await asyncio.sleep(0)
        wanted = set(room_ids)
        return {
            reservation.room_id
            for reservation in self._db.reservations.values()
            if reservation.room_id in wanted and reservation.collides_with(stay)
        }

    async def create(self, reservation: Reservation) -> int:
        await asyncio.sleep(0)
        reservation_id = self._db.next_id("room_reservations")
        self._db.reservations[reservation_id] = dataclasses.replace(reservation, id=reservation_id)
        self._session.record_undo(lambda: self._db.reservations.pop(reservation_id, None))
        return reservation_id

    def _summaries(self, user_id: int) -> list[ReservationSummary]:
        summaries = []
        for reservation in self._db.reservations.values():
            if reservation.user_id != user_id:
                continue
            room = self._db.rooms[reservation.room_id]
            summaries.append(
                ReservationSummary(
                    reservation_id=reservation.id,
                    check_in=reservation.stay.check_in,
                    check_out=reservation.stay.check_out,
                    adults=reservation.occupancy.adults,
                    children=reservation.occupancy.children,
                    total_price=reservation.total_price.amount,
                    status=reservation.status.value,
                    room_type=room.room_type,
                    room_number=room.number,
                    created_at=reservation.created_at,
                )
            )
        return summaries

    async def list_recent_for_user(self, user_id: int, limit: int) -> list[ReservationSummary]:
        await asyncio.sleep(0)
        summaries = self._summaries(user_id)
        summaries.sort(
            key=lambda s: (s.created_at or datetime.min, s.reservation_id), reverse=True
        )
        return summaries[:limit]

    async def list_by_check_in_for_user(
        self, user_id: int, limit: int
    ) -> list[ReservationSummary]:
        await asyncio.sleep(0)
        summaries = self._summaries(user_id)
        summaries.sort(key=lambda s: (s.check_in, s.reservation_id))
        return summaries[:limit]
