from typing import Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from resort_booking.application.interfaces.reservation_repo import (
    ReservationRepo,
    ReservationSummary,
)
from resort_booking.domain.entities.reservation import Reservation
from resort_booking.domain.value_objects.money import Money
from resort_booking.domain.value_objects.stay_range import StayRange
from resort_booking.infrastructure.db.repositories.room_repo_sql import BLOCKING_STATUS_VALUES
from resort_booking.infrastructure.db.tables import room_reservations, rooms


class ReservationRepoSQL(ReservationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_conflicting_room_ids(
        self, room_ids: Sequence[int], stay: StayRange
    ) -> set[int]:
        if not room_ids:
            return set()
        stmt = (
            select(room_reservations.c.room_id)
            .where(
                room_reservations.c.room_id.in_(list(room_ids)),
                room_reservations.c.status.in_(BLOCKING_STATUS_VALUES),
                room_reservations.c.check_in < stay.check_out,
                room_reservations.c.check_out > stay.check_in,
            )
            .distinct()
        )
        result = await self._session.execute(stmt)
        return set(result.scalars().all())

    async def create(self, reservation: Reservation) -> int:
        stmt = insert(room_reservations).values(
            user_id=reservation.user_id,
            room_id=reservation.room_id,
            check_in=reservation.stay.check_in,
            check_out=reservation.stay.check_out,
            adults=reservation.occupancy.adults,
            children=reservation.occupancy.children,
            total_price=reservation.total_price.amount,
            status=reservation.status.value,
            first_name=reservation.guest.first_name,
            last_name=reservation.guest.last_name,
            phone=reservation.guest.phone,
            notes=reservation.guest.notes,
            created_at=reservation.created_at,
        )
        result = await self._session.execute(stmt)
        return result.inserted_primary_key[0]

    def _summary_query(self, user_id: int):
        return (
            select(
                room_reservations.c.id,
                room_reservations.c.check_in,
                room_reservations.c.check_out,
                room_reservations.c.adults,
                room_reservations.c.children,
                room_reservations.c.total_price,
                room_reservations.c.status,
                room_reservations.c.created_at,
                rooms.c.room_type,
                rooms.c.number,
            )
            .join(rooms, rooms.c.id == room_reservations.c.room_id)
            .where(room_reservations.c.user_id == user_id)
        )

    async def _fetch_summaries(self, stmt) -> list[ReservationSummary]:
        result = await self._session.execute(stmt)
        return [
            ReservationSummary(
                reservation_id=row["id"],
                check_in=row["check_in"],
                check_out=row["check_out"],
                adults=row["adults"],
                children=row["children"],
                total_price=Money(row["total_price"]).amount,
                status=row["status"],
                room_type=row["room_type"],
                room_number=row["number"],
                created_at=row["created_at"],
            )
            for row in result.mappings().all()
        ]

    async def list_recent_for_user(self, user_id: int, limit: int) -> list[ReservationSummary]:
        stmt = (
            self._summary_query(user_id)
            .order_by(room_reservations.c.created_at.desc(), room_reservations.c.id.desc())
            .limit(limit)
        )
        return await self._fetch_summaries(stmt)

    async def list_by_check_in_for_user(
        self, user_id: int, limit: int
    ) -> list[ReservationSummary]:
        stmt = (
            self._summary_query(user_id)
            .order_by(room_reservations.c.check_in.asc(), room_reservations.c.id.asc())
            .limit(limit)
        )
        return await self._fetch_summaries(stmt)
