import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from party_booking.core.errors import DataSourceUnavailable
from party_booking.models.range_reservation import RangeReservation
from party_booking.models.reservation import BirthdayReservation, BirthdayReservationCreate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactReservation:
    """A party booked at one instant; it blocks the slot containing that instant."""

    date: date
    time: str


@dataclass(frozen=True)
class RangeBooking:
    """A daily window applied to every day of an inclusive date span."""

    start_date: date
    end_date: date
    start_time: str
    end_time: str
    type: str = ""

    def covers(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date


class SqlReservationQuery:
    """Read-only reservation lookups. Each call uses its own session so calls may run concurrently."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def exact_reservations_on(self, d: date) -> list[ExactReservation]:
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(BirthdayReservation.date, BirthdayReservation.time).where(
                        BirthdayReservation.date == d
                    )
                )
                rows = result.all()
        except (SQLAlchemyError, OSError) as e:
            raise DataSourceUnavailable(BirthdayReservation.__tablename__, e) from e
        return [ExactReservation(date=row[0], time=str(row[1])) for row in rows]

    async def range_reservations_covering(self, d: date) -> list[RangeBooking]:
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(RangeReservation).where(
                        RangeReservation.start_date <= d,
                        RangeReservation.end_date >= d,
                    )
                )
                records = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise DataSourceUnavailable(RangeReservation.__tablename__, e) from e
        return [
            RangeBooking(
                start_date=r.start_date,
                end_date=r.end_date,
                start_time=str(r.start_time),
                end_time=str(r.end_time),
                type=r.type or "",
            )
            for r in records
        ]


async def create_reservation(
    session: AsyncSession, data: BirthdayReservationCreate
) -> BirthdayReservation:
    """Store a confirmed wizard submission. No availability re-check happens here."""
    reservation = BirthdayReservation.model_validate(data.model_dump())
    session.add(reservation)
    await session.flush()
    await session.refresh(reservation)
    logger.info("Reservation %s stored for %s %s", reservation.id, reservation.date, reservation.time)
    return reservation
