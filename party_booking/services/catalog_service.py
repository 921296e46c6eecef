import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from party_booking.core.errors import DataSourceUnavailable, MalformedTimeValue, NoSlotsDefined
from party_booking.models.weekday_timeslot import WeekdayTimeslot
from party_booking.services.timeslots import TimeRange, parse_range

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def weekday_name(d: date) -> str:
    """Lower-case English weekday of a Gregorian date."""
    return WEEKDAY_NAMES[d.weekday()]


def slots_from_rows(weekday: str, labels: list[str]) -> list[TimeRange]:
    """Parse catalog texts in order; rows that do not parse are skipped."""
    slots: list[TimeRange] = []
    for label in labels:
        try:
            slots.append(parse_range(label))
        except MalformedTimeValue as e:
            logger.warning("Skipping catalog slot for %s: %s", weekday, e)
    return slots


class SqlSlotCatalog:
    """Weekday -> bookable time ranges, read from the weekday_timeslots table."""

    source = "weekday_timeslots"

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def slots_for_weekday(self, weekday: str) -> list[TimeRange]:
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(WeekdayTimeslot.timeslot)
                    .where(WeekdayTimeslot.day == weekday.lower())
                    .order_by(WeekdayTimeslot.position, WeekdayTimeslot.id)
                )
                labels = [row[0] for row in result.all()]
        except (SQLAlchemyError, OSError) as e:
            raise DataSourceUnavailable(self.source, e) from e
        slots = slots_from_rows(weekday, labels)
        if not slots:
            raise NoSlotsDefined(weekday)
        return slots
