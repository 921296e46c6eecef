"""In-memory stand-ins for the slot catalog and reservation sources."""
from datetime import date

from party_booking.core.errors import DataSourceUnavailable, NoSlotsDefined
from party_booking.services.catalog_service import slots_from_rows

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)


class FakeCatalog:
    def __init__(self, table: dict[str, list[str]] | None = None, fail: bool = False) -> None:
        self.table = table or {}
        self.fail = fail
        self.calls: list[str] = []

    async def slots_for_weekday(self, weekday: str):
        self.calls.append(weekday)
        if self.fail:
            raise DataSourceUnavailable("weekday_timeslots", ConnectionError("connection refused"))
        slots = slots_from_rows(weekday, self.table.get(weekday, []))
        if not slots:
            raise NoSlotsDefined(weekday)
        return slots


class FakeReservations:
    def __init__(self, exact=None, ranged=None, fail_exact=False, fail_range=False) -> None:
        self.exact = list(exact or [])
        self.ranged = list(ranged or [])
        self.fail_exact = fail_exact
        self.fail_range = fail_range

    async def exact_reservations_on(self, d):
        if self.fail_exact:
            raise DataSourceUnavailable("birthday_reservations", TimeoutError("timed out"))
        return [r for r in self.exact if r.date == d]

    async def range_reservations_covering(self, d):
        if self.fail_range:
            raise DataSourceUnavailable("range_reservations", TimeoutError("timed out"))
        return [r for r in self.ranged if r.start_date <= d <= r.end_date]
