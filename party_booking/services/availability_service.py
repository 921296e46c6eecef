"""
Availability Resolver

For a selected date, decides which of that weekday's bookable slots are already taken:
- exact birthday reservations block the slot containing their start instant
- range reservations (rentals etc.) block every slot their daily window overlaps

Backend failures never abort the computation: a failing source contributes nothing
and is reported in AvailabilityResult.degraded_sources.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from party_booking.core.errors import DataSourceUnavailable, NoSlotsDefined
from party_booking.services.catalog_service import weekday_name
from party_booking.services.reservation_service import ExactReservation, RangeBooking
from party_booking.services.timeslots import (
    TimeRange,
    contains,
    format_hhmm,
    overlaps,
    parse_time,
)

logger = logging.getLogger(__name__)


class SlotCatalog(Protocol):
    async def slots_for_weekday(self, weekday: str) -> list[TimeRange]: ...


class ReservationQuery(Protocol):
    async def exact_reservations_on(self, d: date) -> list[ExactReservation]: ...

    async def range_reservations_covering(self, d: date) -> list[RangeBooking]: ...


@dataclass(frozen=True)
class AvailabilityRequest:
    date: date


@dataclass(frozen=True)
class AvailabilityResult:
    """Slots for `date` in catalog order, plus the subset that is taken."""

    date: date
    weekday: str
    slots: tuple[TimeRange, ...] = ()
    unavailable: frozenset[TimeRange] = frozenset()
    degraded_sources: tuple[str, ...] = ()

    @property
    def available(self) -> list[TimeRange]:
        return [s for s in self.slots if s not in self.unavailable]

    def is_available(self, slot: TimeRange) -> bool:
        return slot in self.slots and slot not in self.unavailable


def exact_conflicts(slots: Sequence[TimeRange], reservations: Sequence[ExactReservation]) -> set[TimeRange]:
    blocked: set[TimeRange] = set()
    for r in reservations:
        normalized = format_hhmm(r.time)
        parsed = parse_time(normalized)
        if not parsed.ok:
            logger.warning("Skipping reservation on %s with malformed time %r", r.date, r.time)
            continue
        for slot in slots:
            if slot.is_point:
                if format_hhmm(slot.label or str(slot.start)) == normalized:
                    blocked.add(slot)
            elif contains(slot, parsed.value):
                blocked.add(slot)
    return blocked


def range_conflicts(
    slots: Sequence[TimeRange], reservations: Sequence[RangeBooking], on: date
) -> set[TimeRange]:
    blocked: set[TimeRange] = set()
    for r in reservations:
        if not r.covers(on):
            continue
        start = parse_time(format_hhmm(r.start_time))
        end = parse_time(format_hhmm(r.end_time))
        if not (start.ok and end.ok) or end.value <= start.value:
            logger.warning(
                "Skipping %s range reservation %s..%s with unusable window %r-%r",
                r.type or "untyped", r.start_date, r.end_date, r.start_time, r.end_time,
            )
            continue
        window = TimeRange(start.value, end.value)
        blocked.update(slot for slot in slots if overlaps(window, slot))
    return blocked


class AvailabilityResolver:
    def __init__(self, catalog: SlotCatalog, reservations: ReservationQuery) -> None:
        self.catalog = catalog
        self.reservations = reservations

    async def _fetch(self, source: str, coro, degraded: list[str]) -> list:
        try:
            return await coro
        except DataSourceUnavailable as e:
            logger.warning("Treating %s as empty: %s", source, e)
            degraded.append(e.source or source)
            return []

    async def resolve(self, request: AvailabilityRequest) -> AvailabilityResult:
        d = request.date
        weekday = weekday_name(d)
        try:
            slots = tuple(await self.catalog.slots_for_weekday(weekday))
        except NoSlotsDefined:
            logger.info("No slots defined for %s (%s)", weekday, d)
            return AvailabilityResult(date=d, weekday=weekday)
        except DataSourceUnavailable as e:
            logger.warning("Slot catalog unavailable for %s: %s", d, e)
            return AvailabilityResult(date=d, weekday=weekday, degraded_sources=(e.source,))
        if not slots:
            return AvailabilityResult(date=d, weekday=weekday)

        # Catalog is known; both reservation sources can load in parallel
        degraded: list[str] = []
        exact, ranged = await asyncio.gather(
            self._fetch("exact reservations", self.reservations.exact_reservations_on(d), degraded),
            self._fetch("range reservations", self.reservations.range_reservations_covering(d), degraded),
        )

        unavailable = exact_conflicts(slots, exact) | range_conflicts(slots, ranged, d)
        logger.debug(
            "Availability %s: %d slot(s), %d taken (%d exact, %d range reservations)",
            d, len(slots), len(unavailable), len(exact), len(ranged),
        )
        return AvailabilityResult(
            date=d,
            weekday=weekday,
            slots=slots,
            unavailable=frozenset(unavailable),
            degraded_sources=tuple(degraded),
        )

    async def unavailable_slots(self, d: date) -> frozenset[TimeRange]:
        result = await self.resolve(AvailabilityRequest(d))
        return result.unavailable


@dataclass
class SlotSelection:
    """State owned by the caller: the selected date and the last result accepted for it."""

    selected_date: date | None = None
    result: AvailabilityResult | None = None

    def select(self, d: date) -> AvailabilityRequest:
        if d != self.selected_date:
            self.selected_date = d
            self.result = None
        return AvailabilityRequest(d)

    def accept(self, result: AvailabilityResult) -> bool:
        """Keep `result` only if it was computed for the currently selected date."""
        if result.date != self.selected_date:
            logger.debug("Discarding stale availability for %s (selected %s)", result.date, self.selected_date)
            return False
        self.result = result
        return True
