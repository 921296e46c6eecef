"""
Error kinds raised while resolving slot availability.
None of them should reach the widget as a failure: the resolver degrades each one
to "no data from that source" and logs it.
"""
from __future__ import annotations


class BookingError(Exception):
    """Base class for availability/booking errors."""


class MalformedTimeValue(BookingError, ValueError):
    """A time or time-range text could not be parsed."""

    def __init__(self, text: object, reason: str = "unparsable time") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class DataSourceUnavailable(BookingError):
    """A catalog or reservation query failed (I/O, network, driver)."""

    def __init__(self, source: str, cause: BaseException | None = None) -> None:
        self.source = source
        self.cause = cause
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "unavailable"
        super().__init__(f"{source} query failed ({detail})")


class NoSlotsDefined(BookingError):
    """The weekday has no entry in the slot catalog."""

    def __init__(self, weekday: str) -> None:
        self.weekday = weekday
        super().__init__(f"no bookable slots defined for {weekday}")
