"""
Wall-clock time parsing and half-open interval arithmetic for bookable slots.

Times are naive local wall-clock values; a slot is the half-open range [start, end).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from party_booking.core.errors import MalformedTimeValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class TimeOfDay:
    hours: int
    minutes: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hours <= 23 and 0 <= self.minutes <= 59):
            raise MalformedTimeValue(f"{self.hours}:{self.minutes}", "time out of range")

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


MIDNIGHT = TimeOfDay(0)


@dataclass(frozen=True)
class TimeParseResult:
    """Outcome of parse_time: either a value or the reason it failed."""

    value: TimeOfDay | None = None
    error: MalformedTimeValue | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_minutes(t: TimeOfDay) -> int:
    return t.hours * 60 + t.minutes


def format_hhmm(text: object) -> str:
    """Display normalisation: keep the first five characters ("14:30:00" -> "14:30")."""
    return str(text)[0:5]


def parse_time(text: object) -> TimeParseResult:
    """Parse "HH:MM" or "HH:MM:SS". Anything after the minutes is ignored. Never raises."""
    if not isinstance(text, str):
        return TimeParseResult(error=MalformedTimeValue(text, "time is not text"))
    parts = text.strip().split(":")
    if len(parts) < 2:
        return TimeParseResult(error=MalformedTimeValue(text, "expected HH:MM"))
    hh, mm = parts[0].strip(), parts[1].strip()
    # isdigit alone accepts superscripts and other non-ASCII digits that int() rejects
    if not (hh.isascii() and hh.isdigit() and mm.isascii() and mm.isdigit()):
        return TimeParseResult(error=MalformedTimeValue(text, "hour and minute must be numeric"))
    try:
        return TimeParseResult(value=TimeOfDay(int(hh), int(mm)))
    except MalformedTimeValue as e:
        return TimeParseResult(error=MalformedTimeValue(text, e.reason))


def time_or_midnight(text: object) -> TimeOfDay:
    """Tolerant variant of parse_time: bad input becomes midnight.

    No server code path calls this; the resolver skips bad times instead. It is kept for
    callers that want the midnight fallback when rendering stored data.
    """
    result = parse_time(text)
    if result.ok:
        return result.value
    logger.warning("Malformed time %r (%s); falling back to 00:00", text, result.error.reason)
    return MIDNIGHT


@dataclass(frozen=True)
class TimeRange:
    start: TimeOfDay
    end: TimeOfDay
    # Original catalog text, e.g. "10:00-13:00"; used as the slot's display/selection value
    label: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise MalformedTimeValue(self.label or f"{self.start}-{self.end}", "range ends before it starts")

    @property
    def is_point(self) -> bool:
        """A fixed single time rather than a window."""
        return self.start == self.end

    def __str__(self) -> str:
        if self.label:
            return self.label
        if self.is_point:
            return str(self.start)
        return f"{self.start}-{self.end}"


def overlaps(a: TimeRange, b: TimeRange) -> bool:
    """Half-open overlap; touching endpoints and zero-length ranges never overlap."""
    if a.is_point or b.is_point:
        return False
    return to_minutes(a.start) < to_minutes(b.end) and to_minutes(a.end) > to_minutes(b.start)


def contains(r: TimeRange, t: TimeOfDay) -> bool:
    return to_minutes(r.start) <= to_minutes(t) < to_minutes(r.end)


def _require_time(text: str, whole: str) -> TimeOfDay:
    result = parse_time(text)
    if not result.ok:
        raise MalformedTimeValue(whole, result.error.reason)
    return result.value


def parse_range(text: object) -> TimeRange:
    """Parse a catalog range "HH:MM-HH:MM" (or a single "HH:MM" point)."""
    if not isinstance(text, str) or not text.strip():
        raise MalformedTimeValue(text, "empty time range")
    label = text.strip()
    if "-" not in label:
        t = _require_time(label, label)
        return TimeRange(t, t, label)
    start_text, end_text = label.split("-", 1)
    start = _require_time(start_text, label)
    end = _require_time(end_text, label)
    return TimeRange(start, end, label)
