from party_booking.models.reservation import (
    BirthdayReservation,
    BirthdayReservationCreate,
    BirthdayReservationPublic,
)
from party_booking.models.range_reservation import RangeReservation
from party_booking.models.weekday_timeslot import WeekdayTimeslot
from party_booking.models.theme import PartyTheme, PartyThemePublic

__all__ = [
    "BirthdayReservation",
    "BirthdayReservationCreate",
    "BirthdayReservationPublic",
    "RangeReservation",
    "WeekdayTimeslot",
    "PartyTheme",
    "PartyThemePublic",
]
