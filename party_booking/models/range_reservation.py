from datetime import date, datetime

from sqlmodel import Field, SQLModel

from party_booking.models.reservation import _naive_now


class RangeReservation(SQLModel, table=True):
    """A block over [start_date, end_date] with the same daily window, e.g. a room rental."""

    __tablename__ = "range_reservations"
    id: int | None = Field(default=None, primary_key=True)
    start_date: date = Field(index=True)
    end_date: date = Field(index=True)
    start_time: str
    end_time: str
    type: str = ""
    created_at: datetime = Field(default_factory=_naive_now)
