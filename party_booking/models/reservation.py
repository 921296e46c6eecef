import datetime as dt

from sqlmodel import Field, SQLModel


def _naive_now() -> dt.datetime:
    """Naive local wall-clock time for TIMESTAMP WITHOUT TIME ZONE columns."""
    return dt.datetime.now().replace(microsecond=0)


class BirthdayReservationBase(SQLModel):
    date: dt.date = Field(index=True)
    # Slot label chosen in the wizard, e.g. "14:00-17:00"; its first five chars are the party start
    time: str
    theme: str
    child: str
    parent: str
    phone: str
    email: str
    birthday: str
    message: str | None = None
    invoice: str | None = None


class BirthdayReservation(BirthdayReservationBase, table=True):
    __tablename__ = "birthday_reservations"
    id: int | None = Field(default=None, primary_key=True)
    created_at: dt.datetime = Field(default_factory=_naive_now)


class BirthdayReservationCreate(BirthdayReservationBase):
    pass


class BirthdayReservationPublic(BirthdayReservationBase):
    id: int
    created_at: dt.datetime
