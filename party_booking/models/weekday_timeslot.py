from sqlmodel import Field, SQLModel


class WeekdayTimeslot(SQLModel, table=True):
    __tablename__ = "weekday_timeslots"
    id: int | None = Field(default=None, primary_key=True)
    day: str = Field(index=True)  # lower-case English weekday, e.g. "monday"
    timeslot: str  # "10:00-13:00"
    position: int = 0
