import datetime as dt

from pydantic import BaseModel, EmailStr, Field


class ReservationRequest(BaseModel):
    date: dt.date
    time: str = Field(min_length=1)
    theme: str = Field(min_length=1)
    child_name: str = Field(min_length=1)
    parent_name: str = Field(min_length=1)
    child_birthday: str
    phone: str = Field(min_length=1)
    email: EmailStr
    message: str | None = None
    invoice: str | None = None
