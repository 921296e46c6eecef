import datetime as dt

from pydantic import BaseModel


class SlotInfo(BaseModel):
    label: str  # "10:00-13:00"
    start: str  # HH:MM
    end: str  # HH:MM
    available: bool


class AvailableSlotsResponse(BaseModel):
    date: dt.date  # the date these slots were computed for; the widget drops stale responses
    weekday: str
    slots: list[SlotInfo]
    degraded: list[str] = []  # sources that failed and were treated as empty
