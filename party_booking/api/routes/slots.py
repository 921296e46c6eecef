from datetime import date

from fastapi import APIRouter, Depends, Query

from party_booking.api.deps import get_resolver
from party_booking.api.schemas.slots import AvailableSlotsResponse, SlotInfo
from party_booking.services.availability_service import AvailabilityRequest, AvailabilityResolver

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/available", response_model=AvailableSlotsResponse)
async def available_slots(
    date_param: date = Query(..., alias="date"),
    resolver: AvailabilityResolver = Depends(get_resolver),
) -> AvailableSlotsResponse:
    """Return the weekday's slots for the given date, each flagged available or taken."""
    result = await resolver.resolve(AvailabilityRequest(date_param))
    slot_infos = [
        SlotInfo(
            label=str(s),
            start=str(s.start),
            end=str(s.end),
            available=result.is_available(s),
        )
        for s in result.slots
    ]
    return AvailableSlotsResponse(
        date=result.date,
        weekday=result.weekday,
        slots=slot_infos,
        degraded=list(result.degraded_sources),
    )
