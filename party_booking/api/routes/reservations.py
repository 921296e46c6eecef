import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from party_booking.api.deps import get_session
from party_booking.api.schemas.reservation import ReservationRequest
from party_booking.models.reservation import BirthdayReservationCreate, BirthdayReservationPublic
from party_booking.services.notify_service import forward_reservation
from party_booking.services.reservation_service import create_reservation

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", response_model=BirthdayReservationPublic, status_code=status.HTTP_201_CREATED)
async def confirm_reservation(
    body: ReservationRequest,
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_session),
) -> BirthdayReservationPublic:
    data = BirthdayReservationCreate(
        date=body.date,
        time=body.time,
        theme=body.theme,
        child=body.child_name,
        parent=body.parent_name,
        phone=body.phone,
        email=body.email,
        birthday=body.child_birthday,
        message=body.message or None,
        invoice=body.invoice or None,
    )
    reservation = await create_reservation(session, data)
    public = BirthdayReservationPublic.model_validate(reservation, from_attributes=True)
    # Notify staff via webhook after the response is sent
    background_tasks.add_task(forward_reservation, public.model_dump(mode="json"))
    return public
