from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from party_booking.api.deps import get_session
from party_booking.models.theme import PartyThemePublic
from party_booking.services.theme_service import list_themes

router = APIRouter(prefix="/themes", tags=["themes"])


@router.get("", response_model=list[PartyThemePublic])
async def themes(
    search: str | None = Query(None),
    session: AsyncSession = Depends(get_session),
) -> list[PartyThemePublic]:
    rows = await list_themes(session, search=search)
    return [PartyThemePublic.model_validate(t, from_attributes=True) for t in rows]
