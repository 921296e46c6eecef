from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from party_booking.models.theme import PartyTheme


async def list_themes(session: AsyncSession, search: str | None = None) -> list[PartyTheme]:
    q = select(PartyTheme).order_by(PartyTheme.name)
    if search:
        q = q.where(PartyTheme.name.ilike(f"%{search.strip()}%"))
    result = await session.execute(q)
    return list(result.scalars().all())
