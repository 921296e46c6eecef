from party_booking.core.db import async_session_maker, get_session
from party_booking.services.availability_service import AvailabilityResolver
from party_booking.services.catalog_service import SqlSlotCatalog
from party_booking.services.reservation_service import SqlReservationQuery

__all__ = ["get_session", "get_resolver"]


def get_resolver() -> AvailabilityResolver:
    """Resolver reading catalog and reservations through independent sessions."""
    return AvailabilityResolver(
        catalog=SqlSlotCatalog(async_session_maker),
        reservations=SqlReservationQuery(async_session_maker),
    )
