import logging

import httpx

from party_booking.core.config import settings

logger = logging.getLogger(__name__)


async def forward_reservation(payload: dict) -> bool:
    """POST a confirmed reservation to the notification webhook. Use from background task.

    Failures are logged, never raised: the reservation is already stored.
    """
    if not settings.webhook_enabled:
        logger.debug("Reservation webhook not configured, skipping forward")
        return False
    try:
        async with httpx.AsyncClient(timeout=settings.webhook_timeout_seconds) as client:
            resp = await client.post(settings.reservation_webhook_url, json=payload)
    except httpx.HTTPError as e:
        logger.exception("Reservation webhook call failed: %s", e)
        return False
    if resp.is_success:
        logger.info("Reservation forwarded to webhook: status=%s", resp.status_code)
        return True
    logger.warning(
        "Reservation webhook rejected payload: status=%s body=%s",
        resp.status_code,
        resp.text[:500],
    )
    return False
