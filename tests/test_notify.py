import httpx
import pytest

from party_booking.core.config import settings
from party_booking.services import notify_service

PAYLOAD = {"id": 7, "date": "2026-10-19", "time": "10:00-13:00", "child": "Bence"}


@pytest.fixture
def webhook(monkeypatch):
    """Route the service's AsyncClient through a MockTransport; returns the recorded requests."""
    requests: list[httpx.Request] = []
    state = {"status": 200}

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if state["status"] is None:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(state["status"], text="ok")

    real_client = httpx.AsyncClient

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(notify_service.httpx, "AsyncClient", client_factory)
    monkeypatch.setattr(settings, "reservation_webhook_url", "https://hooks.example.com/reservations")
    return requests, state


async def test_forward_posts_json(webhook):
    requests, _ = webhook
    assert await notify_service.forward_reservation(PAYLOAD) is True
    assert len(requests) == 1
    assert str(requests[0].url) == "https://hooks.example.com/reservations"
    assert requests[0].method == "POST"
    assert httpx.Response(200, content=requests[0].content).json() == PAYLOAD


async def test_forward_logs_rejection(webhook, caplog):
    _, state = webhook
    state["status"] = 500
    assert await notify_service.forward_reservation(PAYLOAD) is False
    assert "rejected payload" in caplog.text


async def test_forward_swallows_transport_errors(webhook, caplog):
    _, state = webhook
    state["status"] = None
    assert await notify_service.forward_reservation(PAYLOAD) is False
    assert "webhook call failed" in caplog.text


async def test_forward_disabled_without_url(webhook, monkeypatch):
    requests, _ = webhook
    monkeypatch.setattr(settings, "reservation_webhook_url", "")
    assert await notify_service.forward_reservation(PAYLOAD) is False
    assert requests == []
