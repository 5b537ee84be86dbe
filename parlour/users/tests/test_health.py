from http import HTTPStatus

import pytest
from asgiref.sync import async_to_sync
from django.db import connection as dj_conn

from parlour.realtime import socketio as hub
from parlour.realtime.registry import ConnectionRegistry


class DummyDbError(Exception):  # TRY002: use a custom exception in tests
    """Synthetic DB error for testing."""


@pytest.mark.django_db
def test_health_ok(client):
    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["status"] == "ok"
    assert data["components"]["db"]["ok"] is True
    assert data["components"]["realtime"]["room"] == "attendance-room"


@pytest.mark.django_db
def test_health_degraded_when_hub_closed(client, monkeypatch):
    registry = ConnectionRegistry()
    registry.close()
    monkeypatch.setattr("config.health.registry", registry)
    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    data = resp.json()
    assert data["components"]["realtime"]["ok"] is False
    assert data["status"] == "degraded"


@pytest.mark.django_db
def test_health_degraded_when_db_fails(client, monkeypatch):
    msg = "db down"  # EM101/TRY003: assign message to a variable

    def raise_cursor():
        raise DummyDbError(msg)

    monkeypatch.setattr(dj_conn, "cursor", raise_cursor, raising=True)
    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    data = resp.json()
    assert data["components"]["db"]["ok"] is False


def test_shutdown_closes_registry(monkeypatch):
    registry = ConnectionRegistry()
    registry.register("sid-1")
    monkeypatch.setattr(hub, "registry", registry)

    async_to_sync(hub.shutdown)()

    assert registry.closed is True
    assert len(registry) == 0
