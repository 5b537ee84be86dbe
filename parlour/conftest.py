import datetime as dt
from unittest import mock

import pytest
from rest_framework.test import APIClient

from parlour.employees.models import Employee
from parlour.realtime.socketio import sio
from parlour.users.models import Role
from parlour.users.models import User


def _make_user(email: str, role: str, name: str = "") -> User:
    return User.objects.create_user(
        username=email,
        email=email,
        password="TestPass123!",  # noqa: S106
        name=name or email.split("@")[0].title(),
        role=role,
    )


@pytest.fixture
def user(db) -> User:
    return _make_user("employee@example.com", Role.EMPLOYEE)


@pytest.fixture
def admin_role_user(db) -> User:
    return _make_user("admin-role@example.com", Role.ADMIN)


@pytest.fixture
def superadmin(db) -> User:
    return _make_user("owner@example.com", Role.SUPERADMIN, name="Owner")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def client_for(api_client):
    def _client_for(account: User) -> APIClient:
        api_client.force_authenticate(user=account)
        return api_client

    return _client_for


@pytest.fixture
def employee(db) -> Employee:
    return Employee.objects.create(
        name="Asha Rao",
        email="asha@parlour.test",
        position="Stylist",
        phone="+15550100",
        join_date=dt.date(2024, 1, 15),
    )


@pytest.fixture
def emitted():
    """Patch the Socket.IO server so broadcasts are recorded instead of sent."""

    with (
        mock.patch.object(sio, "emit", new_callable=mock.AsyncMock) as emit,
        mock.patch.object(sio, "enter_room", new_callable=mock.AsyncMock),
    ):
        yield emit
