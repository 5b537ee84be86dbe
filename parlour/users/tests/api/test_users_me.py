import pytest
from rest_framework import status

pytestmark = pytest.mark.django_db


def test_me_returns_effective_role(client_for, superadmin):
    r = client_for(superadmin).get("/api/v1/users/me/")
    assert r.status_code == status.HTTP_200_OK
    assert r.data == {
        "id": superadmin.pk,
        "name": "Owner",
        "email": "owner@example.com",
        "role": "superadmin",
    }


def test_employee_lists_only_self(client_for, user, superadmin):
    r = client_for(user).get("/api/v1/users/")
    assert [row["id"] for row in r.data] == [user.pk]


def test_superadmin_lists_everyone(client_for, user, superadmin):
    r = client_for(superadmin).get("/api/v1/users/")
    assert {row["id"] for row in r.data} == {user.pk, superadmin.pk}


def test_me_requires_token(api_client):
    r = api_client.get("/api/v1/users/me/")
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
