"""Role-based permission table.

Every protected operation names a ``Permission``; whether a role holds it is
decided here and nowhere else. Views pick the permission per action and wrap
it in ``HasPermission``.
"""

from __future__ import annotations

from django.db import models
from rest_framework.permissions import BasePermission

from parlour.users.models import Role


class Permission(models.TextChoices):
    EMPLOYEES_LIST = "employees.list"
    EMPLOYEES_VIEW = "employees.view"
    EMPLOYEES_CREATE = "employees.create"
    EMPLOYEES_UPDATE = "employees.update"
    EMPLOYEES_DELETE = "employees.delete"
    TASKS_LIST = "tasks.list"
    TASKS_VIEW = "tasks.view"
    TASKS_CREATE = "tasks.create"
    TASKS_UPDATE = "tasks.update"
    TASKS_DELETE = "tasks.delete"
    TASKS_LIST_BY_EMPLOYEE = "tasks.list_by_employee"
    ATTENDANCE_PUNCH = "attendance.punch"


EVERYONE = frozenset(
    {
        Permission.EMPLOYEES_LIST,
        Permission.TASKS_LIST,
        Permission.TASKS_VIEW,
        Permission.ATTENDANCE_PUNCH,
    },
)

ROLE_PERMISSIONS: dict[str, frozenset[str]] = {
    Role.EMPLOYEE: EVERYONE,
    Role.ADMIN: EVERYONE | {Permission.TASKS_LIST_BY_EMPLOYEE},
    Role.SUPERADMIN: frozenset(Permission.values),
}


def permissions_for(role: str) -> frozenset[str]:
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_permission(user, permission: str) -> bool:
    if not (user and getattr(user, "is_authenticated", False)):
        return False
    role = getattr(user, "effective_role", None)
    if role is None:
        return False
    return permission in permissions_for(role)


class HasPermission(BasePermission):
    """Allow the request when the user's role holds ``permission``."""

    message = "You do not have permission to perform this action."

    def __init__(self, permission: str):
        self.permission = permission

    def has_permission(self, request, view) -> bool:
        return has_permission(getattr(request, "user", None), self.permission)
