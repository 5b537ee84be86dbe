from rest_framework import status

from parlour.employees.models import Employee
from tests.permissions.mixins import ALL_ROLES
from tests.permissions.mixins import ROLE_ADMIN
from tests.permissions.mixins import ROLE_EMPLOYEE
from tests.permissions.mixins import ROLE_SUPERADMIN
from tests.permissions.mixins import RoleAPITestCase

NEW_EMPLOYEE = {
    "name": "New Hire",
    "email": "new.hire@parlour.test",
    "position": "Stylist",
    "phone": "+15550199",
}


class EmployeeDirectoryPermissionTests(RoleAPITestCase):
    def test_every_role_lists_active_employees(self):
        for role in ALL_ROLES:
            response = self.get("api_v1:employees-list", role=role)
            self.assert_http_status(response, status.HTTP_200_OK)
            ids = [row["id"] for row in self.extract_results(response)]
            assert ids == [self.employee.pk], role

    def test_only_superadmin_retrieves_by_id(self):
        kwargs = {"pk": self.employee.pk}
        for role in (ROLE_EMPLOYEE, ROLE_ADMIN):
            self.assert_denied(
                self.get("api_v1:employees-detail", role=role, reverse_kwargs=kwargs),
            )
        allowed = self.get(
            "api_v1:employees-detail",
            role=ROLE_SUPERADMIN,
            reverse_kwargs=kwargs,
        )
        self.assert_allowed(allowed)

    def test_forbidden_beats_not_found(self):
        response = self.get(
            "api_v1:employees-detail",
            role=ROLE_ADMIN,
            reverse_kwargs={"pk": 9999},
        )
        self.assert_denied(response)

    def test_only_superadmin_creates(self):
        for role in (ROLE_EMPLOYEE, ROLE_ADMIN):
            self.assert_denied(
                self.post("api_v1:employees-list", role=role, payload=NEW_EMPLOYEE),
            )
        assert not Employee.objects.filter(email=NEW_EMPLOYEE["email"]).exists()
        allowed = self.post(
            "api_v1:employees-list",
            role=ROLE_SUPERADMIN,
            payload=NEW_EMPLOYEE,
        )
        self.assert_http_status(allowed, status.HTTP_201_CREATED)

    def test_only_superadmin_updates_and_deletes(self):
        kwargs = {"pk": self.employee.pk}
        for role in (ROLE_EMPLOYEE, ROLE_ADMIN):
            self.assert_denied(
                self.patch(
                    "api_v1:employees-detail",
                    role=role,
                    payload={"position": "Manager"},
                    reverse_kwargs=kwargs,
                ),
            )
            self.assert_denied(
                self.delete("api_v1:employees-detail", role=role, reverse_kwargs=kwargs),
            )
            self.assert_denied(
                self.delete(
                    "api_v1:employees-permanent",
                    role=role,
                    reverse_kwargs=kwargs,
                ),
            )
        self.employee.refresh_from_db()
        assert self.employee.is_active is True
        assert self.employee.position == "Stylist"

        self.assert_allowed(
            self.delete(
                "api_v1:employees-detail",
                role=ROLE_SUPERADMIN,
                reverse_kwargs=kwargs,
            ),
        )

    def test_anonymous_request_is_unauthorized(self):
        response = self.client.get("/api/v1/employees/")
        self.assert_denied(response, code=status.HTTP_401_UNAUTHORIZED)
