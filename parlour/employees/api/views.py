"""Views for Employees API."""

import logging

from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from config.exceptions import Conflict
from parlour.employees.models import Employee
from parlour.users.permissions import HasPermission
from parlour.users.permissions import Permission

from .serializers import EmployeeSerializer

logger = logging.getLogger(__name__)

ACTION_PERMISSIONS = {
    "list": Permission.EMPLOYEES_LIST,
    "retrieve": Permission.EMPLOYEES_VIEW,
    "create": Permission.EMPLOYEES_CREATE,
    "update": Permission.EMPLOYEES_UPDATE,
    "partial_update": Permission.EMPLOYEES_UPDATE,
    "destroy": Permission.EMPLOYEES_DELETE,
    "permanent": Permission.EMPLOYEES_DELETE,
}


def _ensure_email_available(email: str, exclude_pk=None) -> None:
    qs = Employee.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        msg = "Employee with this email already exists"
        raise Conflict(msg)


@extend_schema_view(
    list=extend_schema(tags=["Employees"]),
    retrieve=extend_schema(tags=["Employees"]),
    create=extend_schema(tags=["Employees"]),
    update=extend_schema(tags=["Employees"]),
    partial_update=extend_schema(tags=["Employees"]),
    destroy=extend_schema(tags=["Employees"]),
)
class EmployeeViewSet(viewsets.ModelViewSet):
    queryset = Employee.objects.all()
    serializer_class = EmployeeSerializer
    pagination_class = None

    def get_queryset(self):
        qs = super().get_queryset()
        # Lookups by id reach soft-deleted rows; the collection does not
        if getattr(self, "action", None) == "list":
            return qs.filter(is_active=True)
        return qs

    def get_permissions(self):
        permission = ACTION_PERMISSIONS.get(getattr(self, "action", None))
        if permission is None:
            return [IsAuthenticated()]
        return [IsAuthenticated(), HasPermission(permission)]

    def perform_create(self, serializer):
        _ensure_email_available(serializer.validated_data["email"])
        employee = serializer.save()
        logger.info("Created employee %s (%s)", employee.pk, employee.email)

    def perform_update(self, serializer):
        email = serializer.validated_data.get("email")
        if email and email != serializer.instance.email:
            _ensure_email_available(email, exclude_pk=serializer.instance.pk)
        serializer.save()

    def destroy(self, request, *args, **kwargs):
        employee = self.get_object()
        employee.is_active = False
        employee.save(update_fields=["is_active", "updated_at"])
        logger.info("Deactivated employee %s", employee.pk)
        return Response(
            {"detail": "Employee deleted successfully"},
            status=status.HTTP_200_OK,
        )

    @extend_schema(tags=["Employees"], request=None)
    @action(detail=True, methods=["delete"], url_path="permanent")
    def permanent(self, request, pk=None):
        employee = self.get_object()
        employee_id = employee.pk
        employee.delete()
        logger.info("Permanently deleted employee %s", employee_id)
        return Response(
            {"detail": "Employee permanently deleted"},
            status=status.HTTP_200_OK,
        )


@extend_schema(tags=["Employees"])
class PublicEmployeeListView(generics.ListAPIView):
    """Active employees for the attendance kiosk; no token required."""

    queryset = Employee.objects.filter(is_active=True)
    serializer_class = EmployeeSerializer
    permission_classes = [AllowAny]
    authentication_classes: list = []
    pagination_class = None
