"""Views for Tasks API."""

import logging

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from parlour.employees.models import Employee
from parlour.tasks.filters import TaskFilter
from parlour.tasks.models import Task
from parlour.tasks.services import resolve_assignee
from parlour.users.permissions import HasPermission
from parlour.users.permissions import Permission

from .serializers import TaskSerializer

logger = logging.getLogger(__name__)

ACTION_PERMISSIONS = {
    "list": Permission.TASKS_LIST,
    "retrieve": Permission.TASKS_VIEW,
    "create": Permission.TASKS_CREATE,
    "update": Permission.TASKS_UPDATE,
    "partial_update": Permission.TASKS_UPDATE,
    "destroy": Permission.TASKS_DELETE,
    "permanent": Permission.TASKS_DELETE,
    "by_employee": Permission.TASKS_LIST_BY_EMPLOYEE,
}


@extend_schema_view(
    list=extend_schema(tags=["Tasks"]),
    retrieve=extend_schema(tags=["Tasks"]),
    create=extend_schema(tags=["Tasks"]),
    update=extend_schema(tags=["Tasks"]),
    partial_update=extend_schema(tags=["Tasks"]),
    destroy=extend_schema(tags=["Tasks"]),
)
class TaskViewSet(viewsets.ModelViewSet):
    queryset = Task.objects.select_related("assigned_to", "created_by")
    serializer_class = TaskSerializer
    pagination_class = None
    # Filtering is only offered on the per-employee listing
    filter_backends: list = []

    def get_queryset(self):
        qs = super().get_queryset()
        if getattr(self, "action", None) == "list":
            return qs.filter(is_active=True)
        return qs

    def get_permissions(self):
        permission = ACTION_PERMISSIONS.get(getattr(self, "action", None))
        if permission is None:
            return [IsAuthenticated()]
        return [IsAuthenticated(), HasPermission(permission)]

    def perform_create(self, serializer):
        assignee = resolve_assignee(serializer.validated_data["assigned_to"])
        task = serializer.save(assigned_to=assignee, created_by=self.request.user)
        logger.info("Created task %s for employee %s", task.pk, assignee.pk)

    def perform_update(self, serializer):
        extra = {}
        if "assigned_to" in serializer.validated_data:
            extra["assigned_to"] = resolve_assignee(
                serializer.validated_data["assigned_to"],
            )
        serializer.save(**extra)

    def destroy(self, request, *args, **kwargs):
        task = self.get_object()
        task.is_active = False
        task.save(update_fields=["is_active", "updated_at"])
        return Response(
            {"detail": "Task deleted successfully"},
            status=status.HTTP_200_OK,
        )

    @extend_schema(tags=["Tasks"], request=None)
    @action(detail=True, methods=["delete"], url_path="permanent")
    def permanent(self, request, pk=None):
        task = self.get_object()
        task.delete()
        return Response(
            {"detail": "Task permanently deleted"},
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        tags=["Tasks"],
        parameters=[
            OpenApiParameter("status", str, enum=Task.Status.values),
            OpenApiParameter("is_active", bool),
        ],
        responses=TaskSerializer(many=True),
    )
    @action(
        detail=False,
        methods=["get"],
        url_path=r"employee/(?P<employee_id>\d+)",
        url_name="by-employee",
    )
    def by_employee(self, request, employee_id=None):
        employee = get_object_or_404(Employee, pk=employee_id)
        filterset = TaskFilter(
            request.query_params,
            queryset=self.get_queryset().filter(assigned_to=employee),
        )
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)
        tasks = filterset.qs.order_by("due_date", "id")
        serializer = self.get_serializer(tasks, many=True)
        return Response(serializer.data)
