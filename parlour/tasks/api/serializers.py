from rest_framework import serializers

from parlour.employees.api.serializers import EmployeeSummarySerializer
from parlour.tasks.models import Task
from parlour.users.models import User


class AssigneeField(serializers.Field):
    """Accepts an employee id, renders the assignee summary."""

    default_error_messages = {"invalid": "A valid employee id is required."}

    def to_internal_value(self, data):
        try:
            return int(data)
        except (TypeError, ValueError):
            self.fail("invalid")

    def to_representation(self, value):
        return EmployeeSummarySerializer(value).data


class CreatorSerializer(serializers.ModelSerializer[User]):
    class Meta:
        model = User
        fields = ["id", "name", "email"]


class TaskSerializer(serializers.ModelSerializer[Task]):
    assigned_to = AssigneeField()
    created_by = CreatorSerializer(read_only=True)

    class Meta:
        model = Task
        fields = [
            "id",
            "title",
            "description",
            "assigned_to",
            "status",
            "priority",
            "due_date",
            "created_by",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_by", "created_at", "updated_at"]
