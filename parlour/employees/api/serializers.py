from rest_framework import serializers

from parlour.employees.models import Employee


class EmployeeSerializer(serializers.ModelSerializer[Employee]):
    # Uniqueness is checked by the view so a clash can answer 409
    email = serializers.EmailField()

    class Meta:
        model = Employee
        fields = [
            "id",
            "name",
            "email",
            "position",
            "phone",
            "join_date",
            "avatar",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "avatar", "created_at", "updated_at"]
        extra_kwargs = {"join_date": {"required": False}}

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate_name(self, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "This field may not be blank."
            raise serializers.ValidationError(msg)
        return value


class EmployeeSummarySerializer(serializers.ModelSerializer[Employee]):
    class Meta:
        model = Employee
        fields = ["id", "name", "email", "position"]
