from rest_framework import serializers


class PunchSerializer(serializers.Serializer):
    """Punch request from a kiosk; date and time default to now."""

    employee_id = serializers.IntegerField()
    date = serializers.DateField(required=False)
    time = serializers.CharField(required=False, max_length=20)


class PunchOutSerializer(PunchSerializer):
    total_hours = serializers.CharField(required=False, allow_blank=True, max_length=20)


class AttendanceBroadcastSerializer(serializers.Serializer):
    type = serializers.CharField()
    employeeId = serializers.CharField()  # noqa: N815
    employeeName = serializers.CharField()  # noqa: N815
    date = serializers.CharField()
    time = serializers.CharField()
    totalHours = serializers.CharField(required=False, allow_null=True)  # noqa: N815
    seq = serializers.IntegerField()


class AttendanceRoomSerializer(serializers.Serializer):
    room = serializers.CharField()
    members = serializers.IntegerField()
    connections = serializers.IntegerField()
    last_seq = serializers.IntegerField()
