"""REST publishing for kiosks that cannot hold a socket open."""

import datetime as dt
import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from parlour.attendance.events import AttendanceEvent
from parlour.attendance.events import InvalidAttendanceEvent
from parlour.attendance.events import PunchKind
from parlour.attendance.events import format_clock_time
from parlour.employees.models import Employee
from parlour.realtime.events.attendance import publish_attendance_update
from parlour.realtime.socketio import ATTENDANCE_ROOM
from parlour.realtime.socketio import registry
from parlour.users.permissions import HasPermission
from parlour.users.permissions import Permission

from .serializers import AttendanceBroadcastSerializer
from .serializers import AttendanceRoomSerializer
from .serializers import PunchOutSerializer
from .serializers import PunchSerializer

logger = logging.getLogger(__name__)


class _AttendanceView(APIView):
    def get_permissions(self):
        return [IsAuthenticated(), HasPermission(Permission.ATTENDANCE_PUNCH)]


class _PunchView(_AttendanceView):
    kind: PunchKind
    serializer_class = PunchSerializer

    def build_payload(self, employee: Employee, data) -> dict:
        now = timezone.localtime()
        date: dt.date = data.get("date") or now.date()
        return {
            "type": self.kind.value,
            "employeeId": str(employee.pk),
            "employeeName": employee.name,
            "date": date.isoformat(),
            "time": data.get("time") or format_clock_time(now),
        }

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = get_object_or_404(Employee, pk=serializer.validated_data["employee_id"])
        if not employee.is_active:
            raise ValidationError({"employee_id": ["Employee is inactive"]})

        try:
            event = AttendanceEvent.from_payload(
                self.build_payload(employee, serializer.validated_data),
                kind=self.kind,
            )
        except InvalidAttendanceEvent as exc:
            raise ValidationError({"detail": str(exc)}) from exc

        payload = publish_attendance_update(event)
        logger.info("%s published %s for employee %s", request.user, self.kind.value, employee.pk)
        return Response(payload, status=status.HTTP_202_ACCEPTED)


@extend_schema(
    tags=["Attendance"],
    request=PunchSerializer,
    responses={202: AttendanceBroadcastSerializer},
)
class PunchInView(_PunchView):
    kind = PunchKind.PUNCH_IN


@extend_schema(
    tags=["Attendance"],
    request=PunchOutSerializer,
    responses={202: AttendanceBroadcastSerializer},
)
class PunchOutView(_PunchView):
    kind = PunchKind.PUNCH_OUT
    serializer_class = PunchOutSerializer

    def build_payload(self, employee: Employee, data) -> dict:
        payload = super().build_payload(employee, data)
        payload["totalHours"] = data.get("total_hours") or None
        return payload


@extend_schema(tags=["Attendance"], responses=AttendanceRoomSerializer)
class AttendanceRoomView(_AttendanceView):
    def get(self, request, *args, **kwargs):
        return Response(registry.snapshot(ATTENDANCE_ROOM))
