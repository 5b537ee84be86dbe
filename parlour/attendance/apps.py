from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class AttendanceConfig(AppConfig):
    name = "parlour.attendance"
    verbose_name = _("Attendance")

    def ready(self):
        # Registers the attendance room handlers on the Socket.IO server
        import parlour.realtime.handlers  # noqa: F401, PLC0415
