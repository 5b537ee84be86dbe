from django.conf import settings
from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from parlour.attendance.api.views import AttendanceRoomView
from parlour.attendance.api.views import PunchInView
from parlour.attendance.api.views import PunchOutView
from parlour.employees.api.views import EmployeeViewSet
from parlour.employees.api.views import PublicEmployeeListView
from parlour.tasks.api.views import TaskViewSet
from parlour.users.api.views import UserViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("users", UserViewSet)
router.register("employees", EmployeeViewSet, basename="employees")
router.register("tasks", TaskViewSet, basename="tasks")


app_name = "api"
urlpatterns = [
    # Unauthenticated list used by the attendance kiosk page
    path(
        "public/employees/",
        PublicEmployeeListView.as_view(),
        name="public-employees",
    ),
    path("attendance/punch-in/", PunchInView.as_view(), name="attendance-punch-in"),
    path(
        "attendance/punch-out/",
        PunchOutView.as_view(),
        name="attendance-punch-out",
    ),
    path("attendance/room/", AttendanceRoomView.as_view(), name="attendance-room"),
    *router.urls,
]
