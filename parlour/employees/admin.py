from django.contrib import admin

from parlour.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "email", "position", "phone", "is_active"]
    search_fields = ["name", "email", "position", "phone"]
    list_filter = ["is_active", "position", "join_date", "created_at"]
