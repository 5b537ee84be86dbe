from django.contrib import admin

from parlour.tasks.models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "assigned_to", "status", "priority", "due_date"]
    search_fields = ["title", "description", "assigned_to__name"]
    list_filter = ["status", "priority", "is_active", "due_date"]
    raw_id_fields = ["assigned_to", "created_by"]
