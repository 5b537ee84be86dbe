from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from parlour.users.models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    fieldsets = (
        *BaseUserAdmin.fieldsets,
        ("Parlour", {"fields": ("name", "role")}),
    )
    list_display = ["email", "name", "role", "is_active", "is_superuser"]
    list_filter = ["role", "is_active", "is_superuser"]
    search_fields = ["name", "email"]
    ordering = ["email"]
