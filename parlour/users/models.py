from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import CharField
from django.db.models import EmailField
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    EMPLOYEE = "employee", _("Employee")
    ADMIN = "admin", _("Admin")
    SUPERADMIN = "superadmin", _("Super admin")


class User(AbstractUser):
    """
    Default custom user model for parlour.
    Accounts sign in with their email address; ``username`` mirrors it.
    """

    # First and last name do not cover name patterns around the globe
    name = CharField(_("Full Name"), blank=True, max_length=255)
    email = EmailField(_("email address"), unique=True)
    role = CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.EMPLOYEE,
    )
    # Audit timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if not self.username:
            self.username = self.email
        super().save(*args, **kwargs)

    @property
    def effective_role(self) -> str:
        if self.is_superuser:
            return Role.SUPERADMIN
        return self.role

    def __str__(self) -> str:
        return self.name or self.email
