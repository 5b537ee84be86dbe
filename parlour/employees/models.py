from django.db import models
from django.utils import timezone


def initials(name: str) -> str:
    return "".join(part[0].upper() for part in name.split() if part)


class Employee(models.Model):
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    position = models.CharField(max_length=150)
    phone = models.CharField(max_length=50)
    join_date = models.DateField(default=timezone.localdate)
    avatar = models.CharField(max_length=10, blank=True)
    # Soft-delete flag; inactive employees are hidden from lists
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        self.name = self.name.strip()
        self.email = self.email.strip().lower()
        if not self.avatar:
            self.avatar = initials(self.name)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
