from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.utils.translation import gettext as _

from parlour.users.models import Role
from parlour.users.permissions import Permission
from parlour.users.permissions import permissions_for


class Command(BaseCommand):
    help = _("Print the role permission table and optionally create a superadmin")

    def add_arguments(self, parser):
        parser.add_argument("--email", help="Create or promote this account")
        parser.add_argument("--password", help="Password for a newly created account")
        parser.add_argument("--name", default="", help="Display name")

    def handle(self, *args, **options):
        self._print_table()
        email = options.get("email")
        if email:
            self._ensure_superadmin(email, options.get("password"), options["name"])

    def _print_table(self):
        roles = [choice.value for choice in Role]
        width = max(len(perm) for perm in Permission.values)
        self.stdout.write(" ".join([" " * width, *(role.ljust(10) for role in roles)]))
        for perm in Permission.values:
            cells = [
                ("yes" if perm in permissions_for(role) else "-").ljust(10)
                for role in roles
            ]
            self.stdout.write(" ".join([perm.ljust(width), *cells]).rstrip())

    def _ensure_superadmin(self, email, password, name):
        user_model = get_user_model()
        email = email.strip().lower()
        user = user_model.objects.filter(email__iexact=email).first()
        if user is None:
            if not password:
                msg = "--password is required when creating a new account"
                raise CommandError(msg)
            user = user_model.objects.create_user(
                username=email,
                email=email,
                password=password,
                name=name,
                role=Role.SUPERADMIN,
            )
            self.stdout.write(self.style.SUCCESS(f"Created superadmin {email}"))
            return
        user.role = Role.SUPERADMIN
        if name:
            user.name = name
        if password:
            user.set_password(password)
        user.save()
        self.stdout.write(self.style.SUCCESS(f"Promoted {email} to superadmin"))
