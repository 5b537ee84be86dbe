from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class EmailBackend(ModelBackend):
    """Authenticate by email (case-insensitive), falling back to username."""

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        identifier = email or username
        if not identifier or password is None:
            return None
        usermodel = get_user_model()
        try:
            user = usermodel.objects.get(email__iexact=identifier.strip())
        except usermodel.DoesNotExist:
            try:
                user = usermodel.objects.get(username__iexact=identifier.strip())
            except usermodel.DoesNotExist:
                return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
