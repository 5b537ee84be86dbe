import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from config.exceptions import Conflict
from parlour.users.models import User
from parlour.users.tokens import issue_tokens

from .serializers import LoginSerializer
from .serializers import SignupSerializer
from .serializers import UserSerializer

logger = logging.getLogger(__name__)


def _token_response(user: User, **extra) -> dict:
    tokens = issue_tokens(user)
    return {
        "token": tokens["access"],
        "refresh": tokens["refresh"],
        **extra,
        "user": UserSerializer(user).data,
    }


@extend_schema(tags=["Authentication"])
class LoginView(APIView):
    """Exchange email + password for a bearer token."""

    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(request=LoginSerializer)
    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Failed login for %s", serializer.validated_data["email"])
            msg = "Invalid credentials"
            raise AuthenticationFailed(msg)
        return Response(_token_response(user))


@extend_schema(tags=["Authentication"])
class SignupView(APIView):
    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(request=SignupSerializer)
    def post(self, request, *args, **kwargs):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]
        if User.objects.filter(email__iexact=email).exists():
            msg = "Email already exists"
            raise Conflict(msg)
        user = serializer.save()
        logger.info("Created %s account %s", user.role, user.email)
        return Response(
            _token_response(user, message="User created successfully"),
            status=status.HTTP_201_CREATED,
        )
