from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from parlour.users.models import Role
from parlour.users.models import User


class UserSerializer(serializers.ModelSerializer[User]):
    role = serializers.CharField(source="effective_role", read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email", "role"]
        read_only_fields = ["id", "email"]


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)
    role = serializers.ChoiceField(choices=Role.choices)

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate_password(self, value: str) -> str:
        validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        email = validated_data["email"]
        return User.objects.create_user(
            username=email,
            password=password,
            **validated_data,
        )
