from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField(source="role.value")
    registered_events = serializers.ListField(child=serializers.CharField())
    can_create_events = serializers.BooleanField()


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)
