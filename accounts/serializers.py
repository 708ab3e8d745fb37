"""
Accounts app serializers

Serializers for User model and authentication.
"""
from rest_framework import serializers

from guidance.zodiac import format_zodiac_sign, validate_birth_date
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Exposes user details including role and the derived zodiac sign.
    Password is write-only for security.
    """

    zodiac_display = serializers.SerializerMethodField()
    age = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'birth_date',
            'age',
            'zodiac_sign',
            'zodiac_display',
            'mbti_type',
            'email_verified',
            'profile_complete',
            'password',
        ]
        read_only_fields = ['zodiac_sign', 'email_verified', 'profile_complete']
        extra_kwargs = {
            'password': {'write_only': True},
        }

    def get_zodiac_display(self, obj):
        return format_zodiac_sign(obj.zodiac_sign) if obj.zodiac_sign else ''

    def validate_birth_date(self, value):
        if value is None:
            return value
        error = validate_birth_date(value)
        if error:
            raise serializers.ValidationError(error)
        return value

    def validate_role(self, value):
        request = self.context.get('request')
        if value == User.ADMIN and not (request and request.user.role == User.ADMIN):
            raise serializers.ValidationError("Only admins can grant the admin role.")
        return value

    def create(self, validated_data):
        """Create user with hashed password."""
        password = validated_data.pop('password', None)
        user = User(**validated_data)
        if password:
            user.set_password(password)
        user.save()
        return user

    def update(self, instance, validated_data):
        """Update user, handling password properly."""
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance
