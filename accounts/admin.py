from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    list_display = [
        'username',
        'email',
        'role',
        'zodiac_sign',
        'mbti_type',
        'email_verified',
        'profile_complete',
        'is_staff',
    ]
    list_filter = ['role', 'zodiac_sign', 'mbti_type', 'email_verified', 'is_staff']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Career Guidance', {'fields': ('role', 'birth_date', 'zodiac_sign', 'mbti_type')}),
        ('Onboarding', {'fields': ('email_verified', 'profile_complete')}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Career Guidance', {'fields': ('role', 'birth_date', 'mbti_type')}),
    )

    readonly_fields = ['zodiac_sign']
