"""
Profiles app serializers

Serializers for JobSeekerProfile model.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import JobSeekerProfile
from .services import ProfileService


class JobSeekerProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for JobSeekerProfile.

    Exposes career details and job preferences.
    User is read-only and automatically set from request context.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    zodiac_sign = serializers.CharField(source='user.zodiac_sign', read_only=True)
    mbti_type = serializers.CharField(source='user.mbti_type', read_only=True)

    class Meta:
        model = JobSeekerProfile
        fields = [
            'id',
            'user',
            'username',
            'zodiac_sign',
            'mbti_type',
            'current_title',
            'experience_level',
            'bio',
            'location',
            'website',
            'linkedin_url',
            'github_url',
            'skills',
            'interests',
            'preferred_job_types',
            'preferred_work_models',
            'preferred_locations',
            'preferred_categories',
            'preferred_company_sizes',
            'salary_min',
            'salary_max',
            'salary_currency',
            'willing_to_relocate',
            'prefer_remote',
            'prioritize_salary',
            'prioritize_growth',
            'prioritize_work_life_balance',
            'career_stage',
            'work_experience',
            'education',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'user', 'work_experience', 'education', 'created_at', 'updated_at']

    def validate(self, attrs):
        """Run the same checks as the profile edit page."""
        data = dict(attrs)
        if self.instance:
            # salary bounds are checked as a pair
            data.setdefault('salary_min', self.instance.salary_min)
            data.setdefault('salary_max', self.instance.salary_max)
        try:
            ProfileService.validate_profile_data(data)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        return attrs
