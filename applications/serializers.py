"""
Applications app serializers
"""
from rest_framework import serializers

from .models import ApplicationTimelineEvent, JobApplication


class ApplicationTimelineEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = ApplicationTimelineEvent
        fields = ['id', 'event_type', 'occurred_at', 'description', 'details']
        read_only_fields = ['id']


class JobApplicationSerializer(serializers.ModelSerializer):
    """
    Serializer for JobApplication.

    Creation and updates go through ApplicationService (see the viewset), so
    the status of a new application and the timeline are never client-set.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    status_label = serializers.CharField(read_only=True)
    timeline = ApplicationTimelineEventSerializer(many=True, read_only=True)
    job_title = serializers.CharField(required=False, allow_blank=True)
    company = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = JobApplication
        fields = [
            'id',
            'user',
            'username',
            'job_id',
            'job_title',
            'company',
            'status',
            'status_label',
            'applied_at',
            'last_updated',
            'cover_letter',
            'resume_version',
            'notes',
            'interview_dates',
            'feedback',
            'salary_expectation',
            'expected_start_date',
            'application_url',
            'contact_name',
            'contact_email',
            'contact_title',
            'timeline',
        ]
        read_only_fields = ['id', 'user', 'applied_at', 'last_updated']
        # duplicate applications are reported by the service with its own message
        validators = []


class TimelineEventCreateSerializer(serializers.Serializer):
    event_type = serializers.ChoiceField(choices=ApplicationTimelineEvent.EventType.choices)
    description = serializers.CharField()
    details = serializers.JSONField(required=False)
