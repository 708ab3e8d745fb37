"""
Jobs app serializers

Catalog jobs are plain dataclasses, so their serializers are read-only and
delegate to ``to_dict``. Saved jobs and search history are model-backed.
"""
from rest_framework import serializers

from .models import SavedJob, SearchHistory
from .services import JobSearchEngine


class JobSerializer(serializers.BaseSerializer):
    """Read-only representation of a catalog Job."""

    def to_representation(self, instance):
        return instance.to_dict()


class JobMatchSerializer(serializers.BaseSerializer):
    """Read-only representation of a JobMatch (job plus score breakdown)."""

    def to_representation(self, instance):
        return instance.to_dict()


class SavedJobSerializer(serializers.ModelSerializer):
    """
    Serializer for SavedJob.

    The referenced catalog job is embedded read-only; job_id must exist in
    the catalog.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    job = serializers.SerializerMethodField()

    class Meta:
        model = SavedJob
        fields = ['id', 'user', 'username', 'job_id', 'job', 'notes', 'tags', 'saved_at', 'updated_at']
        read_only_fields = ['id', 'user', 'saved_at', 'updated_at']
        validators = []

    def get_job(self, obj):
        job = obj.job
        return job.to_dict() if job else None

    def validate_job_id(self, value):
        if self.instance and value != self.instance.job_id:
            raise serializers.ValidationError("job_id cannot be changed.")
        if JobSearchEngine.get_job_by_id(value) is None:
            raise serializers.ValidationError(f"Job {value} not found")
        return value

    def validate_tags(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("tags must be a list")
        if not all(isinstance(tag, str) for tag in value):
            raise serializers.ValidationError("tags must be text")
        return value


class TagSerializer(serializers.Serializer):
    tag = serializers.CharField(allow_blank=True, trim_whitespace=True)


class SearchHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = SearchHistory
        fields = ['id', 'query', 'filters', 'result_count', 'created_at']
        read_only_fields = fields
