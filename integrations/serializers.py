from rest_framework import serializers

from .models import LinkedInConnection


class LinkedInConnectionSerializer(serializers.ModelSerializer):
    """Connection state without the token."""

    name = serializers.SerializerMethodField()
    headline = serializers.SerializerMethodField()

    class Meta:
        model = LinkedInConnection
        fields = ['id', 'linkedin_id', 'name', 'headline', 'demo', 'connected_at', 'last_synced_at']
        read_only_fields = fields

    def get_name(self, obj):
        return f"{obj.profile_data.get('first_name', '')} {obj.profile_data.get('last_name', '')}".strip()

    def get_headline(self, obj):
        return obj.profile_data.get('headline', '')


class LinkedInCallbackSerializer(serializers.Serializer):
    code = serializers.CharField()
    state = serializers.CharField()
