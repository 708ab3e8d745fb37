"""
Correspondence app serializers
"""
from rest_framework import serializers

from .email_templates import CONTEXT_VARIABLES


class EmailTemplateSerializer(serializers.BaseSerializer):
    def to_representation(self, instance):
        return instance.to_dict()


class EmailContextSerializer(serializers.Serializer):
    """Values for the template placeholders; every field is optional."""

    def get_fields(self):
        return {
            name: serializers.CharField(required=False, allow_blank=True)
            for name in CONTEXT_VARIABLES
        }


class GenerateEmailSerializer(serializers.Serializer):
    template_id = serializers.CharField()
    context = EmailContextSerializer(required=False)
    application_id = serializers.IntegerField(required=False)
