"""
Guidance app serializers
"""
from rest_framework import serializers

from .models import TarotReading
from .tarot import SPREAD_CHOICES


class TarotReadingSerializer(serializers.ModelSerializer):
    spread_name = serializers.CharField(source='get_spread_display', read_only=True)

    class Meta:
        model = TarotReading
        fields = ['id', 'spread', 'spread_name', 'reading_date', 'cards', 'interpretation', 'action_items', 'created_at']
        read_only_fields = ['id', 'reading_date', 'cards', 'interpretation', 'action_items', 'created_at']


class TarotReadingCreateSerializer(serializers.Serializer):
    spread = serializers.ChoiceField(choices=SPREAD_CHOICES, default='three-card')


class HoroscopeQuerySerializer(serializers.Serializer):
    """Optional overrides for the horoscope endpoint; defaults to the user's sign and today."""

    sign = serializers.CharField(required=False)
    date = serializers.DateField(required=False)
