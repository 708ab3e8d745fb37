"""
Guidance Service Layer
Ties the horoscope, tarot and quote generators to users: daily content is
seeded per user and day so it stays the same across page loads, and tarot
readings are stored with only the most recent few kept.
"""
import logging
import random
from datetime import date
from typing import List, Optional

from django.conf import settings
from django.db import transaction

from .horoscope import DailyHoroscope, HoroscopeGenerator
from .models import TarotReading
from .personalization import GuidanceProfile, PersonalizationEngine, PersonalizedGuidance
from .tarot import DrawnCard, TarotReader

logger = logging.getLogger(__name__)


def daily_rng(user, on_date: date, salt: str = '') -> random.Random:
    """Random source that repeats for the same user, day and salt."""
    return random.Random(f"{user.pk}:{on_date.isoformat()}:{salt}")


class GuidanceService:
    """Per-user access to the guidance generators."""

    @staticmethod
    def get_daily_horoscope(user, on_date: Optional[date] = None) -> Optional[DailyHoroscope]:
        """Today's horoscope, or None when the user has no zodiac sign yet."""
        if not user.zodiac_sign:
            return None
        on_date = on_date or date.today()
        return HoroscopeGenerator.generate_daily_horoscope(
            user.zodiac_sign, on_date, rng=daily_rng(user, on_date, 'horoscope')
        )

    @staticmethod
    def get_daily_card(user, on_date: Optional[date] = None) -> DrawnCard:
        on_date = on_date or date.today()
        return TarotReader(daily_rng(user, on_date, 'tarot')).get_daily_card()

    @staticmethod
    def get_personalized_guidance(user, on_date: Optional[date] = None) -> Optional[PersonalizedGuidance]:
        if not user.zodiac_sign:
            return None
        on_date = on_date or date.today()
        profile = GuidanceProfile.from_user(user, today=on_date)
        engine = PersonalizationEngine(daily_rng(user, on_date, 'guidance'))
        return engine.generate_personalized_guidance(profile, on_date)

    @staticmethod
    @transaction.atomic
    def create_reading(user, spread: str = 'three-card', rng: Optional[random.Random] = None) -> TarotReading:
        """
        Draw and store a reading, dropping the user's oldest beyond the limit.

        Raises:
            GuidanceError: Unknown spread
        """
        reading = TarotReader(rng).create_reading(spread)
        stored = TarotReading.objects.create(
            user=user,
            spread=reading.spread,
            reading_date=reading.date,
            cards=[card.to_dict() for card in reading.cards],
            interpretation=reading.interpretation,
            action_items=reading.action_items,
        )

        limit = getattr(settings, 'TAROT_RECENT_READINGS_LIMIT', 5)
        stale_ids = list(
            TarotReading.objects.filter(user=user).values_list('id', flat=True)[limit:]
        )
        if stale_ids:
            TarotReading.objects.filter(id__in=stale_ids).delete()

        logger.info("Stored %s reading %s for user %s", spread, stored.pk, user.pk)
        return stored

    @staticmethod
    def recent_readings(user) -> List[TarotReading]:
        limit = getattr(settings, 'TAROT_RECENT_READINGS_LIMIT', 5)
        return list(TarotReading.objects.filter(user=user)[:limit])
