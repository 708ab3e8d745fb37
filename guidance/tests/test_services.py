from datetime import date

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from guidance.exceptions import GuidanceError
from guidance.models import TarotReading
from guidance.services import GuidanceService

User = get_user_model()


class GuidanceServiceTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="stella@example.com",
            email="stella@example.com",
            password="Secret123",
            birth_date=date(1990, 4, 1),
        )
        self.unsigned = User.objects.create_user(username="nobody", password="Secret123")

    def test_zodiac_sign_follows_birth_date(self) -> None:
        self.assertEqual(self.user.zodiac_sign, "aries")
        self.user.birth_date = date(1990, 8, 1)
        self.user.save(update_fields=["birth_date"])
        self.user.refresh_from_db()
        self.assertEqual(self.user.zodiac_sign, "leo")

    def test_daily_horoscope_is_stable_for_the_day(self) -> None:
        on_date = date(2024, 6, 1)
        first = GuidanceService.get_daily_horoscope(self.user, on_date)
        second = GuidanceService.get_daily_horoscope(self.user, on_date)
        self.assertEqual(first, second)
        self.assertEqual(first.sign, "Aries")

    def test_daily_content_requires_a_sign(self) -> None:
        self.assertIsNone(GuidanceService.get_daily_horoscope(self.unsigned))
        self.assertIsNone(GuidanceService.get_personalized_guidance(self.unsigned))
        # the daily card does not depend on the sign
        self.assertTrue(GuidanceService.get_daily_card(self.unsigned).name)

    def test_personalized_guidance(self) -> None:
        guidance = GuidanceService.get_personalized_guidance(self.user, date(2024, 6, 1))
        self.assertEqual(guidance.horoscope.sign, "Aries")
        self.assertTrue(guidance.insights)
        self.assertEqual(
            guidance.to_dict(),
            GuidanceService.get_personalized_guidance(self.user, date(2024, 6, 1)).to_dict(),
        )

    @override_settings(TAROT_RECENT_READINGS_LIMIT=2)
    def test_create_reading_keeps_only_recent(self) -> None:
        for _ in range(3):
            GuidanceService.create_reading(self.user, "single")
        self.assertEqual(TarotReading.objects.filter(user=self.user).count(), 2)
        self.assertEqual(len(GuidanceService.recent_readings(self.user)), 2)

    def test_create_reading_stores_cards(self) -> None:
        reading = GuidanceService.create_reading(self.user, "three-card")
        self.assertEqual(len(reading.cards), 3)
        self.assertEqual(reading.cards[0]["position"], "Past/Foundation")
        self.assertEqual(reading.get_spread_display(), "Three Card Spread")

    def test_create_reading_unknown_spread(self) -> None:
        with self.assertRaises(GuidanceError):
            GuidanceService.create_reading(self.user, "nine-card")
        self.assertFalse(TarotReading.objects.exists())


class GuidanceAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="luna", password="Secret123", birth_date=date(1992, 11, 1), mbti_type="INFP"
        )
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_horoscope_for_other_sign(self) -> None:
        response = self.client.get("/api/guidance/horoscope/", {"sign": "leo", "date": "2024-01-07"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["sign"], "Leo")
        self.assertEqual(response.data["date"], "2024-01-07")

    def test_horoscope_unknown_sign(self) -> None:
        response = self.client.get("/api/guidance/horoscope/", {"sign": "dragon"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["Unknown zodiac sign: dragon"])

    def test_mbti_defaults_to_users_type(self) -> None:
        response = self.client.get("/api/guidance/mbti/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["type"], "INFP")

        response = self.client.get("/api/guidance/mbti/", {"type": "zzzz"})
        self.assertEqual(response.status_code, 400)

    def test_tarot_reading_endpoints(self) -> None:
        response = self.client.post("/api/tarot-readings/", {"spread": "career-cross"}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(len(response.data["cards"]), 10)

        response = self.client.get("/api/tarot-readings/")
        self.assertEqual(response.status_code, 200)

        response = self.client.post("/api/tarot-readings/", {"spread": "bogus"}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_personalized_requires_birth_date(self) -> None:
        self.client.force_authenticate(User.objects.create_user(username="plain", password="Secret123"))
        response = self.client.get("/api/guidance/personalized/")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["Add your birth date to get personalized guidance."])
