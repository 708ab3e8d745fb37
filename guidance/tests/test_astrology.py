import random
from datetime import date

from django.test import SimpleTestCase

from guidance.exceptions import GuidanceError
from guidance.horoscope import CHALLENGING, NEUTRAL, POSITIVE, HoroscopeGenerator
from guidance.mbti import get_mbti_career_advice, get_mbti_job_match, get_mbti_type
from guidance.zodiac import (
    calculate_age,
    calculate_zodiac_sign,
    format_zodiac_sign,
    validate_birth_date,
)


class ZodiacTests(SimpleTestCase):
    """Sign boundaries, ages and birth date validation."""

    def test_sign_boundaries(self) -> None:
        self.assertEqual(calculate_zodiac_sign(date(1990, 3, 21)), "aries")
        self.assertEqual(calculate_zodiac_sign(date(1990, 4, 19)), "aries")
        self.assertEqual(calculate_zodiac_sign(date(1990, 4, 20)), "taurus")
        self.assertEqual(calculate_zodiac_sign(date(1990, 1, 19)), "capricorn")
        self.assertEqual(calculate_zodiac_sign(date(1990, 1, 20)), "aquarius")

    def test_capricorn_spans_year_end(self) -> None:
        self.assertEqual(calculate_zodiac_sign(date(1990, 12, 22)), "capricorn")
        self.assertEqual(calculate_zodiac_sign(date(1991, 1, 5)), "capricorn")

    def test_age_counts_only_completed_years(self) -> None:
        self.assertEqual(calculate_age(date(2000, 6, 15), date(2024, 6, 14)), 23)
        self.assertEqual(calculate_age(date(2000, 6, 15), date(2024, 6, 15)), 24)

    def test_validate_birth_date_messages(self) -> None:
        today = date(2024, 1, 1)
        self.assertIsNone(validate_birth_date(date(1990, 5, 5), today))
        self.assertEqual(validate_birth_date(date(2024, 1, 2), today), "Birth date cannot be in the future")
        self.assertEqual(validate_birth_date(date(1900, 1, 1), today), "Birth date is too far in the past")
        self.assertEqual(validate_birth_date(date(2015, 1, 1), today), "You must be at least 13 years old")
        self.assertEqual(validate_birth_date("not-a-date", today), "Invalid date format")
        self.assertIsNone(validate_birth_date("1990-05-05", today))

    def test_format_zodiac_sign(self) -> None:
        self.assertEqual(format_zodiac_sign("leo"), "Leo ♌")


class HoroscopeTests(SimpleTestCase):
    def test_mood_cycles_with_day_of_year(self) -> None:
        self.assertEqual(HoroscopeGenerator.calculate_mood("aries", date(2024, 1, 7)), POSITIVE)
        self.assertEqual(HoroscopeGenerator.calculate_mood("aries", date(2024, 1, 4)), NEUTRAL)
        self.assertEqual(HoroscopeGenerator.calculate_mood("aries", date(2024, 1, 1)), CHALLENGING)
        # taurus is one step ahead of aries
        self.assertEqual(HoroscopeGenerator.calculate_mood("taurus", date(2024, 1, 6)), POSITIVE)

    def test_energy_and_lucky_numbers(self) -> None:
        on_date = date(2024, 1, 7)
        self.assertEqual(HoroscopeGenerator.calculate_energy("aries", on_date), 9)
        self.assertEqual(HoroscopeGenerator.lucky_numbers("aries", on_date), [1, 8, 9])

    def test_energy_is_clamped(self) -> None:
        for day in range(1, 29):
            energy = HoroscopeGenerator.calculate_energy("cancer", date(2024, 2, day))
            self.assertGreaterEqual(energy, 1)
            self.assertLessEqual(energy, 10)

    def test_generate_daily_horoscope(self) -> None:
        horoscope = HoroscopeGenerator.generate_daily_horoscope("aries", date(2024, 1, 7), rng=random.Random(3))
        self.assertEqual(horoscope.sign, "Aries")
        self.assertEqual(horoscope.mood, POSITIVE)
        self.assertNotIn("{", horoscope.career_focus)
        self.assertEqual(horoscope.opportunities[0], "Leverage your natural leadership")
        self.assertEqual(horoscope.warnings, [])
        self.assertEqual(horoscope.to_dict()["date"], "2024-01-07")

    def test_same_seed_same_wording(self) -> None:
        first = HoroscopeGenerator.generate_daily_horoscope("virgo", date(2024, 3, 3), rng=random.Random(11))
        second = HoroscopeGenerator.generate_daily_horoscope("virgo", date(2024, 3, 3), rng=random.Random(11))
        self.assertEqual(first, second)

    def test_challenging_day_warnings(self) -> None:
        horoscope = HoroscopeGenerator.generate_daily_horoscope("aries", date(2024, 1, 1), rng=random.Random(1))
        self.assertEqual(
            horoscope.warnings,
            [
                "Watch out for impatience",
                "Avoid making major career decisions today",
                "Double-check important communications",
            ],
        )
        self.assertEqual(horoscope.opportunities, [])

    def test_unknown_sign(self) -> None:
        with self.assertRaises(GuidanceError):
            HoroscopeGenerator.generate_daily_horoscope("ophiuchus")


class MBTITests(SimpleTestCase):
    def test_lookup_is_case_insensitive(self) -> None:
        self.assertEqual(get_mbti_type("intj").name, "The Architect")
        self.assertIsNone(get_mbti_type("ABCD"))

    def test_job_match_defaults_to_neutral(self) -> None:
        self.assertEqual(get_mbti_job_match("INTJ", "Technology"), 90)
        self.assertEqual(get_mbti_job_match("INTJ", "Sales"), 50)
        self.assertEqual(get_mbti_job_match("", "Technology"), 50)

    def test_career_advice(self) -> None:
        self.assertEqual(
            get_mbti_career_advice("INTJ"),
            [
                "Leverage your strategic planning skills",
                "Seek roles that offer autonomous",
                "Be aware of challenges with team collaboration",
                "Consider positions in Technology or Strategy",
            ],
        )
        self.assertEqual(get_mbti_career_advice("XXXX"), ["Focus on your strengths and interests"])
