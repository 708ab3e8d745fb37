from django.test import SimpleTestCase

from jobs.catalog import SalaryRange
from jobs.templatetags.job_filters import format_number, format_salary, match_color


class JobFilterTests(SimpleTestCase):
    def test_format_number(self) -> None:
        self.assertEqual(format_number(1234567), "1,234,567")
        self.assertEqual(format_number("n/a"), "n/a")

    def test_format_salary(self) -> None:
        self.assertEqual(format_salary(SalaryRange(min=120000, max=160000)), "$120,000 - $160,000/year")
        self.assertEqual(
            format_salary(SalaryRange(min=40, max=60, currency="CHF", period="hourly")),
            "CHF 40 - CHF 60/hour",
        )
        self.assertEqual(format_salary(None), "")

    def test_match_color(self) -> None:
        self.assertEqual(match_color(85), "success")
        self.assertEqual(match_color(60), "primary")
        self.assertEqual(match_color(45), "warning")
        self.assertEqual(match_color(10), "danger")
        self.assertEqual(match_color(None), "secondary")
