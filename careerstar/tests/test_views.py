from datetime import date

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from applications.services import ApplicationService
from jobs.services import SavedJobService

User = get_user_model()


class LoginViewTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="nova", email="nova@example.com", password="Secret123"
        )

    def test_login_with_email(self) -> None:
        response = self.client.post(reverse("login"), {"username": "nova@example.com", "password": "Secret123"})
        self.assertRedirects(response, reverse("dashboard"), fetch_redirect_response=False)

    def test_login_follows_local_next_only(self) -> None:
        response = self.client.post(
            reverse("login"), {"username": "nova", "password": "Secret123", "next": "/jobs/"}
        )
        self.assertEqual(response.url, "/jobs/")

        self.client.logout()
        response = self.client.post(
            reverse("login"), {"username": "nova", "password": "Secret123", "next": "https://evil.example.com/"}
        )
        self.assertEqual(response.url, reverse("dashboard"))

    def test_invalid_credentials(self) -> None:
        response = self.client.post(reverse("login"), {"username": "nova", "password": "wrong"})
        self.assertEqual(response.status_code, 200)
        messages = [str(message) for message in get_messages(response.wsgi_request)]
        self.assertEqual(messages, ["Invalid username or password."])

    def test_logout(self) -> None:
        self.client.force_login(self.user)
        response = self.client.get(reverse("logout"))
        self.assertRedirects(response, reverse("login"), fetch_redirect_response=False)
        self.assertNotIn("_auth_user_id", self.client.session)


class DashboardViewTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="orion", password="Secret123", birth_date=date(1990, 4, 1)
        )

    def test_requires_login(self) -> None:
        response = self.client.get(reverse("dashboard"))
        self.assertRedirects(response, f"{reverse('login')}?next=/", fetch_redirect_response=False)

    def test_dashboard_context(self) -> None:
        ApplicationService.add_application(self.user, {"job_id": "job-1"})
        SavedJobService.save_job(self.user, "job-2")
        self.client.force_login(self.user)

        response = self.client.get(reverse("dashboard"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["stats"]["total"], 1)
        self.assertEqual(response.context["saved_count"], 1)
        self.assertEqual(len(response.context["top_matches"]), 3)
        self.assertEqual(response.context["horoscope"].sign, "Aries")
        self.assertContains(response, "Senior Frontend Developer")

    def test_about_is_public(self) -> None:
        self.assertEqual(self.client.get(reverse("about")).status_code, 200)
