from unittest import mock
from urllib.parse import parse_qs, urlparse

import requests
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from integrations.exceptions import LinkedInError
from integrations.models import LinkedInConnection
from integrations.services import DEMO_PROFILE, SESSION_STATE_KEY, LinkedInService
from profiles.models import JobSeekerProfile

User = get_user_model()


def state_from(url):
    return parse_qs(urlparse(url).query)["state"][0]


class LinkedInServiceTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="linker", password="Secret123")
        self.session = {}

    def test_auth_url_stores_state(self) -> None:
        url = LinkedInService.get_auth_url(self.session)
        self.assertTrue(url.startswith("https://www.linkedin.com/oauth/v2/authorization?"))
        self.assertEqual(state_from(url), self.session[SESSION_STATE_KEY])
        self.assertIn("scope=openid+profile+email", url)

    def test_state_is_single_use(self) -> None:
        state = state_from(LinkedInService.get_auth_url(self.session))
        self.assertTrue(LinkedInService.validate_state(self.session, state))
        self.assertFalse(LinkedInService.validate_state(self.session, state))

    def test_exchange_rejects_bad_state_and_missing_code(self) -> None:
        LinkedInService.get_auth_url(self.session)
        with self.assertRaisesMessage(LinkedInError, "Invalid state parameter"):
            LinkedInService.exchange_code_for_token("demo-code", "forged", self.session)

        state = state_from(LinkedInService.get_auth_url(self.session))
        with self.assertRaisesMessage(LinkedInError, "Missing authorization code"):
            LinkedInService.exchange_code_for_token("", state, self.session)

    def test_demo_token(self) -> None:
        state = state_from(LinkedInService.get_auth_url(self.session))
        token = LinkedInService.exchange_code_for_token("demo-code", state, self.session)
        self.assertTrue(token.startswith("mock-access-token-"))

    def test_convert_demo_profile(self) -> None:
        converted = LinkedInService.convert_to_user_profile(DEMO_PROFILE)
        self.assertEqual(converted["name"], "John Doe")
        self.assertEqual(converted["current_title"], "Senior Software Engineer")
        self.assertEqual(converted["location"], "San Francisco Bay Area")
        self.assertEqual(converted["skills"], ["JavaScript", "React", "Node.js", "Python", "AWS", "TypeScript"])
        self.assertEqual(converted["linkedin_url"], "https://linkedin.com/in/linkedin-user-123")
        self.assertEqual(converted["work_experience"][0]["start_date"], "2022-03-01")
        self.assertIsNone(converted["work_experience"][0]["end_date"])
        self.assertEqual(converted["work_experience"][1]["end_date"], "2022-02-01")
        self.assertEqual(converted["education"][0]["end_year"], 2020)

    def test_headline_is_used_without_current_position(self) -> None:
        converted = LinkedInService.convert_to_user_profile({
            "id": "",
            "first_name": "Ann",
            "headline": "Consultant",
            "positions": [],
        })
        self.assertEqual(converted["current_title"], "Consultant")
        self.assertEqual(converted["linkedin_url"], "")
        self.assertEqual(converted["name"], "Ann")

    def test_connect_sync_and_disconnect(self) -> None:
        state = state_from(LinkedInService.get_auth_url(self.session))
        connection = LinkedInService.connect(self.user, "demo-code", state, self.session)
        self.assertTrue(connection.demo)
        self.assertEqual(connection.linkedin_id, "linkedin-user-123")
        self.assertTrue(LinkedInService.is_connected(self.user))

        LinkedInService.sync_with_profile(self.user)
        self.user.refresh_from_db()
        self.assertEqual((self.user.first_name, self.user.last_name), ("John", "Doe"))

        profile = JobSeekerProfile.objects.get(user=self.user)
        self.assertEqual(profile.current_title, "Senior Software Engineer")
        self.assertEqual(profile.linkedin_url, "https://linkedin.com/in/linkedin-user-123")
        self.assertEqual(len(profile.work_experience), 2)
        self.assertEqual(profile.education[0]["school"], "University of California, Berkeley")

        connection.refresh_from_db()
        self.assertIsNotNone(connection.last_synced_at)

        self.assertTrue(LinkedInService.disconnect(self.user))
        self.assertFalse(LinkedInService.disconnect(self.user))

    def test_sync_without_connection(self) -> None:
        with self.assertRaisesMessage(LinkedInError, "No LinkedIn profile found"):
            LinkedInService.sync_with_profile(self.user)


@override_settings(LINKEDIN_DEMO_MODE=False, LINKEDIN_CLIENT_ID="client-id", LINKEDIN_CLIENT_SECRET="secret")
class LinkedInLiveModeTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="live", password="Secret123")
        self.session = {}

    @mock.patch("integrations.services.requests.get")
    @mock.patch("integrations.services.requests.post")
    def test_connect_calls_linkedin(self, mock_post, mock_get) -> None:
        mock_post.return_value = mock.Mock(**{"json.return_value": {"access_token": "real-token"}})
        mock_get.return_value = mock.Mock(**{"json.return_value": {
            "sub": "abc123",
            "given_name": "Grace",
            "family_name": "Hopper",
            "picture": "https://example.com/grace.png",
            "locale": {"country": "US", "language": "en"},
        }})

        state = state_from(LinkedInService.get_auth_url(self.session))
        connection = LinkedInService.connect(self.user, "auth-code", state, self.session)

        self.assertFalse(connection.demo)
        self.assertEqual(connection.access_token, "real-token")
        self.assertEqual(connection.profile_data["first_name"], "Grace")
        self.assertEqual(connection.profile_data["location"]["country"], "US")

        post_kwargs = mock_post.call_args.kwargs
        self.assertEqual(post_kwargs["data"]["code"], "auth-code")
        self.assertEqual(post_kwargs["data"]["client_secret"], "secret")
        self.assertEqual(mock_get.call_args.kwargs["headers"], {"Authorization": "Bearer real-token"})

    @mock.patch("integrations.services.requests.post")
    def test_token_failure(self, mock_post) -> None:
        mock_post.side_effect = requests.ConnectionError("connection refused")
        state = state_from(LinkedInService.get_auth_url(self.session))
        with self.assertRaisesMessage(LinkedInError, "Could not complete LinkedIn authorization"):
            LinkedInService.connect(self.user, "auth-code", state, self.session)
        self.assertFalse(LinkedInConnection.objects.exists())

    @mock.patch("integrations.services.requests.post")
    def test_missing_token(self, mock_post) -> None:
        mock_post.return_value = mock.Mock(**{"json.return_value": {}})
        state = state_from(LinkedInService.get_auth_url(self.session))
        with self.assertRaisesMessage(LinkedInError, "LinkedIn did not return an access token"):
            LinkedInService.exchange_code_for_token("auth-code", state, self.session)

    @mock.patch("integrations.services.requests.get")
    def test_profile_failure(self, mock_get) -> None:
        mock_get.return_value = mock.Mock(**{"raise_for_status.side_effect": requests.HTTPError("401")})
        with self.assertRaisesMessage(LinkedInError, "Could not fetch your LinkedIn profile"):
            LinkedInService.fetch_profile("expired")


class LinkedInAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="api-linker", password="Secret123")
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_demo_flow(self) -> None:
        response = self.client.get("/api/linkedin/")
        self.assertEqual(response.data, {"connected": False, "demo_mode": True, "connection": None})

        auth_url = self.client.get("/api/linkedin/auth-url/").data["auth_url"]
        response = self.client.post(
            "/api/linkedin/callback/", {"code": "demo-code", "state": state_from(auth_url)}, format="json"
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["name"], "John Doe")
        self.assertNotIn("access_token", response.data)

        response = self.client.post("/api/linkedin/sync/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["current_title"], "Senior Software Engineer")

        self.assertEqual(self.client.post("/api/linkedin/disconnect/").status_code, 204)
        self.assertEqual(self.client.post("/api/linkedin/disconnect/").status_code, 404)

    def test_callback_with_wrong_state(self) -> None:
        self.client.get("/api/linkedin/auth-url/")
        response = self.client.post("/api/linkedin/callback/", {"code": "demo-code", "state": "nope"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["Invalid state parameter"])

    def test_sync_before_connecting(self) -> None:
        response = self.client.post("/api/linkedin/sync/")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["No LinkedIn profile found"])


class LinkedInPageTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="page-linker", password="Secret123")
        self.client.force_login(self.user)

    def test_demo_connect_and_import(self) -> None:
        response = self.client.post(reverse("linkedin_connect"))
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response.url.startswith(reverse("linkedin_callback")))

        response = self.client.get(response.url)
        self.assertRedirects(response, reverse("linkedin_status"), fetch_redirect_response=False)
        self.assertTrue(LinkedInService.is_connected(self.user))

        response = self.client.post(reverse("linkedin_sync"))
        self.assertRedirects(response, reverse("profile_view"), fetch_redirect_response=False)
        self.assertEqual(JobSeekerProfile.objects.get(user=self.user).skills[0], "JavaScript")

    def test_cancelled_authorization(self) -> None:
        response = self.client.get(reverse("linkedin_callback"), {"error": "user_cancelled_login"})
        self.assertRedirects(response, reverse("linkedin_status"), fetch_redirect_response=False)
        self.assertFalse(LinkedInService.is_connected(self.user))
