from types import SimpleNamespace
from unittest import mock

from django.contrib.auth import get_user_model
from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.exceptions import ValidationError
from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient

from applications.frontend_views import application_create
from applications.services import ApplicationService

User = get_user_model()


class JobApplicationAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="tracker", password="Secret123")
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_create_and_duplicate(self) -> None:
        response = self.client.post("/api/applications/", {"job_id": "job-7", "status": "offer"}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["status"], "applied")
        self.assertEqual(response.data["job_title"], "DevOps Engineer")
        self.assertEqual(len(response.data["timeline"]), 1)

        response = self.client.post("/api/applications/", {"job_id": "job-7"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["You have already applied to this job"])

    def test_patch_status_and_filter(self) -> None:
        application = ApplicationService.add_application(self.user, {"job_id": "job-1"})
        ApplicationService.add_application(self.user, {"job_id": "job-2"})

        response = self.client.patch(
            f"/api/applications/{application.id}/", {"status": "interview_scheduled"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status_label"], "Interview Scheduled")
        self.assertEqual(response.data["timeline"][-1]["event_type"], "status_changed")

        response = self.client.get("/api/applications/", {"status": "interview_scheduled"})
        self.assertEqual([item["id"] for item in response.data], [application.id])

        response = self.client.get("/api/applications/stats/")
        self.assertEqual(response.data["total"], 2)
        self.assertEqual(response.data["interviews"], 1)

    def test_timeline_endpoint(self) -> None:
        application = ApplicationService.add_application(self.user, {"job_id": "job-3"})
        url = f"/api/applications/{application.id}/timeline/"

        response = self.client.post(url, {"event_type": "note_added", "description": "Portfolio sent"}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["description"], "Portfolio sent")

        response = self.client.get(url)
        self.assertEqual(len(response.data), 2)

        response = self.client.post(url, {"event_type": "party", "description": "Cake"}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_other_users_applications_are_hidden(self) -> None:
        other = User.objects.create_user(username="other", password="Secret123")
        application = ApplicationService.add_application(other, {"job_id": "job-1"})
        self.assertEqual(self.client.get(f"/api/applications/{application.id}/").status_code, 404)

    def test_admin_sees_all(self) -> None:
        ApplicationService.add_application(self.user, {"job_id": "job-1"})
        admin = User.objects.create_user(username="boss", password="Secret123", role=User.ADMIN)
        self.client.force_authenticate(admin)
        self.assertEqual(len(self.client.get("/api/applications/").data), 1)


@override_settings(
    SESSION_ENGINE='django.contrib.sessions.backends.cache',
    CACHES={
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    },
)
class ApplicationFrontendViewsTests(SimpleTestCase):
    """Unit tests for the apply flow without hitting the database."""

    def setUp(self) -> None:
        self.factory = RequestFactory()
        self.user = SimpleNamespace(is_authenticated=True, pk=1, username="testing_user")

    def _build_request(self, data: dict):
        request = self.factory.post(reverse("application_create", kwargs={"job_id": "job-1"}), data)
        request.user = self.user

        # Attach session and messages for the view logic.
        session_middleware = SessionMiddleware(lambda r: None)
        session_middleware.process_request(request)
        request.session.save()

        MessageMiddleware(lambda r: None).process_request(request)
        return request

    @mock.patch("applications.frontend_views.ApplicationService.add_application")
    def test_apply_cleans_form_values(self, mock_add) -> None:
        mock_add.return_value = SimpleNamespace(id=12, job_title="Senior Frontend Developer")
        request = self._build_request(
            {"cover_letter": "  Hi there  ", "salary_expectation": "$150,000"}
        )

        response = application_create(request, "job-1")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse("application_detail", kwargs={"application_id": 12}))

        data = mock_add.call_args.args[1]
        self.assertEqual(data["job_id"], "job-1")
        self.assertEqual(data["cover_letter"], "Hi there")
        self.assertEqual(data["salary_expectation"], "150000")

        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, ['Application for "Senior Frontend Developer" recorded.'])

    @mock.patch("applications.frontend_views.ApplicationService.add_application")
    def test_apply_twice_returns_to_job(self, mock_add) -> None:
        mock_add.side_effect = ValidationError(["You have already applied to this job"])
        request = self._build_request({})

        response = application_create(request, "job-1")
        self.assertEqual(response.url, reverse("job_detail", kwargs={"job_id": "job-1"}))

        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, ["You have already applied to this job"])
