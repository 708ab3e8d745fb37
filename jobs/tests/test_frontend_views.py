from types import SimpleNamespace
from unittest import mock

from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.exceptions import ValidationError
from django.http import Http404
from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import reverse

from jobs.frontend_views import job_toggle_save, search_history_delete


@override_settings(
    SESSION_ENGINE='django.contrib.sessions.backends.cache',
    CACHES={
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    },
)
class JobFrontendViewsTests(SimpleTestCase):
    """Save toggling and history removal without hitting the database."""

    def setUp(self) -> None:
        self.factory = RequestFactory()
        self.user = SimpleNamespace(
            is_authenticated=True,
            pk=1,
            username="testing_user",
        )

    def _build_request(self, path: str, data: dict = None):
        request = self.factory.post(path, data or {})
        request.user = self.user

        # Attach session and messages for the view logic.
        session_middleware = SessionMiddleware(lambda r: None)
        session_middleware.process_request(request)
        request.session.save()

        MessageMiddleware(lambda r: None).process_request(request)
        return request

    @mock.patch("jobs.frontend_views.SavedJobService")
    def test_toggle_saves_unsaved_job(self, mock_service) -> None:
        mock_service.is_saved.return_value = False
        request = self._build_request(reverse("job_toggle_save", kwargs={"job_id": "job-1"}))

        response = job_toggle_save(request, "job-1")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse("job_detail", kwargs={"job_id": "job-1"}))
        mock_service.save_job.assert_called_once_with(self.user, "job-1")

        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, ["Job saved."])

    @mock.patch("jobs.frontend_views.SavedJobService")
    def test_toggle_removes_saved_job_and_follows_next(self, mock_service) -> None:
        mock_service.is_saved.return_value = True
        request = self._build_request(
            reverse("job_toggle_save", kwargs={"job_id": "job-2"}),
            {"next": "saved_jobs"},
        )

        response = job_toggle_save(request, "job-2")
        self.assertEqual(response.url, reverse("saved_jobs"))
        mock_service.unsave_job.assert_called_once_with(self.user, "job-2")
        mock_service.save_job.assert_not_called()

    @mock.patch("jobs.frontend_views.SavedJobService")
    def test_toggle_unknown_job(self, mock_service) -> None:
        mock_service.is_saved.return_value = False
        mock_service.save_job.side_effect = ValidationError(["Job job-99 not found"])
        request = self._build_request(reverse("job_toggle_save", kwargs={"job_id": "job-99"}))

        response = job_toggle_save(request, "job-99")
        self.assertEqual(response.url, reverse("job_list"))

        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, ["Job job-99 not found"])

    @mock.patch("jobs.frontend_views.SearchHistoryService.delete_search")
    def test_search_history_delete(self, mock_delete) -> None:
        mock_delete.return_value = True
        request = self._build_request(reverse("search_history_delete", kwargs={"search_id": 3}))

        response = search_history_delete(request, 3)
        self.assertEqual(response.url, reverse("job_list"))
        mock_delete.assert_called_once_with(self.user, 3)

        mock_delete.return_value = False
        with self.assertRaises(Http404):
            search_history_delete(request, 3)
