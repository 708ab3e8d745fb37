from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from jobs.models import SavedJob, SearchHistory
from jobs.services import JobSearchFilters, SavedJobService, SearchHistoryService
from profiles.services import ProfileService

User = get_user_model()


class SavedJobServiceTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="seeker", password="Secret123")

    def test_save_is_idempotent(self) -> None:
        first = SavedJobService.save_job(self.user, "job-1", notes="Looks great", tags=["dream", " dream ", ""])
        second = SavedJobService.save_job(self.user, "job-1", notes="ignored")
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(SavedJob.objects.filter(user=self.user).count(), 1)
        self.assertEqual(second.notes, "Looks great")
        self.assertEqual(second.tags, ["dream"])
        self.assertEqual(second.job.title, "Senior Frontend Developer")

    def test_save_unknown_job(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            SavedJobService.save_job(self.user, "job-99")
        self.assertEqual(ctx.exception.messages, ["Job job-99 not found"])

    def test_unsave(self) -> None:
        SavedJobService.save_job(self.user, "job-2")
        self.assertTrue(SavedJobService.is_saved(self.user, "job-2"))
        self.assertTrue(SavedJobService.unsave_job(self.user, "job-2"))
        self.assertFalse(SavedJobService.unsave_job(self.user, "job-2"))
        self.assertEqual(SavedJobService.saved_job_ids(self.user), [])

    def test_tags(self) -> None:
        saved = SavedJobService.save_job(self.user, "job-3")
        SavedJobService.add_tag(saved, " remote ")
        SavedJobService.add_tag(saved, "remote")
        self.assertEqual(saved.tags, ["remote"])

        with self.assertRaises(ValidationError) as ctx:
            SavedJobService.add_tag(saved, "   ")
        self.assertEqual(ctx.exception.messages, ["Tag cannot be empty"])

        SavedJobService.remove_tag(saved, "remote")
        saved.refresh_from_db()
        self.assertEqual(saved.tags, [])

    def test_update_notes(self) -> None:
        saved = SavedJobService.save_job(self.user, "job-4")
        SavedJobService.update_notes(saved, "  call recruiter  ")
        saved.refresh_from_db()
        self.assertEqual(saved.notes, "call recruiter")


class SearchHistoryServiceTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="searcher", password="Secret123")

    def test_empty_search_is_not_recorded(self) -> None:
        self.assertIsNone(SearchHistoryService.record_search(self.user, JobSearchFilters(), 8))
        self.assertFalse(SearchHistory.objects.exists())

    def test_entry_reruns_the_search(self) -> None:
        entry = SearchHistoryService.record_search(
            self.user, JobSearchFilters(query="python", work_model=["remote"]), 2
        )
        entry.refresh_from_db()
        self.assertEqual(entry.query, "python")
        self.assertEqual(entry.result_count, 2)
        self.assertEqual(entry.query_string, "query=python&work_model=remote")

    @override_settings(SEARCH_HISTORY_LIMIT=2)
    def test_history_is_capped(self) -> None:
        for query in ["design", "data", "devops"]:
            SearchHistoryService.record_search(self.user, JobSearchFilters(query=query), 1)
        self.assertEqual(
            [entry.query for entry in SearchHistoryService.recent_searches(self.user)],
            ["devops", "data"],
        )

    def test_delete_only_own_searches(self) -> None:
        other = User.objects.create_user(username="other", password="Secret123")
        entry = SearchHistoryService.record_search(other, JobSearchFilters(query="sales"), 1)
        self.assertFalse(SearchHistoryService.delete_search(self.user, entry.id))
        self.assertTrue(SearchHistoryService.delete_search(other, entry.id))


class JobAPITests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(username="api-seeker", password="Secret123")
        self.client = APIClient()
        self.client.force_authenticate(self.user)

    def test_requires_authentication(self) -> None:
        response = APIClient().get("/api/jobs/")
        self.assertIn(response.status_code, (401, 403))

    def test_search_records_history_and_scores(self) -> None:
        response = self.client.get("/api/jobs/", {"work_model": "remote"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["count"], 3)
        self.assertEqual([job["id"] for job in response.data["results"]], ["job-3", "job-5", "job-7"])
        self.assertTrue(all("match_score" in job for job in response.data["results"]))
        self.assertEqual(SearchHistory.objects.filter(user=self.user).count(), 1)

    def test_sort_by_match(self) -> None:
        ProfileService.update_profile(self.user, {"preferred_categories": ["Sales"]})
        response = self.client.get("/api/jobs/", {"sort": "match"})
        self.assertEqual(response.data["results"][0]["id"], "job-8")
        self.assertFalse(SearchHistory.objects.exists())

    def test_retrieve(self) -> None:
        SavedJobService.save_job(self.user, "job-1")
        response = self.client.get("/api/jobs/job-1/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["job"]["id"], "job-1")
        self.assertTrue(response.data["is_saved"])
        self.assertIsNone(response.data["application_id"])

        self.assertEqual(self.client.get("/api/jobs/job-99/").status_code, 404)

    def test_recommended_and_stats(self) -> None:
        response = self.client.get("/api/jobs/recommended/", {"limit": 2})
        self.assertEqual(len(response.data), 2)

        response = self.client.get("/api/jobs/recommended/", {"min_score": 100})
        self.assertEqual(response.data, [])

        response = self.client.get("/api/jobs/stats/")
        self.assertEqual(response.data["total_jobs"], 8)

    def test_saved_job_endpoints(self) -> None:
        response = self.client.post("/api/saved-jobs/", {"job_id": "job-5", "tags": ["a", "a"]}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["tags"], ["a"])
        saved_id = response.data["id"]

        response = self.client.post("/api/saved-jobs/", {"job_id": "job-5"}, format="json")
        self.assertEqual(response.data["id"], saved_id)

        response = self.client.post("/api/saved-jobs/", {"job_id": "job-99"}, format="json")
        self.assertEqual(response.status_code, 400)

        response = self.client.post(f"/api/saved-jobs/{saved_id}/tags/", {"tag": ""}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["errors"], ["Tag cannot be empty"])

        response = self.client.post(f"/api/saved-jobs/{saved_id}/tags/", {"tag": "follow-up"}, format="json")
        self.assertEqual(response.data["tags"], ["a", "follow-up"])

    def test_saved_job_tags_must_be_text(self) -> None:
        response = self.client.post("/api/saved-jobs/", {"job_id": "job-1", "tags": [5]}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["tags"], ["tags must be text"])
        self.assertFalse(SavedJob.objects.exists())

    def test_saved_jobs_are_private(self) -> None:
        other = User.objects.create_user(username="other", password="Secret123")
        saved = SavedJobService.save_job(other, "job-2")
        self.assertEqual(self.client.get(f"/api/saved-jobs/{saved.id}/").status_code, 404)
        self.assertEqual(self.client.get("/api/saved-jobs/").data, [])
