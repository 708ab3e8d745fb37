"""
Jobs app models

Listings themselves live in the in-memory catalog (see jobs.catalog); these
models keep per-user state about them: bookmarked jobs and past searches.
"""
from django.conf import settings
from django.db import models


class SavedJob(models.Model):
    """
    A catalog job bookmarked by a user, with private notes and tags.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='saved_jobs',
    )
    job_id = models.CharField(max_length=64)
    notes = models.TextField(blank=True)
    tags = models.JSONField(default=list, blank=True)

    saved_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username} saved {self.job_id}"

    @property
    def job(self):
        from .services import JobSearchEngine
        return JobSearchEngine.get_job_by_id(self.job_id)

    class Meta:
        verbose_name = 'Saved Job'
        verbose_name_plural = 'Saved Jobs'
        ordering = ['-saved_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'job_id'], name='unique_saved_job_per_user'),
        ]


class SearchHistory(models.Model):
    """
    One executed job search: the free-text query, the filter payload and
    how many listings it returned.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='search_history',
    )
    query = models.CharField(max_length=255, blank=True)
    filters = models.JSONField(default=dict, blank=True)
    result_count = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user.username}: {self.query or '(filters only)'}"

    @property
    def query_string(self) -> str:
        """URL query that reruns this search."""
        from .services import JobSearchFilters
        return JobSearchFilters.from_dict(self.filters).to_query_params().urlencode()

    class Meta:
        verbose_name = 'Search History Entry'
        verbose_name_plural = 'Search History'
        ordering = ['-created_at', '-id']
