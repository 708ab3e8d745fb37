"""
Applications app models

JobApplication tracks a user's application to a catalog job through its
statuses; ApplicationTimelineEvent records what happened along the way.
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class JobApplication(models.Model):
    """
    One application to one catalog job.

    job_title and company are copied from the catalog when the application
    is created so the record stays readable if the listing goes away.
    """

    class Status(models.TextChoices):
        APPLIED = 'applied', 'Applied'
        REVIEWING = 'reviewing', 'Under Review'
        INTERVIEW_SCHEDULED = 'interview_scheduled', 'Interview Scheduled'
        INTERVIEW_COMPLETED = 'interview_completed', 'Interview Completed'
        OFFER = 'offer', 'Offer Received'
        REJECTED = 'rejected', 'Rejected'
        WITHDRAWN = 'withdrawn', 'Withdrawn'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='job_applications',
    )
    job_id = models.CharField(max_length=64)
    job_title = models.CharField(max_length=255)
    company = models.CharField(max_length=255)
    status = models.CharField(max_length=32, choices=Status.choices, default=Status.APPLIED)

    applied_at = models.DateTimeField(default=timezone.now)
    last_updated = models.DateTimeField(default=timezone.now)

    cover_letter = models.TextField(blank=True)
    resume_version = models.CharField(max_length=100, blank=True)
    notes = models.TextField(blank=True)
    interview_dates = models.JSONField(default=list, blank=True)
    feedback = models.TextField(blank=True)
    salary_expectation = models.PositiveIntegerField(null=True, blank=True)
    expected_start_date = models.DateField(null=True, blank=True)
    application_url = models.URLField(blank=True)

    contact_name = models.CharField(max_length=255, blank=True)
    contact_email = models.EmailField(blank=True)
    contact_title = models.CharField(max_length=255, blank=True)

    def __str__(self):
        return f"{self.job_title} at {self.company} ({self.status})"

    @property
    def status_label(self) -> str:
        return self.get_status_display()

    class Meta:
        verbose_name = 'Job Application'
        verbose_name_plural = 'Job Applications'
        ordering = ['-applied_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'job_id'], name='unique_application_per_job'),
        ]


class ApplicationTimelineEvent(models.Model):
    """Entry in an application's history, oldest first."""

    class EventType(models.TextChoices):
        APPLIED = 'applied', 'Applied'
        VIEWED = 'viewed', 'Viewed'
        INTERVIEW_SCHEDULED = 'interview_scheduled', 'Interview Scheduled'
        INTERVIEW_COMPLETED = 'interview_completed', 'Interview Completed'
        FEEDBACK_RECEIVED = 'feedback_received', 'Feedback Received'
        STATUS_CHANGED = 'status_changed', 'Status Changed'
        NOTE_ADDED = 'note_added', 'Note Added'

    application = models.ForeignKey(
        JobApplication,
        on_delete=models.CASCADE,
        related_name='timeline',
    )
    event_type = models.CharField(max_length=32, choices=EventType.choices)
    occurred_at = models.DateTimeField(default=timezone.now)
    description = models.TextField()
    details = models.JSONField(default=dict, blank=True)

    def __str__(self):
        return f"{self.event_type}: {self.description}"

    class Meta:
        verbose_name = 'Timeline Event'
        verbose_name_plural = 'Timeline Events'
        ordering = ['occurred_at', 'id']
