"""
Profiles app models

JobSeekerProfile model for storing career details and job preferences.
"""
from django.conf import settings
from django.db import models

from jobs.catalog import EXPERIENCE_LEVELS


class JobSeekerProfile(models.Model):
    """
    Profile model for job seekers.

    Stores the current role, skills and search preferences used to score
    catalog jobs, plus work history imported from LinkedIn.
    List-valued preferences are JSON lists of choice values.
    """

    CAREER_STAGE_CHOICES = [
        ('job-seeking', 'Actively job seeking'),
        ('career-change', 'Changing careers'),
        ('advancement', 'Seeking advancement'),
        ('starting-out', 'Starting out'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
    )
    current_title = models.CharField(max_length=255, blank=True)
    experience_level = models.CharField(max_length=20, choices=EXPERIENCE_LEVELS, blank=True)
    bio = models.TextField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    website = models.URLField(blank=True)
    linkedin_url = models.URLField(blank=True)
    github_url = models.URLField(blank=True)

    skills = models.JSONField(default=list, blank=True)
    interests = models.JSONField(default=list, blank=True)
    preferred_job_types = models.JSONField(default=list, blank=True)
    preferred_work_models = models.JSONField(default=list, blank=True)
    preferred_locations = models.JSONField(default=list, blank=True)
    preferred_categories = models.JSONField(default=list, blank=True)
    preferred_company_sizes = models.JSONField(default=list, blank=True)

    salary_min = models.PositiveIntegerField(null=True, blank=True)
    salary_max = models.PositiveIntegerField(null=True, blank=True)
    salary_currency = models.CharField(max_length=3, default='USD')

    willing_to_relocate = models.BooleanField(default=False)
    prefer_remote = models.BooleanField(default=False)
    prioritize_salary = models.BooleanField(default=False)
    prioritize_growth = models.BooleanField(default=False)
    prioritize_work_life_balance = models.BooleanField(default=False)

    career_stage = models.CharField(max_length=20, choices=CAREER_STAGE_CHOICES, default='job-seeking')

    work_experience = models.JSONField(default=list, blank=True)
    education = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile for {self.user.username}"

    @property
    def has_salary_expectation(self) -> bool:
        return self.salary_min is not None and self.salary_max is not None

    @property
    def is_complete(self) -> bool:
        return bool(self.current_title and self.experience_level and self.skills)

    class Meta:
        verbose_name = 'Job Seeker Profile'
        verbose_name_plural = 'Job Seeker Profiles'
