from django.contrib import admin
from .models import JobSeekerProfile


@admin.register(JobSeekerProfile)
class JobSeekerProfileAdmin(admin.ModelAdmin):
    """Admin interface for JobSeekerProfile."""

    list_display = ['user', 'current_title', 'experience_level', 'career_stage', 'location', 'updated_at']
    list_filter = ['experience_level', 'career_stage', 'prefer_remote', 'created_at']
    search_fields = ['user__username', 'user__email', 'current_title', 'location']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'current_title', 'experience_level', 'career_stage', 'bio', 'location')
        }),
        ('Links', {
            'fields': ('website', 'linkedin_url', 'github_url')
        }),
        ('Preferences', {
            'fields': (
                'skills', 'interests', 'preferred_job_types', 'preferred_work_models',
                'preferred_locations', 'preferred_categories', 'preferred_company_sizes',
                'salary_min', 'salary_max', 'salary_currency',
                'willing_to_relocate', 'prefer_remote',
                'prioritize_salary', 'prioritize_growth', 'prioritize_work_life_balance',
            )
        }),
        ('Imported', {
            'fields': ('work_experience', 'education'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at')
        }),
    )
