from django.contrib import admin
from .models import ApplicationTimelineEvent, JobApplication


class ApplicationTimelineEventInline(admin.TabularInline):
    model = ApplicationTimelineEvent
    extra = 0
    fields = ['event_type', 'occurred_at', 'description']


@admin.register(JobApplication)
class JobApplicationAdmin(admin.ModelAdmin):
    """Admin interface for JobApplication."""

    list_display = ['job_title', 'company', 'user', 'status', 'applied_at', 'last_updated']
    list_filter = ['status', 'applied_at', 'company']
    search_fields = ['job_title', 'company', 'user__username', 'job_id']
    inlines = [ApplicationTimelineEventInline]

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'job_id', 'job_title', 'company', 'status')
        }),
        ('Application', {
            'fields': (
                'cover_letter', 'resume_version', 'salary_expectation',
                'expected_start_date', 'application_url',
            )
        }),
        ('Progress', {
            'fields': ('interview_dates', 'feedback', 'notes')
        }),
        ('Contact', {
            'fields': ('contact_name', 'contact_email', 'contact_title'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('applied_at', 'last_updated')
        }),
    )
