from django.contrib import admin
from .models import SavedJob, SearchHistory


@admin.register(SavedJob)
class SavedJobAdmin(admin.ModelAdmin):
    """Admin interface for SavedJob."""

    list_display = ['job_id', 'user', 'saved_at', 'updated_at']
    list_filter = ['saved_at']
    search_fields = ['job_id', 'user__username', 'notes']
    readonly_fields = ['saved_at', 'updated_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'job_id')
        }),
        ('Notes', {
            'fields': ('notes', 'tags')
        }),
        ('Metadata', {
            'fields': ('saved_at', 'updated_at')
        }),
    )


@admin.register(SearchHistory)
class SearchHistoryAdmin(admin.ModelAdmin):
    """Admin interface for SearchHistory."""

    list_display = ['user', 'query', 'result_count', 'created_at']
    list_filter = ['created_at']
    search_fields = ['user__username', 'query']
    readonly_fields = ['user', 'query', 'filters', 'result_count', 'created_at']
