from django.contrib import admin
from .models import LinkedInConnection


@admin.register(LinkedInConnection)
class LinkedInConnectionAdmin(admin.ModelAdmin):
    """Admin interface for LinkedInConnection."""

    list_display = ['user', 'linkedin_id', 'demo', 'connected_at', 'last_synced_at']
    list_filter = ['demo', 'connected_at']
    search_fields = ['user__username', 'linkedin_id']
    readonly_fields = ['connected_at', 'last_synced_at']
    exclude = ['access_token']
