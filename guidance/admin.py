from django.contrib import admin
from .models import TarotReading


@admin.register(TarotReading)
class TarotReadingAdmin(admin.ModelAdmin):
    """Admin interface for TarotReading."""

    list_display = ['user', 'spread', 'reading_date', 'created_at']
    list_filter = ['spread', 'reading_date']
    search_fields = ['user__username', 'interpretation']
    readonly_fields = ['created_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'spread', 'reading_date')
        }),
        ('Reading', {
            'fields': ('cards', 'interpretation', 'action_items'),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_at',)
        }),
    )
