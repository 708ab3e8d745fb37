"""
Integrations app models

LinkedInConnection keeps the OAuth token and the last imported profile so a
user can re-sync without going through authorization again.
"""
from django.conf import settings
from django.db import models


class LinkedInConnection(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='linkedin_connection',
    )
    linkedin_id = models.CharField(max_length=128, blank=True)
    access_token = models.TextField()
    profile_data = models.JSONField(default=dict, blank=True)
    demo = models.BooleanField(default=False)

    connected_at = models.DateTimeField(auto_now_add=True)
    last_synced_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"LinkedIn for {self.user.username}"

    class Meta:
        verbose_name = 'LinkedIn Connection'
        verbose_name_plural = 'LinkedIn Connections'
