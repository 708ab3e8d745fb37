"""
Guidance app models

Stored tarot readings. Horoscopes, quotes and daily cards are generated on
demand and never persisted.
"""
from django.conf import settings
from django.db import models

from .tarot import SPREAD_CHOICES


class TarotReading(models.Model):
    """
    A tarot reading as shown to the user: the drawn cards (serialized with
    their orientation and position), interpretation and action items.
    Only the most recent few per user are kept.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='tarot_readings',
    )
    spread = models.CharField(max_length=32, choices=SPREAD_CHOICES)
    reading_date = models.DateField()
    cards = models.JSONField(default=list)
    interpretation = models.TextField()
    action_items = models.JSONField(default=list)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.get_spread_display()} for {self.user.username} on {self.reading_date}"

    class Meta:
        verbose_name = 'Tarot Reading'
        verbose_name_plural = 'Tarot Readings'
        ordering = ['-created_at', '-id']
