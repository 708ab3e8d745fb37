"""
Accounts app models

Custom User model extending AbstractUser with role-based access and the
birth data used by the guidance features.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models

from guidance.mbti import MBTI_CHOICES
from guidance.zodiac import ZODIAC_CHOICES, calculate_age, calculate_zodiac_sign


class User(AbstractUser):
    """
    Custom user model with role and personal astrology data.

    Extends Django's AbstractUser to add:
    - role: Distinguish between admins and job seekers
    - birth_date / zodiac_sign: zodiac sign is derived from the birth date
    - mbti_type: self-reported personality type
    - email_verified / profile_complete: onboarding flags
    """

    ADMIN = 'ADMIN'
    JOB_SEEKER = 'JOB_SEEKER'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (JOB_SEEKER, 'Job Seeker'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=JOB_SEEKER,
    )
    birth_date = models.DateField(null=True, blank=True)
    zodiac_sign = models.CharField(max_length=20, choices=ZODIAC_CHOICES, blank=True)
    mbti_type = models.CharField(max_length=4, choices=MBTI_CHOICES, blank=True)
    email_verified = models.BooleanField(default=False)
    profile_complete = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def age(self):
        if not self.birth_date:
            return None
        return calculate_age(self.birth_date)

    @property
    def display_name(self) -> str:
        return self.get_full_name() or self.username

    def save(self, *args, **kwargs):
        # zodiac sign always follows the birth date
        if self.birth_date:
            self.zodiac_sign = calculate_zodiac_sign(self.birth_date)
            update_fields = kwargs.get('update_fields')
            if update_fields is not None and 'birth_date' in update_fields:
                kwargs['update_fields'] = set(update_fields) | {'zodiac_sign'}
        super().save(*args, **kwargs)

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
