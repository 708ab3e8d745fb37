"""
Frontend URLs for guidance app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.guidance_dashboard, name='guidance'),
    path('tarot/', frontend_views.tarot, name='tarot'),
    path('zodiac/', frontend_views.zodiac_info, name='zodiac_info'),
    path('mbti/', frontend_views.mbti_info, name='mbti_info'),
]
