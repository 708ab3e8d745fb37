"""
Frontend URLs for integrations app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('linkedin/', frontend_views.linkedin_status, name='linkedin_status'),
    path('linkedin/connect/', frontend_views.linkedin_connect, name='linkedin_connect'),
    path('linkedin/callback/', frontend_views.linkedin_callback, name='linkedin_callback'),
    path('linkedin/sync/', frontend_views.linkedin_sync, name='linkedin_sync'),
    path('linkedin/disconnect/', frontend_views.linkedin_disconnect, name='linkedin_disconnect'),
]
