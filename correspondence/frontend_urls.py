"""
Frontend URLs for correspondence app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.template_gallery, name='email_templates'),
    path('<str:template_id>/', frontend_views.compose, name='email_compose'),
]
