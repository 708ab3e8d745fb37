"""
URL configuration for careerstar project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from accounts.views import UserViewSet
from profiles.views import JobSeekerProfileViewSet
from jobs.views import JobViewSet, SavedJobViewSet, SearchHistoryViewSet
from applications.views import JobApplicationViewSet
from guidance.views import GuidanceViewSet, TarotReadingViewSet
from correspondence.views import EmailTemplateViewSet
from integrations.views import LinkedInViewSet
from careerstar.views import login_view, logout_view, dashboard, about_view

# Create router and register viewsets
router = DefaultRouter()
router.register(r'users', UserViewSet, basename='user')
router.register(r'profiles', JobSeekerProfileViewSet, basename='profile')
router.register(r'jobs', JobViewSet, basename='job')
router.register(r'saved-jobs', SavedJobViewSet, basename='saved-job')
router.register(r'search-history', SearchHistoryViewSet, basename='search-history')
router.register(r'applications', JobApplicationViewSet, basename='application')
router.register(r'guidance', GuidanceViewSet, basename='guidance')
router.register(r'tarot-readings', TarotReadingViewSet, basename='tarot-reading')
router.register(r'email-templates', EmailTemplateViewSet, basename='email-template')
router.register(r'linkedin', LinkedInViewSet, basename='linkedin')

urlpatterns = [
    # Frontend views
    path('', dashboard, name='dashboard'),
    path('about/', about_view, name='about'),
    path('login/', login_view, name='login'),
    path('logout/', logout_view, name='logout'),
    path('jobs/', include('jobs.frontend_urls')),
    path('applications/', include('applications.frontend_urls')),
    path('guidance/', include('guidance.frontend_urls')),
    path('emails/', include('correspondence.frontend_urls')),
    path('integrations/', include('integrations.frontend_urls')),
    path('profile/', include('profiles.frontend_urls')),
    path('accounts/', include('accounts.urls')),

    # API views
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api-auth/', include('rest_framework.urls')),
]
