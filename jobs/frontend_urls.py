"""
Frontend URLs for jobs app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.job_list, name='job_list'),
    path('saved/', frontend_views.saved_jobs, name='saved_jobs'),
    path('saved/<int:saved_id>/', frontend_views.saved_job_update, name='saved_job_update'),
    path('searches/<int:search_id>/delete/', frontend_views.search_history_delete, name='search_history_delete'),
    path('<str:job_id>/', frontend_views.job_detail, name='job_detail'),
    path('<str:job_id>/save/', frontend_views.job_toggle_save, name='job_toggle_save'),
]
