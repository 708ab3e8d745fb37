"""
Frontend URLs for applications app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.application_list, name='application_list'),
    path('apply/<str:job_id>/', frontend_views.application_create, name='application_create'),
    path('<int:application_id>/', frontend_views.application_detail, name='application_detail'),
    path('<int:application_id>/update/', frontend_views.application_update, name='application_update'),
    path('<int:application_id>/events/', frontend_views.application_add_event, name='application_add_event'),
    path('<int:application_id>/delete/', frontend_views.application_delete, name='application_delete'),
]
