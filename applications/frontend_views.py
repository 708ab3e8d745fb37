"""
Frontend views for application tracking.
"""
import re

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from .models import ApplicationTimelineEvent, JobApplication
from .services import ApplicationService


@login_required
def application_list(request):
    """List the user's applications, optionally filtered by status."""
    status_filter = request.GET.get('status', '')
    if status_filter:
        applications = ApplicationService.get_applications_by_status(request.user, status_filter)
    else:
        applications = ApplicationService.get_applications(request.user)

    context = {
        'applications': applications,
        'stats': ApplicationService.get_application_stats(request.user),
        'statuses': JobApplication.Status.choices,
        'status_filter': status_filter,
    }
    return render(request, 'applications/list.html', context)


@login_required
def application_detail(request, application_id):
    """Display an application with its timeline."""
    application = get_object_or_404(JobApplication, id=application_id, user=request.user)
    context = {
        'application': application,
        'timeline': application.timeline.all(),
        'statuses': JobApplication.Status.choices,
        'event_types': ApplicationTimelineEvent.EventType.choices,
    }
    return render(request, 'applications/detail.html', context)


@login_required
@require_POST
def application_create(request, job_id):
    """Apply to a catalog job from its detail page."""
    data = {
        'job_id': job_id,
        'cover_letter': (request.POST.get('cover_letter') or '').strip(),
        'resume_version': (request.POST.get('resume_version') or '').strip(),
        'notes': (request.POST.get('notes') or '').strip(),
        'salary_expectation': re.sub(r'[^0-9]', '', request.POST.get('salary_expectation') or ''),
        'expected_start_date': (request.POST.get('expected_start_date') or '').strip(),
    }

    try:
        application = ApplicationService.add_application(request.user, data)
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)
        return redirect('job_detail', job_id=job_id)

    messages.success(request, f'Application for "{application.job_title}" recorded.')
    return redirect('application_detail', application_id=application.id)


@login_required
@require_POST
def application_update(request, application_id):
    """Update status, notes and feedback."""
    application = get_object_or_404(JobApplication, id=application_id, user=request.user)
    updates = {}
    for name in ['status', 'notes', 'feedback']:
        if name in request.POST:
            updates[name] = (request.POST.get(name) or '').strip()

    try:
        ApplicationService.update_application(application, updates)
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)
    else:
        messages.success(request, 'Application updated.')
    return redirect('application_detail', application_id=application.id)


@login_required
@require_POST
def application_add_event(request, application_id):
    """Append a timeline entry such as a note or interview."""
    application = get_object_or_404(JobApplication, id=application_id, user=request.user)
    event_type = request.POST.get('event_type') or ApplicationTimelineEvent.EventType.NOTE_ADDED
    description = (request.POST.get('description') or '').strip()

    try:
        ApplicationService.add_timeline_event(application, event_type, description)
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)
    else:
        messages.success(request, 'Timeline updated.')
    return redirect('application_detail', application_id=application.id)


@login_required
@require_POST
def application_delete(request, application_id):
    """Delete an application."""
    application = get_object_or_404(JobApplication, id=application_id, user=request.user)
    title = application.job_title
    ApplicationService.delete_application(request.user, application.id)
    messages.success(request, f'Application for "{title}" deleted.')
    return redirect('application_list')
