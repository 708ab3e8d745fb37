"""
Frontend views for jobs app.
"""
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from applications.services import ApplicationService
from profiles.services import ProfileService
from .catalog import COMPANY_SIZES, EXPERIENCE_LEVELS, JOB_CATEGORIES, JOB_TYPES, WORK_MODELS
from .matching import JobMatchingEngine
from .models import SavedJob
from .services import JobSearchEngine, JobSearchFilters, SavedJobService, SearchHistoryService


@login_required
def job_list(request):
    """Search the catalog with the current user's match score per job."""
    filters = JobSearchFilters.from_query_params(request.GET)
    jobs = JobSearchEngine.search_jobs(filters)
    SearchHistoryService.record_search(request.user, filters, len(jobs))

    profile = ProfileService.build_matching_profile(request.user)
    if request.GET.get('sort') == 'match':
        matches = JobMatchingEngine.rank_jobs_by_match(jobs, profile)
    else:
        matches = [JobMatchingEngine.calculate_job_match(job, profile) for job in jobs]

    context = {
        'matches': matches,
        'filters': filters,
        'sort': request.GET.get('sort', ''),
        'saved_job_ids': SavedJobService.saved_job_ids(request.user),
        'recent_searches': SearchHistoryService.recent_searches(request.user),
        'stats': JobSearchEngine.get_job_stats(),
        'categories': JOB_CATEGORIES,
        'job_types': JOB_TYPES,
        'experience_levels': EXPERIENCE_LEVELS,
        'work_models': WORK_MODELS,
        'company_sizes': COMPANY_SIZES,
    }
    return render(request, 'jobs/list.html', context)


@login_required
def job_detail(request, job_id):
    """Display a job with its match breakdown and apply/save actions."""
    job = JobSearchEngine.get_job_by_id(job_id)
    if job is None:
        raise Http404("Job not found")

    profile = ProfileService.build_matching_profile(request.user)
    similar_jobs = [
        similar for similar in JobSearchEngine.get_jobs_by_category(job.category, limit=4)
        if similar.id != job.id
    ][:3]

    context = {
        'job': job,
        'match': JobMatchingEngine.calculate_job_match(job, profile),
        'is_saved': SavedJobService.is_saved(request.user, job.id),
        'application': ApplicationService.get_application_for_job(request.user, job.id),
        'similar_jobs': similar_jobs,
    }
    return render(request, 'jobs/detail.html', context)


@login_required
@require_POST
def job_toggle_save(request, job_id):
    """Save or unsave a job, then return to where the user came from."""
    try:
        if SavedJobService.is_saved(request.user, job_id):
            SavedJobService.unsave_job(request.user, job_id)
            messages.success(request, 'Job removed from saved jobs.')
        else:
            SavedJobService.save_job(request.user, job_id)
            messages.success(request, 'Job saved.')
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)
        return redirect('job_list')

    next_url = request.POST.get('next') or 'job_detail'
    if next_url == 'job_detail':
        return redirect('job_detail', job_id=job_id)
    return redirect(next_url)


@login_required
def saved_jobs(request):
    """List bookmarked jobs with notes and tags."""
    saved = SavedJobService.get_saved_jobs(request.user)
    profile = ProfileService.build_matching_profile(request.user)

    entries = []
    for saved_job in saved:
        job = saved_job.job
        if job is None:
            continue
        entries.append({
            'saved': saved_job,
            'job': job,
            'match': JobMatchingEngine.calculate_job_match(job, profile),
        })

    return render(request, 'jobs/saved.html', {'entries': entries})


@login_required
@require_POST
def saved_job_update(request, saved_id):
    """Update notes, add a tag or remove a tag on a saved job."""
    saved_job = get_object_or_404(SavedJob, id=saved_id, user=request.user)
    action = request.POST.get('action', 'notes')

    try:
        if action == 'add_tag':
            SavedJobService.add_tag(saved_job, request.POST.get('tag', ''))
        elif action == 'remove_tag':
            SavedJobService.remove_tag(saved_job, request.POST.get('tag', ''))
        else:
            SavedJobService.update_notes(saved_job, request.POST.get('notes', ''))
            messages.success(request, 'Notes updated.')
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)

    return redirect('saved_jobs')


@login_required
@require_POST
def search_history_delete(request, search_id):
    """Remove an entry from the recent searches list."""
    if not SearchHistoryService.delete_search(request.user, search_id):
        raise Http404("Search not found")
    return redirect('job_list')
