"""
Main project views for frontend pages.
"""
from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.contrib.auth import authenticate, login as auth_login, logout as auth_logout
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme

from applications.services import ApplicationService
from guidance.quotes import QuoteManager
from guidance.services import GuidanceService
from jobs.matching import JobMatchingEngine
from jobs.services import JobSearchEngine, SavedJobService
from profiles.services import ProfileService


def about_view(request):
    """About page view."""
    return render(request, 'about.html')


def login_view(request):
    """Handle user login by username or email."""
    if request.user.is_authenticated:
        return redirect('dashboard')

    if request.method == 'POST':
        username = request.POST.get('username')
        password = request.POST.get('password')
        user = authenticate(request, username=username, password=password)

        if user is not None:
            auth_login(request, user)
            next_url = request.POST.get('next')
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('dashboard')
        else:
            messages.error(request, 'Invalid username or password.')

    return render(request, 'login.html', {'next': request.GET.get('next', '')})


def logout_view(request):
    """Handle user logout."""
    auth_logout(request)
    messages.success(request, 'Successfully logged out.')
    return redirect('login')


@login_required
def dashboard(request):
    """Main dashboard view."""
    user = request.user

    profile = ProfileService.build_matching_profile(user)
    top_matches = JobMatchingEngine.get_top_matches(JobSearchEngine.all_jobs(), profile, limit=3)

    context = {
        'stats': ApplicationService.get_application_stats(user),
        'recent_applications': ApplicationService.get_applications(user)[:5],
        'top_matches': top_matches,
        'saved_count': len(SavedJobService.saved_job_ids(user)),
        'horoscope': GuidanceService.get_daily_horoscope(user),
        'daily_quote': QuoteManager.get_daily_quote(),
    }

    return render(request, 'dashboard.html', context)
