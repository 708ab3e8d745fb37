"""
Frontend views for profiles app.
"""
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.db import transaction
from django.shortcuts import redirect, render

from guidance.mbti import MBTI_CHOICES, get_mbti_type
from guidance.zodiac import get_sign
from jobs.catalog import COMPANY_SIZES, EXPERIENCE_LEVELS, JOB_CATEGORIES, JOB_TYPES, WORK_MODELS
from .models import JobSeekerProfile
from .services import BOOLEAN_FIELDS, ProfileService


def split_list(value: str):
    return [item.strip() for item in (value or '').split(',') if item.strip()]


@login_required
def profile_view(request):
    """Display user's profile."""
    profile = JobSeekerProfile.objects.filter(user=request.user).first()

    context = {
        'profile': profile,
        'zodiac': get_sign(request.user.zodiac_sign),
        'mbti': get_mbti_type(request.user.mbti_type),
    }
    return render(request, 'profiles/view.html', context)


@login_required
def profile_edit(request):
    """Edit user's profile."""
    profile = ProfileService.get_or_create_profile(request.user)

    if request.method == 'POST':
        data = {
            'current_title': request.POST.get('current_title', ''),
            'experience_level': request.POST.get('experience_level', ''),
            'bio': request.POST.get('bio', ''),
            'location': request.POST.get('location', ''),
            'website': request.POST.get('website', ''),
            'linkedin_url': request.POST.get('linkedin_url', ''),
            'github_url': request.POST.get('github_url', ''),
            'skills': split_list(request.POST.get('skills', '')),
            'interests': split_list(request.POST.get('interests', '')),
            'preferred_locations': split_list(request.POST.get('preferred_locations', '')),
            'preferred_job_types': request.POST.getlist('preferred_job_types'),
            'preferred_work_models': request.POST.getlist('preferred_work_models'),
            'preferred_categories': request.POST.getlist('preferred_categories'),
            'preferred_company_sizes': request.POST.getlist('preferred_company_sizes'),
            'salary_min': request.POST.get('salary_min', ''),
            'salary_max': request.POST.get('salary_max', ''),
            'salary_currency': request.POST.get('salary_currency', 'USD'),
            'career_stage': request.POST.get('career_stage', 'job-seeking'),
        }
        for name in BOOLEAN_FIELDS:
            data[name] = request.POST.get(name) == 'on'

        try:
            with transaction.atomic():
                if 'birth_date' in request.POST:
                    ProfileService.update_personal_details(
                        request.user,
                        request.POST.get('birth_date', '').strip(),
                        request.POST.get('mbti_type', ''),
                    )
                ProfileService.update_profile(request.user, data)
        except ValidationError as e:
            for error in e.messages:
                messages.error(request, error)
            return redirect('profile_edit')

        messages.success(request, 'Profile updated successfully.')
        return redirect('profile_view')

    context = {
        'profile': profile,
        'experience_levels': EXPERIENCE_LEVELS,
        'job_types': JOB_TYPES,
        'work_models': WORK_MODELS,
        'categories': JOB_CATEGORIES,
        'company_sizes': COMPANY_SIZES,
        'career_stages': JobSeekerProfile.CAREER_STAGE_CHOICES,
        'mbti_choices': MBTI_CHOICES,
    }
    return render(request, 'profiles/edit.html', context)
