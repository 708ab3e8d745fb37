"""
Frontend views for the LinkedIn import page.
"""
from urllib.parse import urlencode

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from .exceptions import LinkedInError
from .services import SESSION_STATE_KEY, LinkedInService


@login_required
def linkedin_status(request):
    connection = LinkedInService.get_connection(request.user)
    context = {
        'connection': connection,
        'preview': LinkedInService.convert_to_user_profile(connection.profile_data) if connection else None,
        'demo_mode': LinkedInService.is_demo_mode(),
    }
    return render(request, 'integrations/linkedin.html', context)


@login_required
@require_POST
def linkedin_connect(request):
    auth_url = LinkedInService.get_auth_url(request.session)
    if LinkedInService.is_demo_mode():
        # Skip the consent screen and come straight back with a demo code
        params = {'code': 'demo-code', 'state': request.session[SESSION_STATE_KEY]}
        return redirect(f"{reverse('linkedin_callback')}?{urlencode(params)}")
    return redirect(auth_url)


@login_required
def linkedin_callback(request):
    error = request.GET.get('error')
    if error:
        messages.error(request, request.GET.get('error_description') or 'LinkedIn authorization was cancelled.')
        return redirect('linkedin_status')

    try:
        LinkedInService.connect(
            request.user,
            request.GET.get('code', ''),
            request.GET.get('state', ''),
            request.session,
        )
    except LinkedInError as e:
        messages.error(request, str(e))
    else:
        messages.success(request, 'LinkedIn connected. Review the import below.')
    return redirect('linkedin_status')


@login_required
@require_POST
def linkedin_sync(request):
    try:
        LinkedInService.sync_with_profile(request.user)
    except LinkedInError as e:
        messages.error(request, str(e))
        return redirect('linkedin_status')
    except ValidationError as e:
        for error in e.messages:
            messages.error(request, error)
        return redirect('linkedin_status')

    messages.success(request, 'Your profile was updated from LinkedIn.')
    return redirect('profile_view')


@login_required
@require_POST
def linkedin_disconnect(request):
    if LinkedInService.disconnect(request.user):
        messages.success(request, 'LinkedIn disconnected.')
    return redirect('linkedin_status')
