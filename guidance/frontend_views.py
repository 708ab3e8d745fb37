"""
Frontend views for the guidance pages.
"""
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render

from .exceptions import GuidanceError
from .mbti import MBTI_TYPES, get_mbti_career_advice, get_mbti_type
from .quotes import QuoteManager
from .services import GuidanceService
from .tarot import TAROT_SPREADS
from .zodiac import ZODIAC_SIGNS, get_sign


@login_required
def guidance_dashboard(request):
    """Horoscope, daily card, quotes, insights and actions for today."""
    guidance = GuidanceService.get_personalized_guidance(request.user)
    if guidance is None:
        messages.info(request, 'Add your birth date to unlock your daily horoscope.')

    context = {
        'guidance': guidance,
        'zodiac': get_sign(request.user.zodiac_sign),
        'quote_of_the_week': QuoteManager.get_quote_of_the_week(),
    }
    return render(request, 'guidance/dashboard.html', context)


@login_required
def tarot(request):
    """Draw a new reading (POST) or show the recent ones."""
    if request.method == 'POST':
        spread = request.POST.get('spread') or 'three-card'
        try:
            GuidanceService.create_reading(request.user, spread)
        except GuidanceError as e:
            messages.error(request, str(e))
        else:
            messages.success(request, 'The cards have spoken.')
        return redirect('tarot')

    context = {
        'spreads': TAROT_SPREADS,
        'readings': GuidanceService.recent_readings(request.user),
        'daily_card': GuidanceService.get_daily_card(request.user),
    }
    return render(request, 'guidance/tarot.html', context)


@login_required
def zodiac_info(request):
    context = {
        'signs': ZODIAC_SIGNS.values(),
        'user_sign': get_sign(request.user.zodiac_sign),
        'horoscope': GuidanceService.get_daily_horoscope(request.user),
    }
    return render(request, 'guidance/zodiac.html', context)


@login_required
def mbti_info(request):
    code = (request.GET.get('type') or request.user.mbti_type or '').upper()
    personality = get_mbti_type(code)
    context = {
        'types': MBTI_TYPES.values(),
        'personality': personality,
        'advice': get_mbti_career_advice(code) if personality else [],
    }
    return render(request, 'guidance/mbti.html', context)
