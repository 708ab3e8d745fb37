"""
Guidance app views

API endpoints for horoscopes, tarot, quotes, MBTI and personalized guidance.
"""
from datetime import date

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exceptions import GuidanceError
from .horoscope import HoroscopeGenerator
from .mbti import MBTI_TYPES, get_mbti_career_advice
from .models import TarotReading
from .quotes import QuoteManager
from .serializers import HoroscopeQuerySerializer, TarotReadingCreateSerializer, TarotReadingSerializer
from .services import GuidanceService, daily_rng
from .zodiac import ZODIAC_SIGNS


class GuidanceViewSet(viewsets.ViewSet):
    """
    Daily guidance for the current user.

    - GET horoscope/?sign=&date=
    - GET daily-card/, daily-quote/, personalized/
    - GET zodiac/, mbti/
    """

    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['get'])
    def horoscope(self, request):
        query = HoroscopeQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        sign = query.validated_data.get('sign') or request.user.zodiac_sign
        on_date = query.validated_data.get('date') or date.today()
        if not sign:
            return Response(
                {'errors': ['Add your birth date to get a horoscope.']},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            horoscope = HoroscopeGenerator.generate_daily_horoscope(
                sign, on_date, rng=daily_rng(request.user, on_date, 'horoscope')
            )
        except GuidanceError as e:
            return Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
        return Response(horoscope.to_dict())

    @action(detail=False, methods=['get'], url_path='daily-card')
    def daily_card(self, request):
        return Response(GuidanceService.get_daily_card(request.user).to_dict())

    @action(detail=False, methods=['get'], url_path='daily-quote')
    def daily_quote(self, request):
        return Response(QuoteManager.get_daily_quote().to_dict())

    @action(detail=False, methods=['get'])
    def personalized(self, request):
        guidance = GuidanceService.get_personalized_guidance(request.user)
        if guidance is None:
            return Response(
                {'errors': ['Add your birth date to get personalized guidance.']},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(guidance.to_dict())

    @action(detail=False, methods=['get'])
    def zodiac(self, request):
        signs = [
            {
                'key': sign.key,
                'name': sign.name,
                'symbol': sign.symbol,
                'element': sign.element,
                'dates': sign.dates,
                'career_strengths': sign.career_strengths,
            }
            for sign in ZODIAC_SIGNS.values()
        ]
        return Response({'user_sign': request.user.zodiac_sign, 'signs': signs})

    @action(detail=False, methods=['get'])
    def mbti(self, request):
        code = (request.query_params.get('type') or request.user.mbti_type or '').upper()
        personality = MBTI_TYPES.get(code)
        if personality is None:
            return Response({'errors': [f"Unknown MBTI type: {code or '(none)'}"]}, status=status.HTTP_400_BAD_REQUEST)
        return Response({
            'type': code,
            'name': personality.name,
            'description': personality.description,
            'work_style': personality.work_style,
            'preferred_roles': personality.preferred_roles,
            'advice': get_mbti_career_advice(code),
        })


class TarotReadingViewSet(mixins.ListModelMixin,
                          mixins.RetrieveModelMixin,
                          mixins.CreateModelMixin,
                          viewsets.GenericViewSet):
    """
    The current user's stored readings (most recent few).

    - POST: Draw a new reading, {"spread": "single" | "three-card" | "career-cross"}
    """

    serializer_class = TarotReadingSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return TarotReading.objects.filter(user=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = TarotReadingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            reading = GuidanceService.create_reading(request.user, serializer.validated_data['spread'])
        except GuidanceError as e:
            return Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
        return Response(TarotReadingSerializer(reading).data, status=status.HTTP_201_CREATED)
