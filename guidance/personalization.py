"""
Personalized daily guidance

Combines the day's horoscope, a daily tarot card and contextual quotes with
the user's career stage and recent job-search activity into insights,
action recommendations and a short mood analysis.
"""
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from .horoscope import CHALLENGING, POSITIVE, DailyHoroscope, HoroscopeGenerator
from .quotes import CATEGORIES, Quote, QuoteContext, QuoteManager
from .tarot import DrawnCard, TarotReader

MAX_ADDITIONAL_QUOTES = 2
MAX_ACTIONS = 4

CAREER_CHANGE_TRAITS = {
    'aries': 'leadership',
    'taurus': 'reliability',
    'gemini': 'adaptability',
}


@dataclass
class RecentActivity:
    applications: int = 0
    rejections: int = 0
    interviews: int = 0
    last_login_days: int = 0


@dataclass
class GuidanceProfile:
    zodiac_sign: str
    career_stage: str = 'job-seeking'
    interests: List[str] = field(default_factory=list)
    goals: List[str] = field(default_factory=list)
    recent_activity: RecentActivity = field(default_factory=RecentActivity)
    preferred_categories: List[str] = field(default_factory=list)
    motivation_level: str = 'medium'
    challenge_comfort: str = 'moderate'

    @classmethod
    def from_user(cls, user, today: Optional[date] = None) -> 'GuidanceProfile':
        """Career stage and interests from the profile, activity from the last 30 days of applications."""
        from applications.services import ApplicationService
        from profiles.models import JobSeekerProfile

        today = today or date.today()
        profile = JobSeekerProfile.objects.filter(user=user).first()
        activity = ApplicationService.get_recent_activity(user)
        last_login_days = (today - user.last_login.date()).days if user.last_login else 0

        return cls(
            zodiac_sign=user.zodiac_sign,
            career_stage=profile.career_stage if profile else 'job-seeking',
            interests=list(profile.interests) if profile else [],
            recent_activity=RecentActivity(
                applications=activity['applications'],
                rejections=activity['rejections'],
                interviews=activity['interviews'],
                last_login_days=max(last_login_days, 0),
            ),
            preferred_categories=list(profile.preferred_categories) if profile else [],
        )


@dataclass
class MoodAnalysis:
    current: str
    factors: List[str]
    suggestions: List[str]


@dataclass
class PersonalizedGuidance:
    horoscope: DailyHoroscope
    daily_card: DrawnCard
    primary_quote: Quote
    additional_quotes: List[Quote]
    insights: List[str]
    action_recommendations: List[str]
    mood_analysis: MoodAnalysis

    def to_dict(self) -> Dict[str, object]:
        return {
            'horoscope': self.horoscope.to_dict(),
            'daily_card': self.daily_card.to_dict(),
            'primary_quote': self.primary_quote.to_dict(),
            'additional_quotes': [quote.to_dict() for quote in self.additional_quotes],
            'insights': self.insights,
            'action_recommendations': self.action_recommendations,
            'mood_analysis': {
                'current': self.mood_analysis.current,
                'factors': self.mood_analysis.factors,
                'suggestions': self.mood_analysis.suggestions,
            },
        }


class PersonalizationEngine:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.quotes = QuoteManager(self.rng)
        self.tarot = TarotReader(self.rng)

    def generate_personalized_guidance(self, profile: GuidanceProfile, on_date: Optional[date] = None) -> PersonalizedGuidance:
        on_date = on_date or date.today()
        horoscope = HoroscopeGenerator.generate_daily_horoscope(profile.zodiac_sign, on_date, rng=self.rng)
        daily_card = self.tarot.get_daily_card()

        primary_quote = self.select_contextual_quote(profile, horoscope.mood, on_date)
        return PersonalizedGuidance(
            horoscope=horoscope,
            daily_card=daily_card,
            primary_quote=primary_quote,
            additional_quotes=self.additional_quotes(profile, primary_quote, on_date),
            insights=self.insights(profile, horoscope, daily_card),
            action_recommendations=self.action_recommendations(profile, horoscope, daily_card),
            mood_analysis=self.analyze_mood(profile, horoscope),
        )

    def select_contextual_quote(self, profile: GuidanceProfile, mood: str, on_date: date) -> Quote:
        activity = profile.recent_activity
        quote = self.quotes.get_contextual_quote(
            QuoteContext(
                recent_applications=activity.applications,
                recent_rejections=activity.rejections,
                interviews=activity.interviews,
                career_stage=profile.career_stage,
            ),
            on_date,
        )

        preferred = [
            candidate
            for category in profile.preferred_categories
            if category in CATEGORIES
            for candidate in QuoteManager.get_quotes_by_category(category)
        ]
        if preferred:
            quote = self.rng.choice(preferred)

        return quote or self.quotes.get_quote_for_mood(mood)

    def additional_quotes(self, profile: GuidanceProfile, primary: Quote, on_date: date) -> List[Quote]:
        extras: List[Quote] = []
        chosen_ids = {primary.id}

        related = [quote for quote in QuoteManager.get_quotes_by_category(primary.category) if quote.id != primary.id]
        if related:
            pick = self.rng.choice(related)
            extras.append(pick)
            chosen_ids.add(pick.id)

        if profile.career_stage:
            stage_quote = self.quotes.get_contextual_quote(QuoteContext(career_stage=profile.career_stage), on_date)
            if stage_quote.id not in chosen_ids:
                extras.append(stage_quote)
                chosen_ids.add(stage_quote.id)

        if profile.recent_activity.last_login_days > 3 or profile.motivation_level == 'low':
            boosts = [quote for quote in QuoteManager.get_quotes_by_category('motivation') if quote.id not in chosen_ids]
            if boosts:
                extras.append(self.rng.choice(boosts))

        return extras[:MAX_ADDITIONAL_QUOTES]

    @staticmethod
    def insights(profile: GuidanceProfile, horoscope: DailyHoroscope, card: DrawnCard) -> List[str]:
        activity = profile.recent_activity
        insights = []

        if horoscope.mood == POSITIVE and not card.is_reversed:
            insights.append(
                "Both your horoscope and tarot card align positively - this is an excellent day to take career initiatives."
            )
        elif horoscope.mood == CHALLENGING or card.is_reversed:
            insights.append(
                "Today calls for patience and reflection. Use this time to plan and prepare for future opportunities."
            )

        if profile.career_stage == 'job-seeking':
            if horoscope.energy >= 7:
                insights.append(
                    "Your high energy today is perfect for networking and reaching out to potential employers."
                )
            if activity.applications > 5:
                insights.append(
                    "You've been actively applying - remember that quality applications often outperform quantity."
                )

        if profile.career_stage == 'career-change':
            trait = CAREER_CHANGE_TRAITS.get(profile.zodiac_sign, 'intuition')
            insights.append(f"As a {horoscope.sign}, your natural {trait} will serve you well during this transition.")

        if activity.rejections > 2:
            insights.append("Recent rejections are redirections. Each 'no' brings you closer to the right 'yes'.")

        if activity.interviews > 0:
            insights.append("Interview opportunities show you're on the right track. Confidence is your ally.")

        if 'new beginnings' in card.card.keywords and horoscope.opportunities:
            insights.append(
                "The cards suggest new beginnings align with opportunities in your horoscope - be ready to act."
            )

        return insights or ["Trust in your unique journey. Every step forward, no matter how small, is progress."]

    @staticmethod
    def action_recommendations(profile: GuidanceProfile, horoscope: DailyHoroscope, card: DrawnCard) -> List[str]:
        activity = profile.recent_activity
        actions = []

        if horoscope.energy >= 7:
            actions.append("High energy day - tackle your most challenging career tasks first")
            if profile.career_stage == 'job-seeking':
                actions.append("Reach out to 2-3 new networking contacts")
        elif horoscope.energy <= 4:
            actions.append("Lower energy today - focus on planning and organizing rather than high-stress activities")

        if horoscope.mood == POSITIVE:
            actions.append(
                "Take advantage of today's positive energy to make important career calls or send applications"
            )
            if profile.challenge_comfort == 'adventurous':
                actions.append("Consider applying for that stretch role you've been eyeing")
        elif horoscope.mood == CHALLENGING:
            actions.append("Practice self-care and avoid making major career decisions today")
            actions.append("Review and update your career materials instead")

        keywords = card.card.keywords
        if 'collaboration' in keywords:
            actions.append("Focus on team building and professional relationship development")
        if 'planning' in keywords:
            actions.append("Create or refine your career development plan")
        if 'new beginnings' in keywords:
            actions.append("Explore new career opportunities or skill development options")

        if profile.career_stage == 'job-seeking':
            if activity.applications == 0:
                actions.append("Start with 1-2 targeted job applications today")
            if not activity.interviews:
                actions.append("Review your resume and optimize for applicant tracking systems")

        if not actions:
            actions = [
                "Update your LinkedIn profile",
                "Spend 30 minutes learning a new skill related to your field",
                "Network with one industry professional",
            ]

        return actions[:MAX_ACTIONS]

    @staticmethod
    def analyze_mood(profile: GuidanceProfile, horoscope: DailyHoroscope) -> MoodAnalysis:
        activity = profile.recent_activity
        factors = []
        suggestions = []

        if activity.rejections > 3:
            factors.append("Recent job rejections may be affecting confidence")
            suggestions.append("Remember that rejections are often about fit, not your worth")

        if activity.last_login_days > 7:
            factors.append("Extended time away from job search activities")
            suggestions.append("Start with small, manageable career tasks to rebuild momentum")

        if activity.applications > 20:
            factors.append("High application activity may lead to burnout")
            suggestions.append("Balance application quantity with quality and self-care")

        if horoscope.mood == CHALLENGING:
            factors.append("Astrological influences suggest a more cautious day")
            suggestions.append("Use this time for reflection and strategic planning")

        if horoscope.energy <= 4:
            factors.append("Lower energy levels indicated by your horoscope")
            suggestions.append("Focus on rest and preparation rather than high-intensity activities")

        if not suggestions:
            suggestions = [
                "Maintain your positive momentum with consistent daily actions",
                "Celebrate small wins to build lasting confidence",
            ]

        return MoodAnalysis(
            current=horoscope.mood,
            factors=factors or ["Overall outlook appears stable"],
            suggestions=suggestions,
        )
