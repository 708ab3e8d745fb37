"""
Daily career horoscopes.

Mood, energy and lucky numbers are deterministic for a (sign, date) pair;
only the template wording and the advice line are drawn at random, so
callers that need repeatable output pass their own ``random.Random``.
"""
import logging
import random
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Optional

from .exceptions import GuidanceError
from .zodiac import get_sign, sign_index

logger = logging.getLogger(__name__)


POSITIVE = 'positive'
NEUTRAL = 'neutral'
CHALLENGING = 'challenging'

ELEMENT_BASE_ENERGY = {
    'fire': 8,
    'air': 7,
    'earth': 6,
    'water': 5,
}

CAREER_TEMPLATES = {
    POSITIVE: [
        "The stars align favorably for your career today. {specific_advice}",
        "Your {sign_strength} will be particularly powerful in professional settings today. {specific_advice}",
        "A golden opportunity may present itself. {specific_advice}",
        "Your natural {trait} will attract positive attention from colleagues and superiors. {specific_advice}",
        "The cosmic energy supports career advancement today. {specific_advice}",
    ],
    NEUTRAL: [
        "Today calls for steady progress in your career journey. {specific_advice}",
        "Focus on {sign_strength} to navigate today's professional challenges. {specific_advice}",
        "A balanced approach to work will serve you well today. {specific_advice}",
        "Your {trait} may be tested, but this is an opportunity for growth. {specific_advice}",
        "Patience and persistence will be your allies today. {specific_advice}",
    ],
    CHALLENGING: [
        "The stars suggest caution in career matters today. {specific_advice}",
        "Your {sign_challenge} may surface today - use it as a learning opportunity. {specific_advice}",
        "Today requires extra attention to detail and careful communication. {specific_advice}",
        "Challenges may arise, but your natural {trait} will help you overcome them. {specific_advice}",
        "A difficult situation may teach you valuable lessons about your career path. {specific_advice}",
    ],
}

SPECIFIC_ADVICE = {
    'aries': [
        "Channel your leadership energy into a new project or initiative",
        "Your quick decision-making skills will be valued by your team",
        "Consider taking the lead on a challenging assignment",
        "Network with industry leaders - your confidence will make a strong impression",
    ],
    'taurus': [
        "Focus on building long-term professional relationships",
        "Your reliability will be noticed and rewarded",
        "Consider investing in professional development or certifications",
        "Review your financial goals and career stability",
    ],
    'gemini': [
        "Use your communication skills to facilitate team collaboration",
        "Explore new learning opportunities or skills development",
        "Network across different departments or industries",
        "Share your innovative ideas in meetings",
    ],
    'cancer': [
        "Trust your intuition when evaluating new opportunities",
        "Focus on team building and creating supportive work environments",
        "Your empathetic nature will help resolve workplace conflicts",
        "Consider mentoring junior colleagues",
    ],
    'leo': [
        "Showcase your creative ideas with confidence",
        "Take on projects that allow you to inspire and lead others",
        "Your natural charisma will open doors to new opportunities",
        "Consider roles that put you in the spotlight",
    ],
    'virgo': [
        "Your attention to detail will prevent costly mistakes",
        "Focus on process improvement and efficiency",
        "Organize your workspace and digital files for better productivity",
        "Offer analytical insights to help solve complex problems",
    ],
    'libra': [
        "Use your diplomatic skills to navigate office politics",
        "Focus on creating harmony and balance in team dynamics",
        "Your aesthetic sense could benefit creative or design projects",
        "Mediate conflicts and build consensus among colleagues",
    ],
    'scorpio': [
        "Dive deep into research or complex problem-solving",
        "Your intensity and focus will drive important projects to completion",
        "Trust your instincts when evaluating people and opportunities",
        "Consider roles that involve transformation or crisis management",
    ],
    'sagittarius': [
        "Explore international opportunities or global perspectives",
        "Share your optimistic vision to motivate the team",
        "Consider educational or training roles",
        "Network with diverse professionals to expand your horizons",
    ],
    'capricorn': [
        "Set clear, achievable goals for your career advancement",
        "Your disciplined approach will lead to steady progress",
        "Focus on building authority and expertise in your field",
        "Plan for long-term career success with strategic moves",
    ],
    'aquarius': [
        "Embrace innovative approaches to traditional problems",
        "Your unique perspective will bring fresh solutions",
        "Consider roles in technology or social impact organizations",
        "Network with forward-thinking professionals",
    ],
    'pisces': [
        "Trust your creative instincts in problem-solving",
        "Your empathetic nature will help you understand client needs",
        "Consider roles in healing, arts, or service-oriented industries",
        "Use visualization techniques to manifest career goals",
    ],
}


@dataclass
class DailyHoroscope:
    sign: str
    date: date
    career_focus: str
    advice: str
    lucky_numbers: List[int]
    mood: str
    energy: int
    opportunities: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload['date'] = self.date.isoformat()
        return payload


class HoroscopeGenerator:
    """Builds career horoscopes from sign data and the calendar."""

    @staticmethod
    def generate_daily_horoscope(sign: str, on_date: Optional[date] = None, rng: Optional[random.Random] = None) -> DailyHoroscope:
        zodiac = get_sign(sign)
        if zodiac is None:
            raise GuidanceError(f"Unknown zodiac sign: {sign}")

        on_date = on_date or date.today()
        rng = rng or random.Random()

        mood = HoroscopeGenerator.calculate_mood(zodiac.key, on_date)
        logger.debug("Horoscope for %s on %s: mood=%s", zodiac.key, on_date, mood)
        template = rng.choice(CAREER_TEMPLATES[mood])
        advice = rng.choice(SPECIFIC_ADVICE[zodiac.key])

        career_focus = (
            template
            .replace('{specific_advice}', '', 1)
            .replace('{sign_strength}', zodiac.career_strengths[0].lower(), 1)
            .replace('{trait}', zodiac.traits[0].lower(), 1)
            .replace('{sign_challenge}', zodiac.challenges[0].lower(), 1)
        )

        return DailyHoroscope(
            sign=zodiac.name,
            date=on_date,
            career_focus=career_focus.strip(),
            advice=advice,
            lucky_numbers=HoroscopeGenerator.lucky_numbers(zodiac.key, on_date),
            mood=mood,
            energy=HoroscopeGenerator.calculate_energy(zodiac.key, on_date),
            opportunities=HoroscopeGenerator.opportunities(zodiac.key, mood),
            warnings=HoroscopeGenerator.warnings(zodiac.key, mood),
        )

    @staticmethod
    def calculate_mood(sign: str, on_date: date) -> str:
        day_of_year = on_date.timetuple().tm_yday
        value = (day_of_year + sign_index(sign)) % 10
        if value >= 7:
            return POSITIVE
        if value >= 4:
            return NEUTRAL
        return CHALLENGING

    @staticmethod
    def calculate_energy(sign: str, on_date: date) -> int:
        base = ELEMENT_BASE_ENERGY.get(get_sign(sign).element, 5)
        variation = (on_date.day % 4) - 2
        return max(1, min(10, base + variation))

    @staticmethod
    def lucky_numbers(sign: str, on_date: date) -> List[int]:
        position = sign_index(sign) + 1
        day = on_date.day
        return sorted([position, day % 50 + 1, (position + day) % 100 + 1])

    @staticmethod
    def opportunities(sign: str, mood: str) -> List[str]:
        zodiac = get_sign(sign)
        items = []
        if mood == POSITIVE:
            items.append(f"Leverage your {zodiac.career_strengths[0].lower()}")
            items.append("Network with influential contacts")
        if mood != CHALLENGING:
            items.append("Explore new learning opportunities")
        return items

    @staticmethod
    def warnings(sign: str, mood: str) -> List[str]:
        zodiac = get_sign(sign)
        items = []
        if mood == CHALLENGING:
            items.append(f"Watch out for {zodiac.challenges[0].lower()}")
            items.append("Avoid making major career decisions today")
        if mood != POSITIVE:
            items.append("Double-check important communications")
        return items
