"""
Zodiac reference data and birth-date helpers.

Signs are keyed by their lower-case English name ("aries" .. "pisces"); that
key is what gets stored on the user and passed around the guidance code.
"""
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ZodiacSign:
    key: str
    name: str
    symbol: str
    element: str
    modality: str
    planet: str
    dates: str
    traits: List[str]
    career_strengths: List[str]
    challenges: List[str]


ZODIAC_SIGNS: Dict[str, ZodiacSign] = {
    'aries': ZodiacSign(
        key='aries', name='Aries', symbol='♈', element='fire', modality='cardinal', planet='Mars',
        dates='March 21 - April 19',
        traits=['Leadership', 'Initiative', 'Courage', 'Independence'],
        career_strengths=['Natural leadership', 'Entrepreneurial spirit', 'Quick decision-making', 'Competitive drive'],
        challenges=['Impatience', 'Impulsiveness', 'Difficulty with routine tasks', 'May rush decisions'],
    ),
    'taurus': ZodiacSign(
        key='taurus', name='Taurus', symbol='♉', element='earth', modality='fixed', planet='Venus',
        dates='April 20 - May 20',
        traits=['Reliability', 'Persistence', 'Practicality', 'Stability'],
        career_strengths=['Strong work ethic', 'Attention to detail', 'Financial acumen', 'Consistent performance'],
        challenges=['Resistance to change', 'Stubbornness', 'Slow to adapt', 'May avoid risks'],
    ),
    'gemini': ZodiacSign(
        key='gemini', name='Gemini', symbol='♊', element='air', modality='mutable', planet='Mercury',
        dates='May 21 - June 20',
        traits=['Communication', 'Adaptability', 'Curiosity', 'Versatility'],
        career_strengths=['Excellent communication', 'Quick learning', 'Networking abilities', 'Multi-tasking'],
        challenges=['Scattered focus', 'Inconsistency', 'Difficulty with long-term projects', 'May lack depth'],
    ),
    'cancer': ZodiacSign(
        key='cancer', name='Cancer', symbol='♋', element='water', modality='cardinal', planet='Moon',
        dates='June 21 - July 22',
        traits=['Intuition', 'Empathy', 'Nurturing', 'Emotional intelligence'],
        career_strengths=['Team building', 'Customer relations', 'Emotional intelligence', 'Protective of colleagues'],
        challenges=['Mood swings', 'Overly sensitive', 'Takes criticism personally', 'May avoid confrontation'],
    ),
    'leo': ZodiacSign(
        key='leo', name='Leo', symbol='♌', element='fire', modality='fixed', planet='Sun',
        dates='July 23 - August 22',
        traits=['Confidence', 'Creativity', 'Generosity', 'Natural charisma'],
        career_strengths=['Public speaking', 'Creative leadership', 'Inspiring others', 'Brand building'],
        challenges=['Need for recognition', 'Pride', 'May dominate meetings', 'Difficulty accepting feedback'],
    ),
    'virgo': ZodiacSign(
        key='virgo', name='Virgo', symbol='♍', element='earth', modality='mutable', planet='Mercury',
        dates='August 23 - September 22',
        traits=['Perfectionism', 'Analysis', 'Service', 'Efficiency'],
        career_strengths=['Quality control', 'Process improvement', 'Problem-solving', 'Reliable execution'],
        challenges=['Perfectionist tendencies', 'Over-critical', 'Difficulty delegating', 'May get lost in details'],
    ),
    'libra': ZodiacSign(
        key='libra', name='Libra', symbol='♎', element='air', modality='cardinal', planet='Venus',
        dates='September 23 - October 22',
        traits=['Balance', 'Diplomacy', 'Harmony', 'Fairness'],
        career_strengths=['Negotiation', 'Mediation', 'Team harmony', 'Aesthetic sense'],
        challenges=['Indecisiveness', 'Conflict avoidance', 'People-pleasing', 'Difficulty with deadlines'],
    ),
    'scorpio': ZodiacSign(
        key='scorpio', name='Scorpio', symbol='♏', element='water', modality='fixed', planet='Mars/Pluto',
        dates='October 23 - November 21',
        traits=['Intensity', 'Focus', 'Transformation', 'Determination'],
        career_strengths=['Deep analysis', 'Crisis management', 'Research abilities', 'Transformational leadership'],
        challenges=['Trust issues', 'Secretiveness', 'All-or-nothing approach', 'May hold grudges'],
    ),
    'sagittarius': ZodiacSign(
        key='sagittarius', name='Sagittarius', symbol='♐', element='fire', modality='mutable', planet='Jupiter',
        dates='November 22 - December 21',
        traits=['Optimism', 'Adventure', 'Philosophy', 'Freedom'],
        career_strengths=['International business', 'Education', 'Big-picture thinking', 'Cultural awareness'],
        challenges=['Impatience with details', 'Overcommitment', 'Restlessness', 'May lack follow-through'],
    ),
    'capricorn': ZodiacSign(
        key='capricorn', name='Capricorn', symbol='♑', element='earth', modality='cardinal', planet='Saturn',
        dates='December 22 - January 19',
        traits=['Ambition', 'Discipline', 'Responsibility', 'Structure'],
        career_strengths=['Goal achievement', 'Strategic planning', 'Authority', 'Long-term vision'],
        challenges=['Workaholism', 'Rigidity', 'Pessimism', 'May sacrifice work-life balance'],
    ),
    'aquarius': ZodiacSign(
        key='aquarius', name='Aquarius', symbol='♒', element='air', modality='fixed', planet='Uranus',
        dates='January 20 - February 18',
        traits=['Innovation', 'Independence', 'Humanitarianism', 'Originality'],
        career_strengths=['Technology adoption', 'Innovation', 'Social causes', 'Unique perspectives'],
        challenges=['Rebellious nature', 'Emotional detachment', 'Unpredictability', 'May resist authority'],
    ),
    'pisces': ZodiacSign(
        key='pisces', name='Pisces', symbol='♓', element='water', modality='mutable', planet='Neptune',
        dates='February 19 - March 20',
        traits=['Intuition', 'Creativity', 'Empathy', 'Spirituality'],
        career_strengths=['Creative industries', 'Healing professions', 'Intuitive insights', 'Compassionate leadership'],
        challenges=['Boundary issues', 'Escapism', 'Indecisiveness', "May take on others' emotions"],
    ),
}

SIGN_KEYS = list(ZODIAC_SIGNS)

ZODIAC_CHOICES = [(key, sign.name) for key, sign in ZODIAC_SIGNS.items()]

# (start month, start day), (end month, end day); capricorn wraps the year end
ZODIAC_DATES: Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    'aries': ((3, 21), (4, 19)),
    'taurus': ((4, 20), (5, 20)),
    'gemini': ((5, 21), (6, 20)),
    'cancer': ((6, 21), (7, 22)),
    'leo': ((7, 23), (8, 22)),
    'virgo': ((8, 23), (9, 22)),
    'libra': ((9, 23), (10, 22)),
    'scorpio': ((10, 23), (11, 21)),
    'sagittarius': ((11, 22), (12, 21)),
    'capricorn': ((12, 22), (1, 19)),
    'aquarius': ((1, 20), (2, 18)),
    'pisces': ((2, 19), (3, 20)),
}

MINIMUM_AGE = 13
MAXIMUM_AGE = 120


def get_sign(key: str) -> Optional[ZodiacSign]:
    return ZODIAC_SIGNS.get((key or '').lower())


def sign_index(key: str) -> int:
    """Zero-based position of the sign in the aries..pisces order, -1 if unknown."""
    key = (key or '').lower()
    return SIGN_KEYS.index(key) if key in ZODIAC_SIGNS else -1


def calculate_zodiac_sign(birth_date: date) -> str:
    month, day = birth_date.month, birth_date.day

    for key, ((start_month, start_day), (end_month, end_day)) in ZODIAC_DATES.items():
        if start_month > end_month:
            if (month == start_month and day >= start_day) or (month == end_month and day <= end_day):
                return key
        elif (
            (month == start_month and day >= start_day)
            or (month == end_month and day <= end_day)
            or start_month < month < end_month
        ):
            return key

    return 'capricorn'


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def validate_birth_date(birth_date, today: Optional[date] = None) -> Optional[str]:
    """
    Check a birth date for registration.

    Returns:
        The error message, or None when the date is acceptable.
    """
    if not isinstance(birth_date, date):
        try:
            birth_date = date.fromisoformat(str(birth_date))
        except ValueError:
            return 'Invalid date format'

    today = today or date.today()
    if birth_date > today:
        return 'Birth date cannot be in the future'

    age = calculate_age(birth_date, today)
    if age > MAXIMUM_AGE:
        return 'Birth date is too far in the past'
    if age < MINIMUM_AGE:
        return f'You must be at least {MINIMUM_AGE} years old'
    return None


def format_zodiac_sign(key: str) -> str:
    sign = get_sign(key)
    symbol = sign.symbol if sign else ''
    return f"{key[:1].upper()}{key[1:]} {symbol}"
