"""
Motivational quote library and selection rules.
"""
import math
import random
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List, Optional


CATEGORIES = ['motivation', 'success', 'resilience', 'growth', 'leadership', 'opportunity', 'confidence']

MOOD_CATEGORIES = {
    'positive': ['success', 'opportunity', 'leadership'],
    'challenging': ['resilience', 'growth', 'confidence'],
}
DEFAULT_MOOD_CATEGORIES = ['motivation', 'growth']

CAREER_STAGE_CATEGORIES = {
    'starting-out': 'growth',
    'career-change': 'opportunity',
    'advancement': 'leadership',
}


@dataclass(frozen=True)
class Quote:
    id: str
    text: str
    author: str
    category: str
    tags: List[str] = field(default_factory=list)
    career_relevant: bool = True

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _quote(number, text, author, category, tags, career_relevant=True):
    return Quote(f"quote-{number}", text, author, category, tags, career_relevant)


QUOTES: List[Quote] = [
    _quote(1, 'Success is not final, failure is not fatal: it is the courage to continue that counts.',
           'Winston Churchill', 'success', ['perseverance', 'courage', 'determination']),
    _quote(2, 'The only way to do great work is to love what you do.',
           'Steve Jobs', 'motivation', ['passion', 'fulfillment', 'excellence']),
    _quote(3, "Your limitation—it's only your imagination.",
           'Unknown', 'motivation', ['potential', 'mindset', 'breakthrough']),
    _quote(4, "Don't watch the clock; do what it does. Keep going.",
           'Sam Levenson', 'motivation', ['persistence', 'time management', 'progress']),
    _quote(5, 'The future belongs to those who believe in the beauty of their dreams.',
           'Eleanor Roosevelt', 'motivation', ['dreams', 'belief', 'future']),
    _quote(6, 'Every rejection is a redirection to something better.',
           'Unknown', 'resilience', ['rejection', 'opportunity', 'perspective']),
    _quote(7, 'Fall seven times, stand up eight.',
           'Japanese Proverb', 'resilience', ['persistence', 'recovery', 'strength']),
    _quote(8, 'The only impossible journey is the one you never begin.',
           'Tony Robbins', 'growth', ['beginning', 'action', 'possibility']),
    _quote(9, 'In the middle of difficulty lies opportunity.',
           'Albert Einstein', 'resilience', ['opportunity', 'challenge', 'perspective']),
    _quote(10, 'Growth begins at the end of your comfort zone.',
           'Neale Donald Walsch', 'growth', ['comfort zone', 'development', 'challenge']),
    _quote(11, 'A leader is one who knows the way, goes the way, and shows the way.',
           'John C. Maxwell', 'leadership', ['guidance', 'example', 'direction']),
    _quote(12, "Believe you can and you're halfway there.",
           'Theodore Roosevelt', 'confidence', ['belief', 'self-confidence', 'mindset']),
    _quote(13, 'The way to get started is to quit talking and begin doing.',
           'Walt Disney', 'motivation', ['action', 'execution', 'progress']),
    _quote(14, 'Innovation distinguishes between a leader and a follower.',
           'Steve Jobs', 'leadership', ['innovation', 'creativity', 'leadership']),
    _quote(15, 'Confidence comes not from always being right but from not fearing to be wrong.',
           'Peter T. Mcintyre', 'confidence', ['confidence', 'courage', 'risk-taking']),
    _quote(16, "Opportunities don't happen. You create them.",
           'Chris Grosser', 'opportunity', ['creation', 'proactive', 'initiative']),
    _quote(17, 'Your career is a journey, not a destination.',
           'Unknown', 'growth', ['journey', 'process', 'development']),
    _quote(18, 'The expert in anything was once a beginner.',
           'Helen Hayes', 'growth', ['learning', 'expertise', 'progress']),
    _quote(19, 'Success is where preparation and opportunity meet.',
           'Bobby Unser', 'success', ['preparation', 'opportunity', 'readiness']),
    _quote(20, 'Choose a job you love, and you will never have to work a day in your life.',
           'Confucius', 'motivation', ['passion', 'fulfillment', 'career choice']),
    _quote(21, 'Your network is your net worth.',
           'Porter Gale', 'opportunity', ['networking', 'relationships', 'value']),
    _quote(22, 'Alone we can do so little; together we can do so much.',
           'Helen Keller', 'leadership', ['teamwork', 'collaboration', 'synergy']),
    _quote(23, 'The currency of real networking is not greed but generosity.',
           'Keith Ferrazzi', 'opportunity', ['networking', 'generosity', 'relationships']),
    _quote(24, 'An investment in knowledge pays the best interest.',
           'Benjamin Franklin', 'growth', ['learning', 'knowledge', 'investment']),
    _quote(25, 'The beautiful thing about learning is that no one can take it away from you.',
           'B.B. King', 'growth', ['learning', 'knowledge', 'security']),
    _quote(26, 'Skills are cheap. Passion is priceless.',
           'Gary Vaynerchuk', 'motivation', ['passion', 'skills', 'value']),
    _quote(27, 'The only constant in life is change.',
           'Heraclitus', 'resilience', ['change', 'adaptation', 'flexibility']),
    _quote(28, 'Change is the end result of all true learning.',
           'John F. Kennedy', 'growth', ['change', 'learning', 'transformation']),
    _quote(29, 'Progress is impossible without change.',
           'George Bernard Shaw', 'growth', ['progress', 'change', 'evolution']),
    _quote(30, "Excellence is not a skill, it's an attitude.",
           'Ralph Marston', 'success', ['excellence', 'attitude', 'quality']),
    _quote(31, 'Quality is not an act, it is a habit.',
           'Aristotle', 'success', ['quality', 'habits', 'consistency']),
    _quote(32, 'Strive not to be a success, but rather to be of value.',
           'Albert Einstein', 'success', ['value', 'purpose', 'contribution']),
    _quote(33, 'Time is what we want most, but what we use worst.',
           'William Penn', 'motivation', ['time management', 'productivity', 'efficiency']),
    _quote(34, "The key is not to prioritize what's on your schedule, but to schedule your priorities.",
           'Stephen Covey', 'motivation', ['priorities', 'planning', 'productivity']),
    _quote(35, 'You are never too old to set another goal or to dream a new dream.',
           'C.S. Lewis', 'motivation', ['goals', 'dreams', 'age']),
]


@dataclass
class QuoteContext:
    """Recent job-search activity used to pick a fitting quote."""

    recent_applications: int = 0
    recent_rejections: int = 0
    interviews: int = 0
    career_stage: str = ''


class QuoteManager:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_random_quote(self, category: Optional[str] = None) -> Quote:
        pool = self.get_quotes_by_category(category) if category else QUOTES
        return self.rng.choice(pool or QUOTES)

    @staticmethod
    def get_daily_quote(on_date: Optional[date] = None) -> Quote:
        on_date = on_date or date.today()
        return QUOTES[on_date.timetuple().tm_yday % len(QUOTES)]

    @staticmethod
    def get_quotes_by_category(category: str) -> List[Quote]:
        return [quote for quote in QUOTES if quote.category == category]

    @staticmethod
    def get_quotes_by_tag(tag: str) -> List[Quote]:
        tag = tag.lower()
        return [quote for quote in QUOTES if any(tag in existing.lower() for existing in quote.tags)]

    def get_quote_for_mood(self, mood: str) -> Quote:
        categories = MOOD_CATEGORIES.get(mood, DEFAULT_MOOD_CATEGORIES)
        pool = [quote for quote in QUOTES if quote.category in categories]
        return self.rng.choice(pool) if pool else QUOTES[0]

    @staticmethod
    def search_quotes(term: str) -> List[Quote]:
        term = term.lower()
        return [
            quote for quote in QUOTES
            if term in quote.text.lower()
            or term in quote.author.lower()
            or any(term in tag.lower() for tag in quote.tags)
        ]

    @staticmethod
    def get_career_relevant_quotes() -> List[Quote]:
        return [quote for quote in QUOTES if quote.career_relevant]

    @staticmethod
    def get_quote_of_the_week(on_date: Optional[date] = None) -> Quote:
        on_date = on_date or date.today()
        start_of_year = date(on_date.year, 1, 1)
        # Sunday-based weekday of January 1st
        start_weekday = (start_of_year.weekday() + 1) % 7
        days = (on_date - start_of_year).days
        week_number = math.ceil((days + start_weekday + 1) / 7)
        return QUOTES[week_number % len(QUOTES)]

    def get_contextual_quote(self, context: QuoteContext, on_date: Optional[date] = None) -> Quote:
        if context.recent_rejections > 3:
            return self.get_random_quote('resilience')
        if context.recent_applications > 10 and context.interviews == 0:
            return self.get_random_quote('motivation')
        if context.interviews > 0:
            return self.get_random_quote('confidence')

        category = CAREER_STAGE_CATEGORIES.get(context.career_stage)
        if category:
            return self.get_random_quote(category)
        return self.get_daily_quote(on_date)
