"""
Career tarot: a small career-themed deck, spreads, and reading text.
"""
import logging
import random
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from .exceptions import GuidanceError

logger = logging.getLogger(__name__)


REVERSAL_PROBABILITY = 0.3


@dataclass(frozen=True)
class CardFace:
    meaning: str
    career_meaning: str
    advice: str


@dataclass(frozen=True)
class TarotCard:
    id: str
    name: str
    suit: str
    number: int
    keywords: List[str]
    upright: CardFace
    reversed: CardFace
    emoji: str


@dataclass
class DrawnCard:
    card: TarotCard
    is_reversed: bool
    position: str = ''

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def face(self) -> CardFace:
        return self.card.reversed if self.is_reversed else self.card.upright

    @property
    def relevant_meaning(self) -> str:
        return self.face.career_meaning

    @property
    def relevant_advice(self) -> str:
        return self.face.advice

    def to_dict(self) -> Dict[str, object]:
        return {
            'id': self.card.id,
            'name': self.card.name,
            'suit': self.card.suit,
            'number': self.card.number,
            'keywords': list(self.card.keywords),
            'emoji': self.card.emoji,
            'position': self.position,
            'reversed': self.is_reversed,
            'meaning': self.face.meaning,
            'relevant_meaning': self.relevant_meaning,
            'relevant_advice': self.relevant_advice,
        }


@dataclass
class Reading:
    spread: str
    date: date
    cards: List[DrawnCard]
    interpretation: str
    action_items: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            'spread': self.spread,
            'date': self.date.isoformat(),
            'cards': [card.to_dict() for card in self.cards],
            'interpretation': self.interpretation,
            'action_items': self.action_items,
        }


def _card(card_id, name, suit, number, keywords, upright, reversed_face, emoji):
    return TarotCard(card_id, name, suit, number, keywords, CardFace(*upright), CardFace(*reversed_face), emoji)


TAROT_DECK: List[TarotCard] = [
    _card(
        'fool', 'The Fool', 'major', 0,
        ['new beginnings', 'adventure', 'potential', 'innocence'],
        ('New beginnings, spontaneity, innocence, free spirit',
         'Starting a new career path or taking a leap of faith in your profession',
         'Trust your instincts and be open to new opportunities, even if they seem risky'),
        ('Recklessness, risk-taking, foolishness, stagnation',
         'Avoiding necessary career risks or making impulsive professional decisions',
         'Balance spontaneity with careful planning before making major career moves'),
        '🃏',
    ),
    _card(
        'magician', 'The Magician', 'major', 1,
        ['manifestation', 'willpower', 'desire', 'creation'],
        ('Manifestation, resourcefulness, power, inspired action',
         'You have all the tools needed to succeed in your career goals',
         'Focus your energy and use your skills to manifest your professional dreams'),
        ('Manipulation, poor planning, untapped talents, lack of focus',
         'Scattered energy or misusing your professional talents',
         'Refocus your career strategy and align your actions with your goals'),
        '🎩',
    ),
    _card(
        'high-priestess', 'The High Priestess', 'major', 2,
        ['intuition', 'sacred knowledge', 'divine feminine', 'subconscious'],
        ('Intuition, sacred knowledge, divine feminine, subconscious mind',
         'Trust your intuition in career decisions and tap into your inner wisdom',
         'Listen to your inner voice when evaluating job opportunities or career changes'),
        ('Secrets, withdrawn, repressed intuition, lack of center',
         'Ignoring your intuition or keeping important career information hidden',
         'Reconnect with your inner guidance and be more transparent in professional relationships'),
        '🌙',
    ),
    _card(
        'emperor', 'The Emperor', 'major', 4,
        ['authority', 'structure', 'control', 'father-figure'],
        ('Authority, establishment, structure, father figure',
         'Leadership opportunities and establishing authority in your field',
         'Take charge of your career and establish yourself as an authority in your industry'),
        ('Tyranny, rigidity, coldness, control issues',
         'Micromanagement or abuse of power in professional settings',
         'Balance authority with flexibility and avoid being overly controlling'),
        '👑',
    ),
    _card(
        'hierophant', 'The Hierophant', 'major', 5,
        ['spiritual wisdom', 'religious beliefs', 'conformity', 'tradition'],
        ('Spiritual wisdom, religious beliefs, conformity, tradition',
         'Learning from mentors and following established career paths',
         'Seek guidance from experienced professionals and respect traditional career wisdom'),
        ('Personal beliefs, freedom, challenging the status quo',
         'Breaking away from conventional career paths and creating your own way',
         'Challenge industry norms and create innovative approaches to your profession'),
        '🏛️',
    ),
    _card(
        'chariot', 'The Chariot', 'major', 7,
        ['control', 'willpower', 'success', 'determination'],
        ('Control, willpower, success, determination, hard work',
         'Achieving career success through determination and focused effort',
         'Stay focused on your career goals and push through obstacles with determination'),
        ('Lack of control, lack of direction, aggression, obstacles',
         'Losing control of your career direction or facing professional setbacks',
         'Regain control of your career path and address any obstacles methodically'),
        '🏎️',
    ),
    _card(
        'strength', 'Strength', 'major', 8,
        ['strength', 'courage', 'persuasion', 'influence'],
        ('Strength, courage, persuasion, influence, compassion',
         'Using inner strength and emotional intelligence to succeed professionally',
         'Lead with compassion and use your inner strength to overcome career challenges'),
        ('Self-doubt, lack of confidence, weakness, insecurity',
         'Struggling with confidence or feeling weak in professional situations',
         'Build your confidence and remember your past achievements and capabilities'),
        '🦁',
    ),
    _card(
        'wheel-of-fortune', 'Wheel of Fortune', 'major', 10,
        ['good luck', 'karma', 'life cycles', 'destiny'],
        ('Good luck, karma, life cycles, destiny, turning point',
         'A significant positive change or opportunity in your career',
         'Embrace the changes coming to your career and trust in the process'),
        ('Bad luck, lack of control, clinging to control, unwelcome changes',
         'Career setbacks or resistance to necessary professional changes',
         'Accept that some career changes are beyond your control and adapt accordingly'),
        '🎡',
    ),
    _card(
        'star', 'The Star', 'major', 17,
        ['hope', 'faith', 'purpose', 'renewal'],
        ('Hope, faith, purpose, renewal, spirituality, healing',
         'Finding hope and renewed purpose in your career journey',
         'Stay optimistic about your career future and trust that better opportunities are coming'),
        ('Lack of faith, despair, self-trust, disconnection',
         'Feeling hopeless about your career prospects or losing faith in your abilities',
         'Reconnect with your career goals and remember why you chose your profession'),
        '⭐',
    ),
    _card(
        'sun', 'The Sun', 'major', 19,
        ['happiness', 'success', 'optimism', 'vitality'],
        ('Happiness, success, optimism, vitality, joy, confidence',
         'Career success, recognition, and fulfillment in your professional life',
         'Celebrate your achievements and maintain your positive attitude toward work'),
        ('Inner child, feeling down, overly optimistic, unrealistic',
         'Temporary career setbacks or being overly optimistic about prospects',
         'Stay realistic about career expectations while maintaining a positive outlook'),
        '☀️',
    ),
    _card(
        'ace-pentacles', 'Ace of Pentacles', 'pentacles', 1,
        ['opportunity', 'prosperity', 'new venture', 'manifestation'],
        ('New financial opportunity, manifestation, abundance',
         'A new job offer, promotion, or business opportunity',
         'Seize new financial or career opportunities that present themselves'),
        ('Lost opportunity, lack of planning, poor financial judgment',
         'Missed career opportunities or poor financial decisions',
         'Be more strategic about career planning and financial management'),
        '💰',
    ),
    _card(
        'three-pentacles', 'Three of Pentacles', 'pentacles', 3,
        ['collaboration', 'teamwork', 'skill building', 'learning'],
        ('Collaboration, teamwork, skill building, learning from others',
         'Success through teamwork and collaborative efforts',
         'Focus on building skills and working effectively with your team'),
        ('Disharmony, lack of teamwork, poor collaboration',
         'Conflicts with colleagues or ineffective teamwork',
         'Work on improving your collaboration and communication skills'),
        '🤝',
    ),
    _card(
        'ten-pentacles', 'Ten of Pentacles', 'pentacles', 10,
        ['wealth', 'financial security', 'family', 'legacy'],
        ('Wealth, financial security, family, legacy, long-term success',
         'Achieving long-term career security and building a lasting professional legacy',
         'Think long-term about your career and focus on building lasting professional relationships'),
        ('Financial failure, lack of stability, family conflicts',
         'Career instability or conflicts between work and family',
         'Work on creating better work-life balance and financial stability'),
        '🏰',
    ),
    _card(
        'ace-wands', 'Ace of Wands', 'wands', 1,
        ['inspiration', 'creative spark', 'new project', 'growth'],
        ('Inspiration, creative spark, new project, fresh energy',
         'A burst of creative energy or a new exciting project',
         'Channel your creative energy into new professional projects or initiatives'),
        ('Lack of energy, delays, blocked creativity, frustration',
         'Creative blocks or delays in launching new career projects',
         'Take time to recharge and find new sources of professional inspiration'),
        '🔥',
    ),
    _card(
        'three-wands', 'Three of Wands', 'wands', 3,
        ['expansion', 'foresight', 'overseas opportunities', 'leadership'],
        ('Expansion, foresight, overseas opportunities, leadership',
         'Expanding your career reach and exploring new markets or opportunities',
         'Look for opportunities to expand your professional reach and influence'),
        ('Playing small, lack of foresight, unexpected delays',
         'Limited career growth or lack of vision for professional expansion',
         'Think bigger about your career possibilities and develop a long-term vision'),
        '🌅',
    ),
]

TAROT_SPREADS = {
    'single': {
        'name': 'Single Card',
        'positions': ['Present Situation'],
        'description': 'A single card for quick daily guidance',
    },
    'three-card': {
        'name': 'Three Card Spread',
        'positions': ['Past/Foundation', 'Present/Challenge', 'Future/Outcome'],
        'description': 'Past, present, and future guidance for your career',
    },
    'career-cross': {
        'name': 'Career Cross',
        'positions': [
            'Current Career', 'Challenge', 'Distant Past', 'Recent Past', 'Possible Future',
            'Immediate Future', 'Your Approach', 'External Influences', 'Hopes/Fears', 'Final Outcome',
        ],
        'description': 'Comprehensive career guidance spread',
    },
}

SPREAD_CHOICES = [(key, spread['name']) for key, spread in TAROT_SPREADS.items()]

POSITIVE_KEYWORDS = {'success', 'happiness', 'strength', 'prosperity'}
CHALLENGING_KEYWORDS = {'conflict', 'delay', 'challenge'}

KEYWORD_ACTIONS = [
    ('new beginnings', 'Explore new career opportunities or skill development'),
    ('collaboration', 'Focus on building stronger professional relationships'),
    ('planning', 'Create a detailed career development plan'),
    ('strength', 'Trust in your abilities and take on challenging projects'),
]
REVERSED_ACTION = 'Reflect on current career strategies and make necessary adjustments'
DEFAULT_ACTIONS = [
    'Update your resume and professional profiles',
    'Network with industry professionals',
    'Set clear career goals for the next quarter',
]
MAX_ACTION_ITEMS = 4


def get_card(card_id: str) -> Optional[TarotCard]:
    for card in TAROT_DECK:
        if card.id == card_id:
            return card
    return None


class TarotReader:
    """
    Draws cards and writes readings. Pass a seeded ``random.Random`` for
    repeatable draws.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw_cards(self, count: int = 1, avoid_duplicates: bool = True) -> List[DrawnCard]:
        available = list(TAROT_DECK)
        drawn = []
        for _ in range(count):
            if not available:
                break
            index = self.rng.randrange(len(available))
            card = available[index]
            drawn.append(DrawnCard(card=card, is_reversed=self.rng.random() < REVERSAL_PROBABILITY))
            if avoid_duplicates:
                available.pop(index)
        return drawn

    def create_reading(self, spread: str = 'three-card', on_date: Optional[date] = None) -> Reading:
        if spread not in TAROT_SPREADS:
            raise GuidanceError(f"Unknown tarot spread: {spread}")

        positions = TAROT_SPREADS[spread]['positions']
        cards = self.draw_cards(len(positions))
        for card, position in zip(cards, positions):
            card.position = position

        logger.debug("Drew %s spread: %s", spread, [card.card.id for card in cards])
        return Reading(
            spread=spread,
            date=on_date or date.today(),
            cards=cards,
            interpretation=self.interpret(cards, spread),
            action_items=self.action_items(cards),
        )

    def get_daily_card(self) -> DrawnCard:
        card = self.draw_cards(1)[0]
        card.position = 'Daily Guidance'
        return card

    @staticmethod
    def interpret(cards: List[DrawnCard], spread: str) -> str:
        if spread == 'single':
            card = cards[0]
            suffix = ' (reversed)' if card.is_reversed else ''
            return f"The {card.name}{suffix} suggests {card.relevant_meaning.lower()}. {card.relevant_advice}"

        if spread == 'three-card':
            past, present, future = cards[:3]

            def label(card):
                return f"{card.name}{' reversed' if card.is_reversed else ''}"

            return (
                f"Your career foundation ({label(past)}) shows {past.relevant_meaning.lower()}. "
                f"Currently ({label(present)}), you're facing {present.relevant_meaning.lower()}. "
                f"Looking ahead ({label(future)}), the cards suggest {future.relevant_meaning.lower()}. "
                f"{present.relevant_advice}"
            )

        positive = [
            card for card in cards
            if not card.is_reversed and POSITIVE_KEYWORDS.intersection(card.card.keywords)
        ]
        challenging = [
            card for card in cards
            if card.is_reversed or CHALLENGING_KEYWORDS.intersection(card.card.keywords)
        ]

        if len(positive) > len(challenging):
            return (
                'The cards show a generally positive outlook for your career. '
                'Focus on leveraging your strengths and embracing new opportunities.'
            )
        if len(challenging) > len(positive):
            return (
                'The cards indicate some challenges ahead, but these are opportunities for growth. '
                'Approach your career with patience and wisdom.'
            )
        return (
            'The cards show a balanced energy in your career. '
            'Success will come through careful planning and adaptability.'
        )

    @staticmethod
    def action_items(cards: List[DrawnCard]) -> List[str]:
        actions: List[str] = []

        def add(action):
            if action not in actions:
                actions.append(action)

        for card in cards:
            for keyword, action in KEYWORD_ACTIONS:
                if keyword in card.card.keywords:
                    add(action)
            if card.is_reversed:
                add(REVERSED_ACTION)

        if len(actions) < 2:
            for action in DEFAULT_ACTIONS:
                add(action)

        return actions[:MAX_ACTION_ITEMS]
