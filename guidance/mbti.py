"""
MBTI personality reference data and career matching weights.
"""
from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class CognitiveFunctions:
    dominant: str
    auxiliary: str
    tertiary: str
    inferior: str


@dataclass(frozen=True)
class MBTIType:
    code: str
    name: str
    description: str
    cognitive_functions: CognitiveFunctions
    work_style: List[str]
    ideal_job_environment: List[str]
    career_strengths: List[str]
    career_challenges: List[str]
    preferred_roles: List[str]
    communication_style: str
    decision_making: str
    stress_management: str


def _functions(dominant, auxiliary, tertiary, inferior):
    return CognitiveFunctions(dominant, auxiliary, tertiary, inferior)


MBTI_TYPES: Dict[str, MBTIType] = {
    'INTJ': MBTIType(
        code='INTJ',
        name='The Architect',
        description='Strategic, analytical, and innovative. Natural leaders who focus on systems and long-term planning.',
        cognitive_functions=_functions(
            'Introverted Intuition (Ni)', 'Extraverted Thinking (Te)',
            'Introverted Feeling (Fi)', 'Extraverted Sensing (Se)',
        ),
        work_style=['Independent', 'Strategic', 'Long-term focused', 'Systems thinking'],
        ideal_job_environment=['Autonomous', 'Intellectually challenging', 'Results-oriented', 'Minimal micromanagement'],
        career_strengths=['Strategic planning', 'Systems design', 'Independent work', 'Complex problem solving'],
        career_challenges=['Team collaboration', 'Routine tasks', 'Micromanagement', 'Networking'],
        preferred_roles=['Technology', 'Strategy', 'Research', 'Engineering', 'Data Science'],
        communication_style='Direct and concise, prefers written communication',
        decision_making='Logical and data-driven with long-term perspective',
        stress_management='Needs alone time and autonomy to recharge',
    ),
    'INTP': MBTIType(
        code='INTP',
        name='The Thinker',
        description='Logical, innovative, and analytical. Love theoretical concepts and abstract thinking.',
        cognitive_functions=_functions(
            'Introverted Thinking (Ti)', 'Extraverted Intuition (Ne)',
            'Introverted Sensing (Si)', 'Extraverted Feeling (Fe)',
        ),
        work_style=['Analytical', 'Flexible', 'Theory-focused', 'Independent'],
        ideal_job_environment=['Research-oriented', 'Flexible schedules', 'Intellectual freedom', 'Minimal bureaucracy'],
        career_strengths=['Research and analysis', 'Innovation', 'Problem solving', 'Technical expertise'],
        career_challenges=['Administrative tasks', 'Strict deadlines', 'People management', 'Detail implementation'],
        preferred_roles=['Research', 'Technology', 'Academia', 'Data Science', 'Engineering'],
        communication_style='Logical and precise, enjoys intellectual debates',
        decision_making='Thorough analysis with focus on logical consistency',
        stress_management='Needs intellectual stimulation and freedom to explore ideas',
    ),
    'ENTJ': MBTIType(
        code='ENTJ',
        name='The Commander',
        description='Natural leaders who are driven, decisive, and strategic in achieving goals.',
        cognitive_functions=_functions(
            'Extraverted Thinking (Te)', 'Introverted Intuition (Ni)',
            'Extraverted Sensing (Se)', 'Introverted Feeling (Fi)',
        ),
        work_style=['Leadership-oriented', 'Goal-driven', 'Efficient', 'Strategic'],
        ideal_job_environment=['Leadership opportunities', 'Goal-oriented', 'Fast-paced', 'Results-focused'],
        career_strengths=['Leadership', 'Strategic planning', 'Goal achievement', 'Team building'],
        career_challenges=['Patience with details', 'Emotional considerations', 'Routine maintenance', 'Being micromanaged'],
        preferred_roles=['Leadership', 'Business Development', 'Strategy', 'Operations', 'Consulting'],
        communication_style='Direct and assertive, focuses on results',
        decision_making='Quick and decisive with strategic focus',
        stress_management='Needs challenge and authority to thrive',
    ),
    'ENTP': MBTIType(
        code='ENTP',
        name='The Debater',
        description='Innovative, energetic, and enthusiastic. Love generating new ideas and possibilities.',
        cognitive_functions=_functions(
            'Extraverted Intuition (Ne)', 'Introverted Thinking (Ti)',
            'Extraverted Feeling (Fe)', 'Introverted Sensing (Si)',
        ),
        work_style=['Creative', 'Energetic', 'Adaptable', 'Idea-focused'],
        ideal_job_environment=['Dynamic', 'Creative freedom', 'Variety', 'Intellectual stimulation'],
        career_strengths=['Innovation', 'Brainstorming', 'Adaptability', 'Communication'],
        career_challenges=['Routine tasks', 'Detail work', 'Follow-through', 'Rigid structures'],
        preferred_roles=['Marketing', 'Innovation', 'Business Development', 'Consulting', 'Product Management'],
        communication_style='Enthusiastic and persuasive, enjoys brainstorming',
        decision_making='Considers multiple options and possibilities',
        stress_management='Needs variety and creative outlets',
    ),
    'INFJ': MBTIType(
        code='INFJ',
        name='The Advocate',
        description='Empathetic, insightful, and driven by values. Focus on helping others and meaningful work.',
        cognitive_functions=_functions(
            'Introverted Intuition (Ni)', 'Extraverted Feeling (Fe)',
            'Introverted Thinking (Ti)', 'Extraverted Sensing (Se)',
        ),
        work_style=['Purpose-driven', 'Empathetic', 'Insightful', 'Perfectionist'],
        ideal_job_environment=['Meaningful work', 'Harmonious team', 'Autonomy', 'Growth opportunities'],
        career_strengths=['Empathy', 'Insight', 'Writing', 'Counseling'],
        career_challenges=['Conflict', 'Criticism', 'Routine tasks', 'High-pressure environments'],
        preferred_roles=['Human Resources', 'Counseling', 'Education', 'Healthcare', 'Writing'],
        communication_style='Thoughtful and empathetic, prefers one-on-one',
        decision_making='Values-based with consideration for others',
        stress_management='Needs quiet time and meaningful connections',
    ),
    'INFP': MBTIType(
        code='INFP',
        name='The Mediator',
        description='Creative, idealistic, and driven by personal values. Seek harmony and authenticity.',
        cognitive_functions=_functions(
            'Introverted Feeling (Fi)', 'Extraverted Intuition (Ne)',
            'Introverted Sensing (Si)', 'Extraverted Thinking (Te)',
        ),
        work_style=['Values-driven', 'Creative', 'Flexible', 'Independent'],
        ideal_job_environment=['Creative freedom', 'Values alignment', 'Flexible schedule', 'Supportive team'],
        career_strengths=['Creativity', 'Empathy', 'Authenticity', 'Adaptability'],
        career_challenges=['Criticism', 'Conflict', 'Strict deadlines', 'Bureaucracy'],
        preferred_roles=['Creative Industries', 'Writing', 'Counseling', 'Social Work', 'Design'],
        communication_style='Gentle and authentic, values harmony',
        decision_making='Values-based with personal authenticity focus',
        stress_management='Needs creative expression and value alignment',
    ),
    'ENFJ': MBTIType(
        code='ENFJ',
        name='The Protagonist',
        description='Charismatic, empathetic leaders who inspire and develop others.',
        cognitive_functions=_functions(
            'Extraverted Feeling (Fe)', 'Introverted Intuition (Ni)',
            'Extraverted Sensing (Se)', 'Introverted Thinking (Ti)',
        ),
        work_style=['People-focused', 'Inspirational', 'Organized', 'Collaborative'],
        ideal_job_environment=['Team-oriented', 'Development opportunities', 'People interaction', 'Positive culture'],
        career_strengths=['Leadership', 'Team development', 'Communication', 'Motivation'],
        career_challenges=['Criticism', 'Conflict resolution', 'Detail work', 'Saying no'],
        preferred_roles=['Human Resources', 'Education', 'Training', 'Team Leadership', 'Counseling'],
        communication_style='Warm and encouraging, focuses on people',
        decision_making='Considers impact on people and relationships',
        stress_management='Needs social connection and positive feedback',
    ),
    'ENFP': MBTIType(
        code='ENFP',
        name='The Campaigner',
        description='Enthusiastic, creative, and people-focused. Love exploring possibilities and inspiring others.',
        cognitive_functions=_functions(
            'Extraverted Intuition (Ne)', 'Introverted Feeling (Fi)',
            'Extraverted Thinking (Te)', 'Introverted Sensing (Si)',
        ),
        work_style=['Enthusiastic', 'Creative', 'People-oriented', 'Flexible'],
        ideal_job_environment=['Creative freedom', 'People interaction', 'Variety', 'Positive atmosphere'],
        career_strengths=['Innovation', 'Motivation', 'Communication', 'Adaptability'],
        career_challenges=['Routine tasks', 'Detail work', 'Follow-through', 'Criticism'],
        preferred_roles=['Marketing', 'Sales', 'Training', 'Creative Industries', 'Human Resources'],
        communication_style='Enthusiastic and inspiring, builds rapport easily',
        decision_making='Considers people impact and creative possibilities',
        stress_management='Needs variety and social interaction',
    ),
    'ISTJ': MBTIType(
        code='ISTJ',
        name='The Logistician',
        description='Practical, responsible, and detail-oriented. Value tradition and systematic approaches.',
        cognitive_functions=_functions(
            'Introverted Sensing (Si)', 'Extraverted Thinking (Te)',
            'Introverted Feeling (Fi)', 'Extraverted Intuition (Ne)',
        ),
        work_style=['Systematic', 'Reliable', 'Detail-oriented', 'Traditional'],
        ideal_job_environment=['Structured', 'Clear expectations', 'Stable', 'Organized'],
        career_strengths=['Organization', 'Reliability', 'Attention to detail', 'Planning'],
        career_challenges=['Rapid change', 'Ambiguity', 'Innovation pressure', 'Risk-taking'],
        preferred_roles=['Operations', 'Finance', 'Administration', 'Legal', 'Project Management'],
        communication_style='Clear and factual, prefers structured meetings',
        decision_making='Methodical with focus on proven approaches',
        stress_management='Needs structure and predictability',
    ),
    'ISFJ': MBTIType(
        code='ISFJ',
        name='The Protector',
        description='Caring, reliable, and detail-oriented. Focus on supporting others and maintaining harmony.',
        cognitive_functions=_functions(
            'Introverted Sensing (Si)', 'Extraverted Feeling (Fe)',
            'Introverted Thinking (Ti)', 'Extraverted Intuition (Ne)',
        ),
        work_style=['Supportive', 'Reliable', 'Detail-oriented', 'Service-focused'],
        ideal_job_environment=['Supportive team', 'Clear structure', 'Service-oriented', 'Harmonious'],
        career_strengths=['Support', 'Reliability', 'Attention to detail', 'Empathy'],
        career_challenges=['Conflict', 'Criticism', 'Self-promotion', 'Change'],
        preferred_roles=['Healthcare', 'Education', 'Human Resources', 'Customer Service', 'Administration'],
        communication_style='Gentle and supportive, avoids conflict',
        decision_making='Considers impact on others and established practices',
        stress_management='Needs appreciation and stable environment',
    ),
    'ESTJ': MBTIType(
        code='ESTJ',
        name='The Executive',
        description='Organized, practical leaders who focus on efficiency and results.',
        cognitive_functions=_functions(
            'Extraverted Thinking (Te)', 'Introverted Sensing (Si)',
            'Extraverted Intuition (Ne)', 'Introverted Feeling (Fi)',
        ),
        work_style=['Leadership-oriented', 'Organized', 'Results-focused', 'Traditional'],
        ideal_job_environment=['Structured', 'Leadership opportunities', 'Clear goals', 'Efficient processes'],
        career_strengths=['Leadership', 'Organization', 'Efficiency', 'Goal achievement'],
        career_challenges=['Flexibility', 'Innovation', 'Emotional considerations', 'Ambiguity'],
        preferred_roles=['Management', 'Operations', 'Sales', 'Business Development', 'Finance'],
        communication_style='Direct and authoritative, focuses on results',
        decision_making='Quick and decisive with practical focus',
        stress_management='Needs clear authority and achievable goals',
    ),
    'ESFJ': MBTIType(
        code='ESFJ',
        name='The Consul',
        description='Caring, organized, and people-focused. Excel at supporting others and building relationships.',
        cognitive_functions=_functions(
            'Extraverted Feeling (Fe)', 'Introverted Sensing (Si)',
            'Extraverted Intuition (Ne)', 'Introverted Thinking (Ti)',
        ),
        work_style=['People-focused', 'Organized', 'Supportive', 'Traditional'],
        ideal_job_environment=['Team-oriented', 'People interaction', 'Structured', 'Positive culture'],
        career_strengths=['People skills', 'Organization', 'Support', 'Team building'],
        career_challenges=['Criticism', 'Conflict', 'Technical details', 'Impersonal decisions'],
        preferred_roles=['Human Resources', 'Customer Service', 'Healthcare', 'Education', 'Event Planning'],
        communication_style='Warm and personal, builds relationships',
        decision_making='Considers people impact and group harmony',
        stress_management='Needs social support and positive feedback',
    ),
    'ISTP': MBTIType(
        code='ISTP',
        name='The Virtuoso',
        description='Practical, hands-on problem solvers who value efficiency and independence.',
        cognitive_functions=_functions(
            'Introverted Thinking (Ti)', 'Extraverted Sensing (Se)',
            'Introverted Intuition (Ni)', 'Extraverted Feeling (Fe)',
        ),
        work_style=['Hands-on', 'Independent', 'Practical', 'Flexible'],
        ideal_job_environment=['Independent work', 'Practical tasks', 'Flexible schedule', 'Minimal meetings'],
        career_strengths=['Problem solving', 'Technical skills', 'Adaptability', 'Crisis management'],
        career_challenges=['Long-term planning', 'Team meetings', 'Emotional expression', 'Routine'],
        preferred_roles=['Engineering', 'Technology', 'Trades', 'Operations', 'Troubleshooting'],
        communication_style='Direct and practical, prefers action over discussion',
        decision_making='Logical and practical with immediate focus',
        stress_management='Needs hands-on work and independence',
    ),
    'ISFP': MBTIType(
        code='ISFP',
        name='The Adventurer',
        description='Gentle, creative, and values-driven. Seek harmony and authentic expression.',
        cognitive_functions=_functions(
            'Introverted Feeling (Fi)', 'Extraverted Sensing (Se)',
            'Introverted Intuition (Ni)', 'Extraverted Thinking (Te)',
        ),
        work_style=['Creative', 'Flexible', 'Values-driven', 'Independent'],
        ideal_job_environment=['Creative freedom', 'Values alignment', 'Flexible', 'Low conflict'],
        career_strengths=['Creativity', 'Empathy', 'Adaptability', 'Aesthetics'],
        career_challenges=['Criticism', 'Conflict', 'Pressure', 'Structure'],
        preferred_roles=['Design', 'Arts', 'Healthcare', 'Counseling', 'Social Work'],
        communication_style='Gentle and authentic, avoids confrontation',
        decision_making='Values-based with personal impact consideration',
        stress_management='Needs creative expression and harmony',
    ),
    'ESTP': MBTIType(
        code='ESTP',
        name='The Entrepreneur',
        description='Energetic, pragmatic, and adaptable. Excel in dynamic environments and real-time problem solving.',
        cognitive_functions=_functions(
            'Extraverted Sensing (Se)', 'Introverted Thinking (Ti)',
            'Extraverted Feeling (Fe)', 'Introverted Intuition (Ni)',
        ),
        work_style=['Energetic', 'Practical', 'Adaptable', 'Action-oriented'],
        ideal_job_environment=['Dynamic', 'People interaction', 'Variety', 'Fast-paced'],
        career_strengths=['Adaptability', 'Crisis management', 'People skills', 'Practical solutions'],
        career_challenges=['Long-term planning', 'Detailed analysis', 'Routine', 'Abstract concepts'],
        preferred_roles=['Sales', 'Business Development', 'Operations', 'Customer Service', 'Emergency Services'],
        communication_style='Energetic and persuasive, focuses on immediate needs',
        decision_making='Quick and practical with immediate focus',
        stress_management='Needs action and variety',
    ),
    'ESFP': MBTIType(
        code='ESFP',
        name='The Entertainer',
        description='Enthusiastic, creative, and people-focused. Bring energy and positivity to everything they do.',
        cognitive_functions=_functions(
            'Extraverted Sensing (Se)', 'Introverted Feeling (Fi)',
            'Extraverted Thinking (Te)', 'Introverted Intuition (Ni)',
        ),
        work_style=['Enthusiastic', 'People-oriented', 'Creative', 'Flexible'],
        ideal_job_environment=['People interaction', 'Positive atmosphere', 'Creative freedom', 'Variety'],
        career_strengths=['Enthusiasm', 'People skills', 'Creativity', 'Adaptability'],
        career_challenges=['Criticism', 'Conflict', 'Long-term planning', 'Detail work'],
        preferred_roles=['Entertainment', 'Sales', 'Marketing', 'Customer Service', 'Event Planning'],
        communication_style='Warm and enthusiastic, focuses on people and experiences',
        decision_making='People-focused with emphasis on immediate impact',
        stress_management='Needs social interaction and positive environment',
    ),
}

MBTI_CODES = list(MBTI_TYPES)

MBTI_CHOICES = [(code, f"{code} - {mbti.name}") for code, mbti in MBTI_TYPES.items()]

# Category affinity per type, 0-100. Categories not listed score the neutral 50.
MBTI_JOB_WEIGHTS: Dict[str, Dict[str, int]] = {
    'INTJ': {
        'Technology': 90, 'Data Science': 85, 'Engineering': 85, 'Consulting': 75,
        'Finance': 70, 'Product Management': 80, 'Research': 85,
    },
    'INTP': {
        'Technology': 85, 'Data Science': 90, 'Research': 90, 'Engineering': 80,
        'Academia': 85, 'Product Management': 70,
    },
    'ENTJ': {
        'Business Development': 90, 'Consulting': 85, 'Operations': 85, 'Finance': 80,
        'Product Management': 85, 'Sales': 75,
    },
    'ENTP': {
        'Marketing': 90, 'Business Development': 85, 'Product Management': 85, 'Consulting': 80,
        'Sales': 80, 'Technology': 75,
    },
    'INFJ': {
        'Human Resources': 85, 'Education': 85, 'Healthcare': 80, 'Counseling': 90, 'Writing': 80,
    },
    'INFP': {
        'Design': 85, 'Writing': 90, 'Counseling': 85, 'Arts': 90, 'Social Work': 80, 'Marketing': 70,
    },
    'ENFJ': {
        'Human Resources': 90, 'Education': 90, 'Training': 85, 'Counseling': 85, 'Healthcare': 75,
    },
    'ENFP': {
        'Marketing': 85, 'Sales': 85, 'Human Resources': 80, 'Training': 80, 'Design': 75,
        'Business Development': 75,
    },
    'ISTJ': {
        'Finance': 90, 'Operations': 85, 'Administrative': 90, 'Legal': 85, 'Engineering': 75,
    },
    'ISFJ': {
        'Healthcare': 85, 'Education': 80, 'Human Resources': 85, 'Customer Service': 85,
        'Administrative': 80,
    },
    'ESTJ': {
        'Operations': 90, 'Sales': 85, 'Finance': 80, 'Business Development': 80, 'Administrative': 75,
    },
    'ESFJ': {
        'Human Resources': 90, 'Customer Service': 85, 'Healthcare': 80, 'Education': 80,
        'Event Planning': 85,
    },
    'ISTP': {
        'Engineering': 90, 'Technology': 85, 'Operations': 80, 'Trades': 90,
    },
    'ISFP': {
        'Design': 90, 'Arts': 85, 'Healthcare': 75, 'Counseling': 80, 'Social Work': 75,
    },
    'ESTP': {
        'Sales': 90, 'Business Development': 85, 'Operations': 80, 'Customer Service': 80,
        'Emergency Services': 85,
    },
    'ESFP': {
        'Entertainment': 90, 'Sales': 85, 'Marketing': 80, 'Customer Service': 85, 'Event Planning': 85,
    },
}

NEUTRAL_MATCH = 50


def get_mbti_type(code: str):
    return MBTI_TYPES.get((code or '').upper())


def get_mbti_job_match(mbti_type: str, job_category: str) -> int:
    weights = MBTI_JOB_WEIGHTS.get(mbti_type)
    if not weights:
        return NEUTRAL_MATCH
    return weights.get(job_category, NEUTRAL_MATCH)


def get_mbti_career_advice(mbti_type: str) -> List[str]:
    personality = MBTI_TYPES.get(mbti_type)
    if personality is None:
        return ['Focus on your strengths and interests']

    return [
        f"Leverage your {personality.career_strengths[0].lower()} skills",
        f"Seek roles that offer {personality.ideal_job_environment[0].lower()}",
        f"Be aware of challenges with {personality.career_challenges[0].lower()}",
        f"Consider positions in {' or '.join(personality.preferred_roles[:2])}",
    ]
