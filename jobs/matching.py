"""
Job matching engine

Scores a catalog job against a job seeker's preferences. The score is a sum
of independent components (experience, job type, work model, location,
salary, skills, category, company size, bonuses, MBTI and zodiac affinity)
capped at 100. Each component also contributes human-readable reasons,
strengths, or gaps that the job pages display next to the score.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from guidance.mbti import get_mbti_job_match

from .catalog import Job, JobMatch, SalaryRange

logger = logging.getLogger(__name__)


LEVEL_ORDER = ['entry', 'junior', 'mid', 'senior', 'lead', 'executive']
URGENT_BONUS_LEVELS = {'mid', 'senior', 'lead', 'executive'}

ZODIAC_CATEGORY_AFFINITY = {
    'aries': ['Sales', 'Marketing', 'Business Development'],
    'taurus': ['Finance', 'Operations', 'Administrative'],
    'gemini': ['Marketing', 'Technology', 'Customer Service'],
    'cancer': ['Human Resources', 'Healthcare', 'Education'],
    'leo': ['Design', 'Marketing', 'Product Management'],
    'virgo': ['Technology', 'Data Science', 'Operations'],
    'libra': ['Legal', 'Human Resources', 'Design'],
    'scorpio': ['Data Science', 'Research', 'Consulting'],
    'sagittarius': ['Consulting', 'Education', 'Business Development'],
    'capricorn': ['Finance', 'Operations', 'Engineering'],
    'aquarius': ['Technology', 'Research', 'Product Management'],
    'pisces': ['Design', 'Healthcare', 'Education'],
}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative values scored here."""
    return int(math.floor(value + 0.5))


@dataclass
class SalaryExpectation:
    min: int
    max: int
    currency: str = 'USD'


@dataclass
class MatchingProfile:
    """
    Preferences the matching engine reads.

    Built from a stored profile by ``ProfileService.build_matching_profile``;
    every field is optional so a half-filled profile still scores.
    """

    experience_level: str = ''
    preferred_job_types: List[str] = field(default_factory=list)
    preferred_work_models: List[str] = field(default_factory=list)
    preferred_locations: List[str] = field(default_factory=list)
    salary_expectation: Optional[SalaryExpectation] = None
    skills: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)
    preferred_categories: List[str] = field(default_factory=list)
    preferred_company_sizes: List[str] = field(default_factory=list)
    willing_to_relocate: bool = False
    prefer_remote: bool = False
    prioritize_salary: bool = False
    prioritize_growth: bool = False
    prioritize_work_life_balance: bool = False
    zodiac_sign: str = ''
    mbti_type: str = ''


def _unique(items: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


class JobMatchingEngine:
    """Static scoring helpers; no state is kept between calls."""

    @staticmethod
    def calculate_job_match(job: Job, profile: MatchingProfile) -> JobMatch:
        score = 0
        reasons: List[str] = []
        missing: List[str] = []
        strengths: List[str] = []

        if profile.experience_level:
            experience_score = JobMatchingEngine.experience_score(job.experience, profile.experience_level)
            score += experience_score
            if experience_score > 15:
                reasons.append(f"Experience level match ({job.experience})")
                strengths.append('Experience level alignment')
            elif experience_score < 10:
                missing.append(f"May need {job.experience} level experience")

        if job.job_type in profile.preferred_job_types:
            score += 15
            reasons.append(f"Preferred job type ({job.job_type})")
            strengths.append('Job type preference match')

        if job.work_model in profile.preferred_work_models:
            score += 15
            reasons.append(f"Preferred work model ({job.work_model})")
            strengths.append('Work arrangement preference')

        if JobMatchingEngine.is_location_match(job, profile):
            score += 10
            reasons.append('Location preference match')
            strengths.append('Geographic compatibility')

        if profile.salary_expectation:
            salary_score = JobMatchingEngine.salary_score(job.salary, profile.salary_expectation)
            score += salary_score
            if salary_score > 10:
                reasons.append('Salary meets expectations')
                strengths.append('Compensation alignment')
            elif salary_score < 5:
                missing.append('Salary may be below expectations')

        if profile.skills:
            skills_score, skill_matches, skill_gaps, skill_strengths = JobMatchingEngine.skills_score(
                job.tags, job.requirements, profile.skills
            )
            score += skills_score
            reasons.extend(skill_matches)
            missing.extend(skill_gaps)
            strengths.extend(skill_strengths)

        if job.category in profile.preferred_categories:
            score += 10
            reasons.append(f"Interest in {job.category}")
            strengths.append('Industry interest alignment')

        if job.company_size in profile.preferred_company_sizes:
            score += 5
            reasons.append(f"Preferred company size ({job.company_size})")

        if job.featured:
            score += 2

        if job.is_urgent and profile.experience_level in URGENT_BONUS_LEVELS:
            score += 3
            reasons.append('Urgent hiring - quick opportunity')

        if profile.mbti_type:
            mbti_score, mbti_reason = JobMatchingEngine.mbti_score(job, profile.mbti_type)
            score += mbti_score
            if mbti_reason:
                reasons.append(mbti_reason)
                if mbti_score > 5:
                    strengths.append('MBTI personality alignment')

        if profile.zodiac_sign:
            astro_score, astro_reason = JobMatchingEngine.astrological_score(job, profile.zodiac_sign)
            score += astro_score
            if astro_reason:
                reasons.append(astro_reason)

        return JobMatch(
            job=job,
            match_score=min(round_half_up(score), 100),
            match_reasons=reasons,
            missing_skills=_unique(missing),
            strengths=_unique(strengths),
        )

    @staticmethod
    def experience_score(job_level: str, user_level: str) -> int:
        if job_level not in LEVEL_ORDER or user_level not in LEVEL_ORDER:
            return 10
        difference = abs(LEVEL_ORDER.index(job_level) - LEVEL_ORDER.index(user_level))
        if difference == 0:
            return 20
        if difference == 1:
            return 15
        if difference == 2:
            return 10
        return 5

    @staticmethod
    def is_location_match(job: Job, profile: MatchingProfile) -> bool:
        if profile.prefer_remote and job.work_model == 'remote':
            return True
        if job.location.remote and 'remote' in profile.preferred_work_models:
            return True

        job_location = job.location.display.lower()
        city = job.location.city.lower()
        state = job.location.state.lower()
        for preferred in profile.preferred_locations:
            preferred = preferred.lower()
            if preferred in job_location or preferred in city or preferred in state:
                return True
        return False

    @staticmethod
    def salary_score(salary: SalaryRange, expectation: SalaryExpectation) -> int:
        if salary.currency != expectation.currency:
            return 5

        user_range = expectation.max - expectation.min

        if salary.max >= expectation.min and salary.min <= expectation.max:
            # A single-figure expectation inside the job's range is a full match.
            if user_range <= 0:
                return 15
            overlap = min(salary.max, expectation.max) - max(salary.min, expectation.min)
            return round_half_up(15 * overlap / user_range)

        if salary.max < expectation.min:
            gap = expectation.min - salary.max
            if gap <= user_range * 0.2:
                return 8
            if gap <= user_range * 0.5:
                return 5
            return 2

        if salary.min > expectation.max:
            return 10

        return 7

    @staticmethod
    def skills_score(tags: List[str], requirements: List[str], skills: List[str]) -> Tuple[int, List[str], List[str], List[str]]:
        """
        Compare job tags and hard requirements against the user's skills.

        Returns (score, match reasons, missing requirements, strengths).
        """
        user_skills = [skill.lower() for skill in skills]
        job_tags = [tag.lower() for tag in tags]

        matches: List[str] = []
        missing: List[str] = []
        strengths: List[str] = []

        matched = 0
        for tag in job_tags:
            if any(tag in skill or skill in tag for skill in user_skills):
                matched += 1
                matches.append(f"Skill match: {tag}")
                strengths.append(tag)

        for requirement in requirements:
            requirement_lower = requirement.lower()
            first_word = requirement_lower.split(' ')[0]
            has_skill = any(
                skill in requirement_lower or first_word in skill
                for skill in user_skills
            )
            if not has_skill and ('required' in requirement_lower or 'must' in requirement_lower):
                missing.append(requirement)

        percentage = matched / len(job_tags) if job_tags else 0
        return round_half_up(15 * percentage), matches, missing, strengths

    @staticmethod
    def mbti_score(job: Job, mbti_type: str) -> Tuple[int, str]:
        weight = get_mbti_job_match(mbti_type, job.category)
        if weight >= 85:
            return 10, f"Excellent MBTI match: {mbti_type} personalities thrive in {job.category}"
        if weight >= 70:
            return 7, f"Good MBTI alignment: {mbti_type} traits suit {job.category} roles"
        if weight >= 55:
            return 4, f"Moderate MBTI fit for {job.category} position"
        return 0, ''

    @staticmethod
    def astrological_score(job: Job, zodiac_sign: str) -> Tuple[int, str]:
        categories = ZODIAC_CATEGORY_AFFINITY.get(zodiac_sign.lower(), [])
        if job.category in categories:
            return 2, f"Astrological alignment: {zodiac_sign} traits suit {job.category} roles ✨"
        return 0, ''

    @staticmethod
    def rank_jobs_by_match(jobs: Iterable[Job], profile: MatchingProfile) -> List[JobMatch]:
        matches = [JobMatchingEngine.calculate_job_match(job, profile) for job in jobs]
        # sorted() is stable, so equal scores keep catalog order
        return sorted(matches, key=lambda match: match.match_score, reverse=True)

    @staticmethod
    def get_top_matches(jobs: Iterable[Job], profile: MatchingProfile, limit: int = 10) -> List[JobMatch]:
        return JobMatchingEngine.rank_jobs_by_match(jobs, profile)[:limit]

    @staticmethod
    def get_matching_jobs(jobs: Iterable[Job], profile: MatchingProfile, min_score: int = 60) -> List[JobMatch]:
        ranked = JobMatchingEngine.rank_jobs_by_match(jobs, profile)
        logger.debug("Ranked %d jobs for matching (min_score=%s)", len(ranked), min_score)
        return [match for match in ranked if match.match_score >= min_score]

    @staticmethod
    def score_map(jobs: Iterable[Job], profile: MatchingProfile) -> Dict[str, JobMatch]:
        """Match results keyed by job id, for list pages."""
        return {job.id: JobMatchingEngine.calculate_job_match(job, profile) for job in jobs}
