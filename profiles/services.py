"""
Profile Service Layer
Handles validation of profile updates and conversion into the matching
engine's view of a job seeker.
"""
import logging
from datetime import date
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

from guidance.mbti import MBTI_TYPES
from guidance.zodiac import validate_birth_date
from jobs.catalog import COMPANY_SIZES, EXPERIENCE_LEVELS, JOB_CATEGORIES, JOB_TYPES, WORK_MODELS
from jobs.matching import MatchingProfile, SalaryExpectation
from .models import JobSeekerProfile

logger = logging.getLogger(__name__)


TEXT_FIELDS = ['current_title', 'bio', 'location']
URL_FIELDS = ['website', 'linkedin_url', 'github_url']
FREE_LIST_FIELDS = ['skills', 'interests', 'preferred_locations']
BOOLEAN_FIELDS = [
    'willing_to_relocate',
    'prefer_remote',
    'prioritize_salary',
    'prioritize_growth',
    'prioritize_work_life_balance',
]
CHOICE_LIST_FIELDS = {
    'preferred_job_types': [value for value, _ in JOB_TYPES],
    'preferred_work_models': [value for value, _ in WORK_MODELS],
    'preferred_categories': list(JOB_CATEGORIES),
    'preferred_company_sizes': [value for value, _ in COMPANY_SIZES],
}
LEVEL_VALUES = [value for value, _ in EXPERIENCE_LEVELS]
CAREER_STAGE_VALUES = [value for value, _ in JobSeekerProfile.CAREER_STAGE_CHOICES]


def _parse_salary(name: str, value, errors: List[str]) -> Optional[int]:
    if value in (None, ''):
        return None
    try:
        amount = int(value)
    except (TypeError, ValueError):
        errors.append(f"{name} must be a whole number")
        return None
    if amount < 0:
        errors.append(f"{name} cannot be negative")
        return None
    return amount


class ProfileService:
    """Service for reading and updating job seeker profiles."""

    @staticmethod
    def get_or_create_profile(user) -> JobSeekerProfile:
        profile, created = JobSeekerProfile.objects.get_or_create(user=user)
        if created:
            logger.info("Created profile for user %s", user.pk)
        return profile

    @staticmethod
    def validate_profile_data(data: Dict) -> Dict:
        """
        Validate a (possibly partial) profile update.

        Args:
            data: Field values keyed by profile field name

        Returns:
            Cleaned data containing only the supplied fields

        Raises:
            ValidationError: If any field is invalid; carries every message
        """
        errors = []
        cleaned = {}

        for name in TEXT_FIELDS:
            if name in data:
                cleaned[name] = (data[name] or '').strip()

        url_validator = URLValidator()
        for name in URL_FIELDS:
            if name in data:
                url = (data[name] or '').strip()
                if url:
                    try:
                        url_validator(url)
                    except ValidationError:
                        errors.append(f"{name} must be a valid URL")
                        continue
                cleaned[name] = url

        if 'experience_level' in data:
            level = data['experience_level'] or ''
            if level and level not in LEVEL_VALUES:
                errors.append(f"experience_level must be one of: {', '.join(LEVEL_VALUES)}")
            else:
                cleaned['experience_level'] = level

        if 'career_stage' in data:
            stage = data['career_stage'] or 'job-seeking'
            if stage not in CAREER_STAGE_VALUES:
                errors.append(f"career_stage must be one of: {', '.join(CAREER_STAGE_VALUES)}")
            else:
                cleaned['career_stage'] = stage

        for name in FREE_LIST_FIELDS:
            if name in data:
                values = data[name] or []
                if not isinstance(values, list):
                    errors.append(f"{name} must be a list")
                    continue
                cleaned[name] = [str(value).strip() for value in values if str(value).strip()]

        for name, allowed in CHOICE_LIST_FIELDS.items():
            if name in data:
                values = data[name] or []
                if not isinstance(values, list):
                    errors.append(f"{name} must be a list")
                    continue
                invalid = [value for value in values if value not in allowed]
                if invalid:
                    errors.append(f"Invalid {name}: {', '.join(str(value) for value in invalid)}")
                    continue
                cleaned[name] = values

        for name in BOOLEAN_FIELDS:
            if name in data:
                cleaned[name] = bool(data[name])

        if 'salary_min' in data:
            cleaned['salary_min'] = _parse_salary('salary_min', data['salary_min'], errors)
        if 'salary_max' in data:
            cleaned['salary_max'] = _parse_salary('salary_max', data['salary_max'], errors)
        salary_min = cleaned.get('salary_min')
        salary_max = cleaned.get('salary_max')
        if salary_min is not None and salary_max is not None and salary_min > salary_max:
            errors.append("salary_min cannot be greater than salary_max")

        if 'salary_currency' in data:
            currency = (data['salary_currency'] or 'USD').strip().upper()
            if len(currency) != 3:
                errors.append("salary_currency must be a 3-letter code")
            else:
                cleaned['salary_currency'] = currency

        if errors:
            raise ValidationError(errors)
        return cleaned

    @staticmethod
    def update_profile(user, data: Dict) -> JobSeekerProfile:
        """
        Apply a validated update and refresh the user's completeness flag.

        Raises:
            ValidationError: If validation fails (nothing is saved)
        """
        profile = ProfileService.get_or_create_profile(user)
        if 'salary_min' in data or 'salary_max' in data:
            data = dict(data)
            # salary bounds are checked as a pair
            data.setdefault('salary_min', profile.salary_min)
            data.setdefault('salary_max', profile.salary_max)
        cleaned = ProfileService.validate_profile_data(data)
        for attr, value in cleaned.items():
            setattr(profile, attr, value)
        profile.save()

        if profile.is_complete and not user.profile_complete:
            user.profile_complete = True
            user.save(update_fields=['profile_complete'])
            logger.info("Profile completed for user %s", user.pk)

        return profile

    @staticmethod
    def update_personal_details(user, birth_date, mbti_type: str):
        """
        Change the user's birth date (and so their zodiac sign) and MBTI type.

        Raises:
            ValidationError: If either value is invalid (nothing is saved)
        """
        errors = []
        parsed = None
        if birth_date not in (None, ''):
            error = validate_birth_date(birth_date)
            if error:
                errors.append(error)
            else:
                parsed = birth_date if isinstance(birth_date, date) else date.fromisoformat(str(birth_date))

        mbti_type = (mbti_type or '').strip().upper()
        if mbti_type and mbti_type not in MBTI_TYPES:
            errors.append(f"Unknown MBTI type: {mbti_type}")

        if errors:
            raise ValidationError(errors)

        user.birth_date = parsed
        user.mbti_type = mbti_type
        if parsed is None:
            user.zodiac_sign = ''
        user.save(update_fields=['birth_date', 'mbti_type', 'zodiac_sign'])
        return user

    @staticmethod
    def build_matching_profile(user) -> MatchingProfile:
        """Matching view of the user; an empty profile when none exists yet."""
        profile = JobSeekerProfile.objects.filter(user=user).first()
        if profile is None:
            return MatchingProfile(zodiac_sign=user.zodiac_sign or '', mbti_type=user.mbti_type or '')

        expectation = None
        if profile.has_salary_expectation:
            expectation = SalaryExpectation(
                min=profile.salary_min,
                max=profile.salary_max,
                currency=profile.salary_currency,
            )

        return MatchingProfile(
            experience_level=profile.experience_level,
            preferred_job_types=list(profile.preferred_job_types),
            preferred_work_models=list(profile.preferred_work_models),
            preferred_locations=list(profile.preferred_locations),
            salary_expectation=expectation,
            skills=list(profile.skills),
            interests=list(profile.interests),
            preferred_categories=list(profile.preferred_categories),
            preferred_company_sizes=list(profile.preferred_company_sizes),
            willing_to_relocate=profile.willing_to_relocate,
            prefer_remote=profile.prefer_remote,
            prioritize_salary=profile.prioritize_salary,
            prioritize_growth=profile.prioritize_growth,
            prioritize_work_life_balance=profile.prioritize_work_life_balance,
            zodiac_sign=user.zodiac_sign or '',
            mbti_type=user.mbti_type or '',
        )
