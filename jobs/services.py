"""
Jobs service layer

Search over the mock catalog plus the per-user bookmark and search-history
bookkeeping used by the job pages and the API.
"""
import logging
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import QueryDict

from .catalog import MOCK_JOBS, Job
from .models import SavedJob, SearchHistory

logger = logging.getLogger(__name__)


DATE_POSTED_WINDOWS = {
    'today': 1,
    'week': 7,
    'month': 30,
}

LIST_FILTERS = ['job_type', 'experience', 'work_model', 'category', 'company', 'company_size']


def _parse_int(value) -> Optional[int]:
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_bool(value) -> bool:
    return str(value).strip().lower() in ('1', 'true', 'on', 'yes')


@dataclass
class JobSearchFilters:
    """
    Search criteria. Empty values mean "no constraint".
    """

    query: str = ''
    location: str = ''
    job_type: List[str] = field(default_factory=list)
    experience: List[str] = field(default_factory=list)
    work_model: List[str] = field(default_factory=list)
    category: List[str] = field(default_factory=list)
    company: List[str] = field(default_factory=list)
    company_size: List[str] = field(default_factory=list)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    date_posted: str = 'all'
    featured: bool = False
    urgent: bool = False

    @classmethod
    def from_query_params(cls, params: QueryDict) -> 'JobSearchFilters':
        """Build filters from GET parameters; list filters may repeat."""
        filters = cls(
            query=(params.get('query') or '').strip(),
            location=(params.get('location') or '').strip(),
            salary_min=_parse_int(params.get('salary_min')),
            salary_max=_parse_int(params.get('salary_max')),
            date_posted=params.get('date_posted') or 'all',
            featured=_parse_bool(params.get('featured')),
            urgent=_parse_bool(params.get('urgent')),
        )
        for name in LIST_FILTERS:
            values = [value.strip() for value in params.getlist(name) if value.strip()]
            setattr(filters, name, values)
        return filters

    @classmethod
    def from_dict(cls, data: Dict) -> 'JobSearchFilters':
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    def to_query_params(self) -> QueryDict:
        params = QueryDict(mutable=True)
        for key, value in self.to_dict().items():
            if isinstance(value, list):
                if value:
                    params.setlist(key, value)
            elif isinstance(value, bool):
                if value:
                    params[key] = 'true'
            elif value not in (None, '', 'all'):
                params[key] = str(value)
        return params

    def is_empty(self) -> bool:
        return not self.to_query_params()


class JobSearchEngine:
    """Filtering and lookup over the catalog. The catalog is never mutated."""

    @staticmethod
    def all_jobs() -> List[Job]:
        return list(MOCK_JOBS)

    @staticmethod
    def search_jobs(filters: Optional[JobSearchFilters] = None, today: Optional[date] = None) -> List[Job]:
        """
        Return the catalog jobs that satisfy every present filter.

        Args:
            filters: Search criteria; None returns the full catalog.
            today: Reference date for the ``date_posted`` window.
        """
        filters = filters or JobSearchFilters()
        jobs = JobSearchEngine.all_jobs()

        if filters.query:
            query = filters.query.lower()
            jobs = [
                job for job in jobs
                if query in job.title.lower()
                or query in job.company.lower()
                or query in job.description.lower()
                or any(query in tag.lower() for tag in job.tags)
            ]

        if filters.location:
            location = filters.location.lower()
            jobs = [
                job for job in jobs
                if location in job.location.city.lower()
                or location in job.location.state.lower()
                or (job.location.remote and 'remote' in location)
            ]

        if filters.job_type:
            jobs = [job for job in jobs if job.job_type in filters.job_type]

        if filters.experience:
            jobs = [job for job in jobs if job.experience in filters.experience]

        if filters.work_model:
            jobs = [job for job in jobs if job.work_model in filters.work_model]

        if filters.salary_min:
            jobs = [job for job in jobs if job.salary.max >= filters.salary_min]

        if filters.salary_max:
            jobs = [job for job in jobs if job.salary.min <= filters.salary_max]

        if filters.category:
            jobs = [job for job in jobs if job.category in filters.category]

        if filters.company:
            jobs = [job for job in jobs if job.company in filters.company]

        window = DATE_POSTED_WINDOWS.get(filters.date_posted)
        if window:
            cutoff = (today or date.today()) - timedelta(days=window)
            jobs = [job for job in jobs if job.posted_date >= cutoff]

        if filters.company_size:
            jobs = [job for job in jobs if job.company_size in filters.company_size]

        if filters.featured:
            jobs = [job for job in jobs if job.featured]

        if filters.urgent:
            jobs = [job for job in jobs if job.is_urgent]

        return jobs

    @staticmethod
    def get_job_by_id(job_id: str) -> Optional[Job]:
        for job in MOCK_JOBS:
            if job.id == job_id:
                return job
        return None

    @staticmethod
    def get_featured_jobs(limit: int = 6) -> List[Job]:
        return [job for job in MOCK_JOBS if job.featured][:limit]

    @staticmethod
    def get_recent_jobs(limit: int = 10) -> List[Job]:
        return sorted(MOCK_JOBS, key=lambda job: job.posted_date, reverse=True)[:limit]

    @staticmethod
    def get_jobs_by_category(category: str, limit: int = 6) -> List[Job]:
        return [job for job in MOCK_JOBS if job.category == category][:limit]

    @staticmethod
    def get_job_stats() -> Dict[str, int]:
        return {
            'total_jobs': len(MOCK_JOBS),
            'featured_jobs': sum(1 for job in MOCK_JOBS if job.featured),
            'urgent_jobs': sum(1 for job in MOCK_JOBS if job.is_urgent),
            'remote_jobs': sum(1 for job in MOCK_JOBS if job.work_model == 'remote'),
            'companies_count': len({job.company for job in MOCK_JOBS}),
            'categories_count': len({job.category for job in MOCK_JOBS}),
        }


class SavedJobService:
    """Bookmarks with notes and tags, one row per user and job."""

    @staticmethod
    def _require_job(job_id: str) -> Job:
        job = JobSearchEngine.get_job_by_id(job_id)
        if job is None:
            raise ValidationError([f"Job {job_id} not found"])
        return job

    @staticmethod
    def save_job(user, job_id: str, notes: str = '', tags: Optional[List[str]] = None) -> SavedJob:
        """Bookmark a job. Saving an already saved job returns the existing row."""
        SavedJobService._require_job(job_id)
        saved, created = SavedJob.objects.get_or_create(
            user=user,
            job_id=job_id,
            defaults={'notes': notes, 'tags': SavedJobService.clean_tags(tags or [])},
        )
        if created:
            logger.info("User %s saved job %s", user.pk, job_id)
        return saved

    @staticmethod
    def unsave_job(user, job_id: str) -> bool:
        deleted, _ = SavedJob.objects.filter(user=user, job_id=job_id).delete()
        return deleted > 0

    @staticmethod
    def is_saved(user, job_id: str) -> bool:
        return SavedJob.objects.filter(user=user, job_id=job_id).exists()

    @staticmethod
    def get_saved_jobs(user):
        return SavedJob.objects.filter(user=user)

    @staticmethod
    def saved_job_ids(user) -> List[str]:
        return list(SavedJob.objects.filter(user=user).values_list('job_id', flat=True))

    @staticmethod
    def update_notes(saved_job: SavedJob, notes: str) -> SavedJob:
        saved_job.notes = (notes or '').strip()
        saved_job.save(update_fields=['notes', 'updated_at'])
        return saved_job

    @staticmethod
    def clean_tags(tags: List[str]) -> List[str]:
        cleaned = []
        for tag in tags:
            tag = (tag or '').strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return cleaned

    @staticmethod
    def add_tag(saved_job: SavedJob, tag: str) -> SavedJob:
        tag = (tag or '').strip()
        if not tag:
            raise ValidationError(["Tag cannot be empty"])
        if tag not in saved_job.tags:
            saved_job.tags = saved_job.tags + [tag]
            saved_job.save(update_fields=['tags', 'updated_at'])
        return saved_job

    @staticmethod
    def remove_tag(saved_job: SavedJob, tag: str) -> SavedJob:
        if tag in saved_job.tags:
            saved_job.tags = [existing for existing in saved_job.tags if existing != tag]
            saved_job.save(update_fields=['tags', 'updated_at'])
        return saved_job


class SearchHistoryService:
    """Recent searches, capped per user."""

    @staticmethod
    def record_search(user, filters: JobSearchFilters, result_count: int) -> Optional[SearchHistory]:
        if filters.is_empty():
            return None
        entry = SearchHistory.objects.create(
            user=user,
            query=filters.query,
            filters=filters.to_dict(),
            result_count=result_count,
        )
        limit = getattr(settings, 'SEARCH_HISTORY_LIMIT', 10)
        stale_ids = list(
            SearchHistory.objects.filter(user=user).values_list('id', flat=True)[limit:]
        )
        if stale_ids:
            SearchHistory.objects.filter(id__in=stale_ids).delete()
        return entry

    @staticmethod
    def recent_searches(user, limit: Optional[int] = None):
        limit = limit or getattr(settings, 'SEARCH_HISTORY_LIMIT', 10)
        return SearchHistory.objects.filter(user=user)[:limit]

    @staticmethod
    def delete_search(user, search_id: int) -> bool:
        deleted, _ = SearchHistory.objects.filter(user=user, id=search_id).delete()
        return deleted > 0
