"""
Application Service Layer
Handles creation, status changes, timeline bookkeeping and statistics for
job applications.
"""
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from jobs.matching import round_half_up
from jobs.services import JobSearchEngine
from .models import ApplicationTimelineEvent, JobApplication

logger = logging.getLogger(__name__)


Status = JobApplication.Status
EventType = ApplicationTimelineEvent.EventType

UPDATABLE_FIELDS = [
    'status',
    'cover_letter',
    'resume_version',
    'notes',
    'interview_dates',
    'feedback',
    'salary_expectation',
    'expected_start_date',
    'application_url',
    'contact_name',
    'contact_email',
    'contact_title',
]

STATUS_COLORS = {
    Status.APPLIED: 'primary',
    Status.REVIEWING: 'warning',
    Status.INTERVIEW_SCHEDULED: 'info',
    Status.INTERVIEW_COMPLETED: 'secondary',
    Status.OFFER: 'success',
    Status.REJECTED: 'danger',
    Status.WITHDRAWN: 'dark',
}

TIMELINE_ICONS = {
    EventType.APPLIED: '📝',
    EventType.VIEWED: '👀',
    EventType.INTERVIEW_SCHEDULED: '📅',
    EventType.INTERVIEW_COMPLETED: '✅',
    EventType.FEEDBACK_RECEIVED: '💬',
    EventType.STATUS_CHANGED: '🔄',
    EventType.NOTE_ADDED: '📋',
}

INTERVIEW_STATUSES = [Status.INTERVIEW_SCHEDULED, Status.INTERVIEW_COMPLETED]


def get_status_label(status: str) -> str:
    if status in Status.values:
        return Status(status).label
    return 'Unknown'


def get_status_color(status: str) -> str:
    return STATUS_COLORS.get(status, 'secondary')


def get_timeline_icon(event_type: str) -> str:
    return TIMELINE_ICONS.get(event_type, '📌')


def _clean_salary(value, errors: List[str]) -> Optional[int]:
    if value in (None, ''):
        return None
    try:
        amount = int(value)
    except (TypeError, ValueError):
        errors.append("Salary expectation must be a whole number")
        return None
    if amount < 0:
        errors.append("Salary expectation cannot be negative")
        return None
    return amount


def _clean_date(value, errors: List[str]) -> Optional[date]:
    if value in (None, ''):
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        errors.append("Expected start date must be in YYYY-MM-DD format")
        return None


class ApplicationService:
    """Service for tracking applications and their timelines."""

    @staticmethod
    @transaction.atomic
    def add_application(user, data: Dict) -> JobApplication:
        """
        Record a new application. The status always starts as 'applied'.

        Args:
            user: Django user instance
            data: job_id plus optional title/company and application details

        Returns:
            The created JobApplication

        Raises:
            ValidationError: Missing job, unknown job without title/company,
                bad values, or an existing application to the same job
        """
        errors = []
        job_id = str(data.get('job_id') or '').strip()
        job_title = (data.get('job_title') or '').strip()
        company = (data.get('company') or '').strip()

        if not job_id:
            errors.append("job_id is required")
        else:
            job = JobSearchEngine.get_job_by_id(job_id)
            if job is not None:
                job_title = job_title or job.title
                company = company or job.company
                data = {
                    'application_url': job.application_url or '',
                    'contact_email': job.contact_email or '',
                    **{key: value for key, value in data.items() if value not in (None, '')},
                }
            if not job_title:
                errors.append("Job title is required")
            if not company:
                errors.append("Company is required")
            if JobApplication.objects.filter(user=user, job_id=job_id).exists():
                errors.append("You have already applied to this job")

        salary_expectation = _clean_salary(data.get('salary_expectation'), errors)
        expected_start_date = _clean_date(data.get('expected_start_date'), errors)
        interview_dates = data.get('interview_dates') or []
        if not isinstance(interview_dates, list):
            errors.append("interview_dates must be a list")

        if errors:
            raise ValidationError(errors)

        now = timezone.now()
        try:
            with transaction.atomic():
                application = JobApplication.objects.create(
                    user=user,
                    job_id=job_id,
                    job_title=job_title,
                    company=company,
                    status=Status.APPLIED,
                    applied_at=now,
                    last_updated=now,
                    cover_letter=data.get('cover_letter') or '',
                    resume_version=data.get('resume_version') or '',
                    notes=data.get('notes') or '',
                    interview_dates=list(interview_dates),
                    salary_expectation=salary_expectation,
                    expected_start_date=expected_start_date,
                    application_url=data.get('application_url') or '',
                    contact_name=data.get('contact_name') or '',
                    contact_email=data.get('contact_email') or '',
                    contact_title=data.get('contact_title') or '',
                )
        except IntegrityError:
            # a concurrent request created the same application first
            raise ValidationError(["You have already applied to this job"])
        ApplicationTimelineEvent.objects.create(
            application=application,
            event_type=EventType.APPLIED,
            occurred_at=now,
            description=f"Applied for {job_title} at {company}",
            details={
                'cover_letter': application.cover_letter,
                'salary_expectation': salary_expectation,
            },
        )
        logger.info("User %s applied to job %s", user.pk, job_id)
        return application

    @staticmethod
    @transaction.atomic
    def update_application(application: JobApplication, updates: Dict) -> JobApplication:
        """
        Apply field updates. A real status change is logged on the timeline.

        Raises:
            ValidationError: Invalid status or field values
        """
        errors = []
        cleaned = {}
        for name in UPDATABLE_FIELDS:
            if name in updates:
                cleaned[name] = updates[name]

        new_status = cleaned.get('status')
        if 'status' in cleaned and new_status not in Status.values:
            errors.append(f"Invalid status: {new_status}")
        if 'salary_expectation' in cleaned:
            cleaned['salary_expectation'] = _clean_salary(cleaned['salary_expectation'], errors)
        if 'expected_start_date' in cleaned:
            cleaned['expected_start_date'] = _clean_date(cleaned['expected_start_date'], errors)
        if 'interview_dates' in cleaned and not isinstance(cleaned['interview_dates'], list):
            errors.append("interview_dates must be a list")

        if errors:
            raise ValidationError(errors)

        old_status = application.status
        for attr, value in cleaned.items():
            if value is None and attr not in ('salary_expectation', 'expected_start_date'):
                value = ''
            setattr(application, attr, value)
        application.last_updated = timezone.now()
        application.save()

        if new_status and new_status != old_status:
            ApplicationService.add_timeline_event(
                application,
                EventType.STATUS_CHANGED,
                f"Status changed from {old_status} to {new_status}",
                details={'old_status': old_status, 'new_status': new_status},
            )
            logger.info("Application %s moved from %s to %s", application.pk, old_status, new_status)

        return application

    @staticmethod
    def add_timeline_event(application: JobApplication, event_type: str, description: str,
                           details: Optional[Dict] = None, occurred_at=None) -> ApplicationTimelineEvent:
        if event_type not in EventType.values:
            raise ValidationError([f"Invalid event type: {event_type}"])
        description = (description or '').strip()
        if not description:
            raise ValidationError(["Description is required"])

        event = ApplicationTimelineEvent.objects.create(
            application=application,
            event_type=event_type,
            occurred_at=occurred_at or timezone.now(),
            description=description,
            details=details or {},
        )
        application.last_updated = timezone.now()
        application.save(update_fields=['last_updated'])
        return event

    @staticmethod
    def delete_application(user, application_id: int) -> bool:
        deleted, _ = JobApplication.objects.filter(user=user, id=application_id).delete()
        if deleted:
            logger.info("User %s deleted application %s", user.pk, application_id)
        return deleted > 0

    @staticmethod
    def get_applications(user):
        return JobApplication.objects.filter(user=user)

    @staticmethod
    def get_applications_by_status(user, status: str):
        return JobApplication.objects.filter(user=user, status=status)

    @staticmethod
    def get_application_for_job(user, job_id: str) -> Optional[JobApplication]:
        return JobApplication.objects.filter(user=user, job_id=job_id).first()

    @staticmethod
    def get_application_stats(user) -> Dict[str, int]:
        applications = list(JobApplication.objects.filter(user=user).only('status', 'applied_at', 'last_updated'))
        total = len(applications)
        if total == 0:
            return {
                'total': 0,
                'applied': 0,
                'reviewing': 0,
                'interviews': 0,
                'offers': 0,
                'rejected': 0,
                'response_rate': 0,
                'average_response_time': 0,
            }

        counts: Dict[str, int] = {}
        for application in applications:
            counts[application.status] = counts.get(application.status, 0) + 1

        applied = counts.get(Status.APPLIED, 0)
        responded = [application for application in applications if application.status != Status.APPLIED]
        response_days = [
            (application.last_updated - application.applied_at) / timedelta(days=1)
            for application in responded
        ]
        average_response_time = sum(response_days) / len(response_days) if response_days else 0

        return {
            'total': total,
            'applied': applied,
            'reviewing': counts.get(Status.REVIEWING, 0),
            'interviews': sum(counts.get(status, 0) for status in INTERVIEW_STATUSES),
            'offers': counts.get(Status.OFFER, 0),
            'rejected': counts.get(Status.REJECTED, 0),
            'response_rate': round_half_up((total - applied) / total * 100),
            'average_response_time': round_half_up(average_response_time),
        }

    @staticmethod
    def get_recent_activity(user, days: int = 30) -> Dict[str, int]:
        """Counts over the last `days` days, used to personalize guidance."""
        since = timezone.now() - timedelta(days=days)
        recent = JobApplication.objects.filter(user=user, applied_at__gte=since)
        return {
            'applications': recent.count(),
            'rejections': recent.filter(status=Status.REJECTED).count(),
            'interviews': recent.filter(status__in=INTERVIEW_STATUSES).count(),
        }
