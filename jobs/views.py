"""
Jobs app views

API endpoints for searching and matching catalog jobs and for the user's
saved jobs and search history.
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import Http404
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from applications.services import ApplicationService
from profiles.services import ProfileService
from .matching import JobMatchingEngine
from .models import SavedJob, SearchHistory
from .serializers import (
    JobMatchSerializer,
    JobSerializer,
    SavedJobSerializer,
    SearchHistorySerializer,
    TagSerializer,
)
from .services import JobSearchEngine, JobSearchFilters, SavedJobService, SearchHistoryService


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


class JobViewSet(viewsets.ViewSet):
    """
    Read-only API over the job catalog.

    - GET: Search with query params (query, location, job_type, ...);
      each result carries the current user's match score
    - GET {id}: Job with full match breakdown
    - GET recommended/: Best matches for the current user's profile
    - GET featured/, stats/: Catalog highlights and counts
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        filters = JobSearchFilters.from_query_params(request.query_params)
        jobs = JobSearchEngine.search_jobs(filters)
        SearchHistoryService.record_search(request.user, filters, len(jobs))

        profile = ProfileService.build_matching_profile(request.user)
        matches = JobMatchingEngine.score_map(jobs, profile)
        if request.query_params.get('sort') == 'match':
            jobs = [match.job for match in JobMatchingEngine.rank_jobs_by_match(jobs, profile)]

        results = []
        for job in jobs:
            payload = JobSerializer(job).data
            payload['match_score'] = matches[job.id].match_score
            results.append(payload)
        return Response({'count': len(results), 'filters': filters.to_dict(), 'results': results})

    def retrieve(self, request, pk=None):
        job = JobSearchEngine.get_job_by_id(pk)
        if job is None:
            raise Http404(f"Job {pk} not found")

        profile = ProfileService.build_matching_profile(request.user)
        application = ApplicationService.get_application_for_job(request.user, job.id)
        return Response({
            **JobMatchSerializer(JobMatchingEngine.calculate_job_match(job, profile)).data,
            'is_saved': SavedJobService.is_saved(request.user, job.id),
            'application_id': application.id if application else None,
        })

    @action(detail=False, methods=['get'])
    def recommended(self, request):
        """
        GET /api/jobs/recommended/?limit=10&min_score=60
        """
        profile = ProfileService.build_matching_profile(request.user)
        jobs = JobSearchEngine.all_jobs()
        limit = _positive_int(request.query_params.get('limit'), getattr(settings, 'JOB_TOP_MATCHES_LIMIT', 10))

        if 'min_score' in request.query_params:
            min_score = _positive_int(request.query_params.get('min_score'), getattr(settings, 'JOB_MATCH_MIN_SCORE', 60))
            matches = JobMatchingEngine.get_matching_jobs(jobs, profile, min_score=min_score)[:limit]
        else:
            matches = JobMatchingEngine.get_top_matches(jobs, profile, limit=limit)
        return Response(JobMatchSerializer(matches, many=True).data)

    @action(detail=False, methods=['get'])
    def featured(self, request):
        limit = _positive_int(request.query_params.get('limit'), 6)
        return Response(JobSerializer(JobSearchEngine.get_featured_jobs(limit), many=True).data)

    @action(detail=False, methods=['get'])
    def stats(self, request):
        return Response(JobSearchEngine.get_job_stats())


class SavedJobViewSet(viewsets.ModelViewSet):
    """
    ViewSet for SavedJob.

    - POST: Save a catalog job (saving twice returns the existing bookmark)
    - PATCH {id}: Update notes/tags
    - POST {id}/tags/, DELETE {id}/tags/: Add or remove a single tag
    """

    serializer_class = SavedJobSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """
        Filter to show only current user's saved jobs.
        Admins can see all saved jobs.
        """
        if self.request.user.role == 'ADMIN':
            return SavedJob.objects.all()
        return SavedJob.objects.filter(user=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved = SavedJobService.save_job(
            request.user,
            serializer.validated_data['job_id'],
            notes=serializer.validated_data.get('notes', ''),
            tags=serializer.validated_data.get('tags'),
        )
        return Response(self.get_serializer(saved).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        tags = serializer.validated_data.get('tags')
        if tags is not None:
            serializer.validated_data['tags'] = SavedJobService.clean_tags(tags)
        serializer.save()

    @action(detail=True, methods=['post', 'delete'])
    def tags(self, request, pk=None):
        """
        POST/DELETE /api/saved-jobs/{id}/tags/ with {"tag": "..."}
        """
        saved = self.get_object()
        serializer = TagSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tag = serializer.validated_data['tag']

        if request.method == 'DELETE':
            SavedJobService.remove_tag(saved, tag)
        else:
            try:
                SavedJobService.add_tag(saved, tag)
            except ValidationError as e:
                return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.get_serializer(saved).data)


class SearchHistoryViewSet(mixins.ListModelMixin, mixins.DestroyModelMixin, viewsets.GenericViewSet):
    """Recent searches for the current user; entries can be removed."""

    serializer_class = SearchHistorySerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return SearchHistory.objects.filter(user=self.request.user)
