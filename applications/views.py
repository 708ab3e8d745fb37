"""
Applications app views

ViewSet for JobApplication management.
"""
from django.core.exceptions import ValidationError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import JobApplication
from .serializers import (
    ApplicationTimelineEventSerializer,
    JobApplicationSerializer,
    TimelineEventCreateSerializer,
)
from .services import ApplicationService


class JobApplicationViewSet(viewsets.ModelViewSet):
    """
    ViewSet for JobApplication.

    - POST: Apply to a catalog job (status starts as 'applied')
    - GET: List current user's applications, optionally ?status=
    - PATCH {id}: Update fields; status changes land on the timeline
    - GET stats/: Aggregate counts and response rate
    - GET/POST {id}/timeline/: Read or append timeline events
    """

    serializer_class = JobApplicationSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """
        Filter to show only current user's applications.
        Admins can see all applications.
        """
        if self.request.user.role == 'ADMIN':
            queryset = JobApplication.objects.all()
        else:
            queryset = JobApplication.objects.filter(user=self.request.user)

        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset.prefetch_related('timeline')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            application = ApplicationService.add_application(request.user, serializer.validated_data)
        except ValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.get_serializer(application).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        application = self.get_object()
        serializer = self.get_serializer(application, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        try:
            application = ApplicationService.update_application(application, serializer.validated_data)
        except ValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)

        if getattr(application, '_prefetched_objects_cache', None):
            # the timeline may have grown since get_object() prefetched it
            application._prefetched_objects_cache = {}
        return Response(self.get_serializer(application).data)

    @action(detail=False, methods=['get'])
    def stats(self, request):
        """
        GET /api/applications/stats/
        """
        return Response(ApplicationService.get_application_stats(request.user))

    @action(detail=True, methods=['get', 'post'])
    def timeline(self, request, pk=None):
        """
        GET/POST /api/applications/{id}/timeline/
        """
        application = self.get_object()
        if request.method == 'GET':
            serializer = ApplicationTimelineEventSerializer(application.timeline.all(), many=True)
            return Response(serializer.data)

        serializer = TimelineEventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = ApplicationService.add_timeline_event(
                application,
                serializer.validated_data['event_type'],
                serializer.validated_data['description'],
                details=serializer.validated_data.get('details'),
            )
        except ValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)
        return Response(ApplicationTimelineEventSerializer(event).data, status=status.HTTP_201_CREATED)
