"""
Profiles app views

ViewSet for JobSeekerProfile management.
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdminOrOwner

from .models import JobSeekerProfile
from .serializers import JobSeekerProfileSerializer
from .services import ProfileService


class JobSeekerProfileViewSet(viewsets.ModelViewSet):
    """
    ViewSet for JobSeekerProfile.

    - Users can CRUD their own profile
    - Admins can list all profiles
    - 'me' returns (creating if needed) the current user's profile
    """

    serializer_class = JobSeekerProfileSerializer
    permission_classes = [IsAuthenticated, IsAdminOrOwner]

    def get_queryset(self):
        """
        Filter queryset based on user role.
        - Admins see all profiles
        - Users see only their own profile
        """
        if self.request.user.role == 'ADMIN':
            return JobSeekerProfile.objects.all()
        return JobSeekerProfile.objects.filter(user=self.request.user)

    def perform_create(self, serializer):
        """Automatically set user from request."""
        serializer.save(user=self.request.user)

    def perform_update(self, serializer):
        profile = serializer.save()
        if profile.is_complete and not profile.user.profile_complete:
            profile.user.profile_complete = True
            profile.user.save(update_fields=['profile_complete'])

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        GET /api/profiles/me/
        """
        profile = ProfileService.get_or_create_profile(request.user)
        return Response(self.get_serializer(profile).data)
