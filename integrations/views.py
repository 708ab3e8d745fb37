"""
Integrations app views

API endpoints for connecting LinkedIn and importing its profile.
"""
from django.core.exceptions import ValidationError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exceptions import LinkedInError
from .serializers import LinkedInCallbackSerializer, LinkedInConnectionSerializer
from .services import LinkedInService


class LinkedInViewSet(viewsets.ViewSet):
    """
    - GET: Connection status
    - GET auth-url/: Authorization URL (stores the state in the session)
    - POST callback/: Complete authorization {"code", "state"}
    - POST sync/: Import the stored LinkedIn profile
    - POST disconnect/: Remove the connection
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        connection = LinkedInService.get_connection(request.user)
        return Response({
            'connected': connection is not None,
            'demo_mode': LinkedInService.is_demo_mode(),
            'connection': LinkedInConnectionSerializer(connection).data if connection else None,
        })

    @action(detail=False, methods=['get'], url_path='auth-url')
    def auth_url(self, request):
        return Response({'auth_url': LinkedInService.get_auth_url(request.session)})

    @action(detail=False, methods=['post'])
    def callback(self, request):
        serializer = LinkedInCallbackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            connection = LinkedInService.connect(
                request.user,
                serializer.validated_data['code'],
                serializer.validated_data['state'],
                request.session,
            )
        except LinkedInError as e:
            return Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
        return Response(LinkedInConnectionSerializer(connection).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def sync(self, request):
        try:
            updates = LinkedInService.sync_with_profile(request.user)
        except LinkedInError as e:
            return Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
        except ValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)
        return Response(updates)

    @action(detail=False, methods=['post'])
    def disconnect(self, request):
        if not LinkedInService.disconnect(request.user):
            return Response({'errors': ['LinkedIn is not connected']}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
