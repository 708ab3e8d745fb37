"""
Accounts app views

ViewSet and endpoints for user management and authentication.
"""
import logging

from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from .forms import RegistrationForm
from .models import User
from .permissions import IsAdminOrOwner
from .serializers import UserSerializer

logger = logging.getLogger(__name__)


class UserViewSet(viewsets.ModelViewSet):
    """
    ViewSet for User management.

    - List/create: Staff/admin only
    - Retrieve/update/delete: Admin or self only
    - Special 'me' endpoint for current user
    - 'verify_email' marks the current user's address as verified
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.action in ['list', 'create']:
            permission_classes = [IsAdminUser]
        elif self.action in ['me', 'verify_email']:
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [IsAuthenticated, IsAdminOrOwner]
        return [permission() for permission in permission_classes]

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        Return the current authenticated user's data.

        GET /api/users/me/
        """
        serializer = self.get_serializer(request.user)
        return Response(serializer.data)

    @action(detail=False, methods=['post'], url_path='verify-email')
    def verify_email(self, request):
        """
        POST /api/users/verify-email/
        """
        user = request.user
        if not user.email_verified:
            user.email_verified = True
            user.save(update_fields=['email_verified'])
            logger.info("Email verified for user %s", user.pk)
        return Response(self.get_serializer(user).data)


def signup(request):
    if request.user.is_authenticated:
        return redirect("dashboard")

    if request.method == "POST":
        form = RegistrationForm(request.POST)
        if form.is_valid():
            user = form.save()
            logger.info("Registered user %s", user.pk)
            login(request, user, backend='accounts.backends.EmailOrUsernameBackend')
            messages.success(request, f"Welcome, {user.first_name}! Your account has been created.")
            return redirect("profile_edit")
    else:
        form = RegistrationForm()

    return render(request, "accounts/signup.html", {"form": form})
