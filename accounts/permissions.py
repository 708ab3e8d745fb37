"""
Accounts app permissions

Ownership checks shared by the user and profile APIs.
"""
from rest_framework import permissions


def owner_of(obj):
    """The account an object belongs to: the user itself, or its ``user`` field."""
    return getattr(obj, 'user', obj)


class IsAdminOrOwner(permissions.BasePermission):
    """
    Object access for admins, or for the account that owns the object.
    Works for users and for anything with a ``user`` foreign key.
    """

    def has_object_permission(self, request, view, obj):
        if request.user.role == 'ADMIN':
            return True
        return owner_of(obj) == request.user
