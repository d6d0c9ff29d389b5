from rest_framework.permissions import BasePermission

from .models import User


class HasRole(BasePermission):
    """
    Grants access when the authenticated user's role is one of ``allowed_roles``.

    Roles are a closed set (``User.Role``); a role outside the set never
    matches.
    """
    allowed_roles = ()
    message = "Access denied."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role in self.allowed_roles


class IsAdminRole(HasRole):
    allowed_roles = (User.Role.ADMIN,)
    message = "Access denied. Admin role required"


class IsTeacher(HasRole):
    allowed_roles = (User.Role.TEACHER,)
    message = "Access denied. Teacher role required"


class IsDelegate(HasRole):
    allowed_roles = (User.Role.DELEGATE,)
    message = "Access denied. Delegate role required"


class IsTeacherOrAdmin(HasRole):
    allowed_roles = (User.Role.TEACHER, User.Role.ADMIN)
    message = "Access denied. Teacher or admin role required"
