from rest_framework import permissions


class IsAdminRole(permissions.BasePermission):
    """
    Permission: User must hold the admin role.
    """

    message = 'Only administrators can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsStaffRole(permissions.BasePermission):
    """
    Permission: User must be an admin or an employee.
    """

    message = 'Only office staff can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated
            and (user.is_admin or user.is_employee)
        )
