"""
Permission classes for report endpoints.

Staff (admins and employees) may read every report. A member may read
only their own statement.
"""

from rest_framework.permissions import BasePermission


class IsStatementOwnerOrStaff(BasePermission):
    """
    Allow staff, or the member whose id is in the URL.

    Used by:
        - member_statement (user_id in URL)
    """

    message = 'You can only view your own statement.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_admin or user.is_employee:
            return True
        return str(view.kwargs.get('user_id')) == str(user.id)
