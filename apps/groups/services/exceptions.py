"""
Domain-specific exceptions for groups app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GroupsServiceError(Exception):
    """Base exception for all groups service errors."""
    pass


class GroupNotFoundError(GroupsServiceError):
    """Raised when a group does not exist."""
    pass


class GroupFullError(GroupsServiceError):
    """Raised when a group already has total_people members."""
    pass


class AlreadyMemberError(GroupsServiceError):
    """Raised when a user is already seated in the group."""
    pass


class NotEligibleMemberError(GroupsServiceError):
    """Raised when a non-member account (admin, employee) is added to a group."""
    pass


class DuplicateGroupNameError(GroupsServiceError):
    """Raised when another group already uses the name."""
    pass
