"""
Domain exceptions for the reports app.

Reports are read only, so the only failures are lookups of things that
do not exist.
"""


class ReportsServiceError(Exception):
    """Base exception for all report errors."""
    pass


class MemberNotFoundError(ReportsServiceError):
    """Raised when a statement is requested for an unknown member."""
    pass
