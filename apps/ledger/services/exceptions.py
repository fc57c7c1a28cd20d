"""
Domain-specific exceptions for ledger services.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class LedgerServiceError(Exception):
    """Base exception for all ledger service errors."""
    pass


class ReceiptNumberExhaustedError(LedgerServiceError):
    """Raised when no unused receipt number could be obtained."""
    pass


class MemberNotFoundError(LedgerServiceError):
    """Raised when the paying or paid member does not exist."""
    pass


class NotGroupMemberError(LedgerServiceError):
    """Raised when the member is not seated in the group."""
    pass


class AuctionNotFoundError(LedgerServiceError):
    """Raised when the auction does not exist or belongs to another group."""
    pass


class NotEmployeeError(LedgerServiceError):
    """Raised when salary is recorded for someone who is not an employee."""
    pass


class InvalidExpenseError(LedgerServiceError):
    """Raised when an expense lacks the fields its type requires."""
    pass
