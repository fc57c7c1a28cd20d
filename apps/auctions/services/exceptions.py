"""
Domain-specific exceptions for auctions app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class AuctionsServiceError(Exception):
    """Base exception for all auctions service errors."""
    pass


class AuctionNotFoundError(AuctionsServiceError):
    """Raised when an auction record does not exist."""
    pass


class InvalidBidAmountError(AuctionsServiceError):
    """Raised when a winning bid is non-positive, below the minimum or above the maximum."""
    pass


class DuplicateAuctionNumberError(AuctionsServiceError):
    """Raised when the group already has an auction with this number."""
    pass


class AuctionNumberOutOfRangeError(AuctionsServiceError):
    """Raised when the auction number is outside 1..tenure."""
    pass


class WinnerAlreadyWonError(AuctionsServiceError):
    """Raised when the member already won an earlier auction in the group."""
    pass


class NotGroupMemberError(AuctionsServiceError):
    """Raised when the winner is not seated in the group."""
    pass
