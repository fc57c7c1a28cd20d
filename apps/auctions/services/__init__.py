"""
Auctions app services layer.

Settlement arithmetic is pure; recording and billing run in one transaction.
"""

from .exceptions import (
    AuctionsServiceError,
    AuctionNotFoundError,
    InvalidBidAmountError,
    DuplicateAuctionNumberError,
    AuctionNumberOutOfRangeError,
    WinnerAlreadyWonError,
    NotGroupMemberError,
)

from .settlement import (
    AuctionSettlement,
    calculate_settlement,
    commission_amount_for,
    max_allowed_bid,
    validate_bid,
)

from .auction_management import (
    start_auction,
    bill_auction,
    get_auction_by_id,
)


__all__ = [
    # Exceptions
    'AuctionsServiceError',
    'AuctionNotFoundError',
    'InvalidBidAmountError',
    'DuplicateAuctionNumberError',
    'AuctionNumberOutOfRangeError',
    'WinnerAlreadyWonError',
    'NotGroupMemberError',

    # Settlement
    'AuctionSettlement',
    'calculate_settlement',
    'commission_amount_for',
    'max_allowed_bid',
    'validate_bid',

    # Auction Management
    'start_auction',
    'bill_auction',
    'get_auction_by_id',
]
