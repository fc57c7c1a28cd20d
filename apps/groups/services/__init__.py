"""
Groups app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    GroupsServiceError,
    GroupNotFoundError,
    GroupFullError,
    AlreadyMemberError,
    NotEligibleMemberError,
    DuplicateGroupNameError,
)

from .group_management import (
    GroupAuctionState,
    create_group,
    get_group_by_id,
    get_group_auction_state,
)

from .membership_management import (
    add_member,
    get_group_members,
)


__all__ = [
    # Exceptions
    'GroupsServiceError',
    'GroupNotFoundError',
    'GroupFullError',
    'AlreadyMemberError',
    'NotEligibleMemberError',
    'DuplicateGroupNameError',

    # Group Management
    'GroupAuctionState',
    'create_group',
    'get_group_by_id',
    'get_group_auction_state',

    # Membership Management
    'add_member',
    'get_group_members',
]
