"""
Group management service.

Handles chit group creation and lookups with proper transaction safety.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Prefetch

from apps.accounts.models import User
from apps.groups.models import ChitGroup, GroupMembership, BiddingType

from .exceptions import (
    GroupNotFoundError,
    DuplicateGroupNameError,
)
from .membership_management import add_member

logger = logging.getLogger(__name__)


@dataclass
class GroupAuctionState:
    """What the start-auction form needs to know about past auctions."""

    completed_auction_numbers: List[int] = field(default_factory=list)
    previous_winner_ids: List[UUID] = field(default_factory=list)
    next_auction_number: Optional[int] = None


def create_group(
    *,
    group_name: str,
    total_people: int,
    total_amount: Decimal,
    tenure: int,
    start_date: date,
    description: str = '',
    rate: Optional[Decimal] = None,
    commission: Optional[Decimal] = None,
    bidding_type: str = BiddingType.AUCTION,
    min_bid: Optional[Decimal] = None,
    members: Sequence[User] = (),
) -> ChitGroup:
    """
    Create a chit group and seat the initial members in the given order.

    Args:
        group_name: Unique display name
        total_people: Seats in the group
        total_amount: Chit value auctioned each month
        tenure: Number of monthly auctions
        start_date: First month of the scheme
        description: Optional notes
        rate: Monthly installment before dividend
        commission: Foreman commission percent
        bidding_type: auction / random / pre-fixed
        min_bid: Suggested opening bid, shown to bidders and not enforced
        members: Initial members, seated in order

    Returns:
        Created ChitGroup instance

    Raises:
        DuplicateGroupNameError: If the name is taken
        GroupFullError: If more members are given than total_people
        AlreadyMemberError: If a member is listed twice
        NotEligibleMemberError: If a listed user is not a member account
    """
    try:
        with transaction.atomic():
            group = ChitGroup.objects.create(
                group_name=group_name,
                description=description,
                total_people=total_people,
                total_amount=total_amount,
                tenure=tenure,
                start_date=start_date,
                rate=rate,
                commission=commission,
                bidding_type=bidding_type,
                min_bid=min_bid,
            )

            for member in members:
                add_member(group_id=group.id, user=member)

    except IntegrityError:
        if ChitGroup.objects.filter(group_name=group_name).exists():
            raise DuplicateGroupNameError(f"Group '{group_name}' already exists")
        raise

    logger.info("Group %s created with %d member(s)", group.group_name, len(members))
    return group


def get_group_by_id(*, group_id: UUID) -> ChitGroup:
    """
    Get a group by ID with its members preloaded.

    Raises:
        GroupNotFoundError: If group doesn't exist
    """
    try:
        return (
            ChitGroup.objects
            .select_related('last_auction_winner')
            .prefetch_related(
                Prefetch(
                    'memberships',
                    queryset=GroupMembership.objects.select_related('user')
                )
            )
            .get(id=group_id)
        )
    except ChitGroup.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")


def get_group_auction_state(*, group: ChitGroup) -> GroupAuctionState:
    """
    Summarise the auctions already held in a group.

    The next auction number is the smallest of 1..tenure not yet used,
    or None once every auction has been held.
    """
    records = list(
        group.auction_records
        .order_by('auction_number')
        .values_list('auction_number', 'winner_id')
    )
    completed = [number for number, _ in records]
    winners = [winner_id for _, winner_id in records]

    used = set(completed)
    next_number = next(
        (n for n in range(1, group.tenure + 1) if n not in used),
        None
    )

    return GroupAuctionState(
        completed_auction_numbers=completed,
        previous_winner_ids=winners,
        next_auction_number=next_number,
    )
