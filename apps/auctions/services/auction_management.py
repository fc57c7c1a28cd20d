"""
Auction management service.

Records auctions and bills every group member for the resulting
installment, all inside one transaction.
"""

import logging
from datetime import date, time
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.auctions.models import AuctionRecord, InstallmentCharge
from apps.groups.models import ChitGroup, GroupMembership
from apps.groups.services import GroupNotFoundError, get_group_auction_state

from .exceptions import (
    AuctionNotFoundError,
    AuctionNumberOutOfRangeError,
    DuplicateAuctionNumberError,
    NotGroupMemberError,
    WinnerAlreadyWonError,
)
from .settlement import calculate_settlement, validate_bid

logger = logging.getLogger(__name__)


@transaction.atomic
def start_auction(
    *,
    group_id: UUID,
    winner: User,
    winning_bid_amount: Decimal,
    auction_month: str,
    auction_date: date,
    auction_time: time,
    auction_number: Optional[int] = None,
    notes: str = '',
    recorded_by: Optional[User] = None,
) -> AuctionRecord:
    """
    Record an auction, move the group's next-auction pointer and bill members.

    The group row is locked for the whole operation so two auctions for
    the same group cannot interleave.

    Args:
        group_id: UUID of the group
        winner: Member who won the pot
        winning_bid_amount: Winning bid
        auction_month: Display month, e.g. "August 2024"
        auction_date: Date the auction was held
        auction_time: Time the auction was held
        auction_number: 1..tenure; defaults to the smallest unused number
        notes: Free text
        recorded_by: Staff user entering the auction

    Returns:
        Created (and billed) AuctionRecord

    Raises:
        GroupNotFoundError: If group doesn't exist
        AuctionNumberOutOfRangeError: If the number is outside 1..tenure,
            or every auction of the group has been held
        DuplicateAuctionNumberError: If the number is already used
        NotGroupMemberError: If the winner is not seated in the group
        WinnerAlreadyWonError: If the winner already won in this group
        InvalidBidAmountError: If the bid is outside the group's limits
    """
    try:
        group = (
            ChitGroup.objects
            .select_for_update()
            .get(id=group_id)
        )
    except ChitGroup.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    state = get_group_auction_state(group=group)

    if auction_number is None:
        auction_number = state.next_auction_number
        if auction_number is None:
            raise AuctionNumberOutOfRangeError(
                f"All {group.tenure} auctions of {group.group_name} are complete"
            )

    if not 1 <= auction_number <= group.tenure:
        raise AuctionNumberOutOfRangeError(
            f"Auction number must be between 1 and {group.tenure}"
        )

    if auction_number in state.completed_auction_numbers:
        raise DuplicateAuctionNumberError(
            f"Auction #{auction_number} for {group.group_name} is already completed"
        )

    if not group.has_member(winner):
        raise NotGroupMemberError(
            f"{winner.get_display_name()} is not a member of {group.group_name}"
        )

    if winner.id in state.previous_winner_ids:
        raise WinnerAlreadyWonError(
            f"{winner.get_display_name()} has already won an auction in {group.group_name}"
        )

    validate_bid(group, winning_bid_amount)
    settlement = calculate_settlement(group, winning_bid_amount)

    try:
        with transaction.atomic():
            auction = AuctionRecord.objects.create(
                group=group,
                auction_number=auction_number,
                auction_month=auction_month,
                auction_date=auction_date,
                auction_time=auction_time,
                winner=winner,
                winning_bid_amount=winning_bid_amount,
                commission_amount=settlement.commission_amount,
                discount=settlement.discount,
                net_discount=settlement.net_discount,
                dividend_per_member=settlement.dividend_per_member,
                final_amount_to_be_paid=settlement.final_amount_to_be_paid,
                amount_paid_to_winner=settlement.amount_paid_to_winner,
                notes=notes,
                recorded_by=recorded_by,
            )
    except IntegrityError:
        # Unique constraints back up the checks above
        raise DuplicateAuctionNumberError(
            f"Auction #{auction_number} or its winner is already recorded for {group.group_name}"
        )

    group.last_auction_winner = winner
    group.last_winning_bid_amount = winning_bid_amount
    group.auction_month = auction_month
    group.auction_scheduled_date = auction_date
    group.auction_scheduled_time = auction_time
    group.save(update_fields=[
        'last_auction_winner',
        'last_winning_bid_amount',
        'auction_month',
        'auction_scheduled_date',
        'auction_scheduled_time',
        'updated_at',
    ])

    logger.info(
        "Auction #%d of %s recorded: winner=%s bid=%s installment=%s",
        auction.auction_number, group.group_name, winner.username,
        winning_bid_amount, settlement.final_amount_to_be_paid
    )

    bill_auction(auction_id=auction.id)
    auction.refresh_from_db()
    return auction


@transaction.atomic
def bill_auction(*, auction_id: UUID) -> List[InstallmentCharge]:
    """
    Charge every group member the auction's final installment, exactly once.

    One InstallmentCharge is written per member and that member's
    due_amount is raised by the same amount. Members that already hold a
    charge for this auction are skipped, and an auction already stamped
    as billed is left alone, so calling this again is a no-op. Nothing is
    charged when the installment is missing or not positive.

    Args:
        auction_id: UUID of the auction record

    Returns:
        The charges created by this call

    Raises:
        AuctionNotFoundError: If auction doesn't exist
    """
    try:
        auction = (
            AuctionRecord.objects
            .select_for_update()
            .get(id=auction_id)
        )
    except AuctionRecord.DoesNotExist:
        raise AuctionNotFoundError(f"Auction with ID {auction_id} not found")

    if auction.billed_at is not None:
        logger.debug("Auction %s already billed at %s", auction.id, auction.billed_at)
        return []

    amount = auction.final_amount_to_be_paid
    created = []

    if amount is not None and amount > 0:
        already_charged = set(
            auction.charges.values_list('member_id', flat=True)
        )
        member_ids = [
            member_id
            for member_id in (
                GroupMembership.objects
                .filter(group_id=auction.group_id)
                .order_by('position')
                .values_list('user_id', flat=True)
            )
            if member_id not in already_charged
        ]

        created = InstallmentCharge.objects.bulk_create([
            InstallmentCharge(auction=auction, member_id=member_id, amount=amount)
            for member_id in member_ids
        ])
        User.objects.filter(id__in=member_ids).update(
            due_amount=F('due_amount') + amount
        )

    auction.billed_at = timezone.now()
    auction.save(update_fields=['billed_at'])

    logger.info(
        "Auction #%d billed: %d member(s) charged %s",
        auction.auction_number, len(created), amount
    )
    return created


def get_auction_by_id(*, auction_id: UUID) -> AuctionRecord:
    """
    Get an auction record with its group and winner.

    Raises:
        AuctionNotFoundError: If auction doesn't exist
    """
    try:
        return (
            AuctionRecord.objects
            .select_related('group', 'winner', 'recorded_by')
            .get(id=auction_id)
        )
    except AuctionRecord.DoesNotExist:
        raise AuctionNotFoundError(f"Auction with ID {auction_id} not found")
