"""
Auction settlement arithmetic.

Pure functions: nothing here touches the database.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from apps.groups.models import ChitGroup

from .exceptions import InvalidBidAmountError

CENT = Decimal('0.01')
HUNDRED = Decimal('100')


def _money(value: Optional[Decimal]) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class AuctionSettlement:
    """Money movements decided by one auction."""

    commission_amount: Decimal
    discount: Optional[Decimal]
    net_discount: Optional[Decimal]
    dividend_per_member: Optional[Decimal]
    final_amount_to_be_paid: Optional[Decimal]
    amount_paid_to_winner: Optional[Decimal]


def commission_amount_for(group: ChitGroup) -> Decimal:
    """Foreman commission in money; zero when the group has no commission set."""
    if group.commission is None or group.total_amount is None:
        return _money(Decimal('0'))
    return _money((Decimal(group.commission) / HUNDRED) * Decimal(group.total_amount))


def max_allowed_bid(group: ChitGroup) -> Optional[Decimal]:
    if group.total_amount is None:
        return None
    return _money(Decimal(group.total_amount) - commission_amount_for(group))


def calculate_settlement(group: ChitGroup, winning_bid_amount: Decimal) -> AuctionSettlement:
    """
    Compute the settlement of an auction.

    Steps, each using the previous result:

    1. commission = commission% / 100 * total_amount (0 if unset)
    2. discount = total_amount - winning bid
    3. net discount = discount - commission
    4. dividend per member = net discount / total_people (at least 1 person)
    5. final installment = rate - dividend
    6. paid to winner = winning bid - final installment

    The dividend is rounded to the paisa before it is used in step 5, so
    the stored amounts satisfy the identities above exactly. A missing
    total amount or rate makes the dependent amounts None.

    Args:
        group: Group whose current terms apply
        winning_bid_amount: Amount the winner bid for the pot

    Returns:
        AuctionSettlement
    """
    bid = Decimal(winning_bid_amount)
    commission_amount = commission_amount_for(group)

    discount = None
    if group.total_amount is not None:
        discount = _money(Decimal(group.total_amount) - bid)

    net_discount = None
    if discount is not None:
        net_discount = _money(discount - commission_amount)

    people = group.total_people if group.total_people and group.total_people > 0 else 1
    dividend_per_member = None
    if net_discount is not None:
        dividend_per_member = _money(net_discount / Decimal(people))

    final_amount_to_be_paid = None
    if group.rate is not None and dividend_per_member is not None:
        final_amount_to_be_paid = _money(Decimal(group.rate) - dividend_per_member)

    amount_paid_to_winner = None
    if final_amount_to_be_paid is not None:
        amount_paid_to_winner = _money(bid - final_amount_to_be_paid)

    return AuctionSettlement(
        commission_amount=commission_amount,
        discount=discount,
        net_discount=net_discount,
        dividend_per_member=dividend_per_member,
        final_amount_to_be_paid=final_amount_to_be_paid,
        amount_paid_to_winner=amount_paid_to_winner,
    )


def validate_bid(group: ChitGroup, amount: Decimal) -> None:
    """
    Check a winning bid against the group's limits.

    A bid equal to the maximum (total amount minus commission) is accepted.
    The group's min_bid is informational and is not checked here.

    Raises:
        InvalidBidAmountError: If the bid is not positive or above the maximum
    """
    amount = Decimal(amount)
    if amount <= 0:
        raise InvalidBidAmountError("Winning bid must be greater than zero")

    maximum = max_allowed_bid(group)
    if maximum is not None and amount > maximum:
        raise InvalidBidAmountError(
            f"Winning bid {amount} exceeds the maximum allowed bid {maximum}"
        )
