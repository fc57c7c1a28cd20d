"""
Collection recording and due reconciliation.

A member's ``due_amount`` is a running total: auctions raise it by the
installment charged, collections lower it by the amount paid. It can
always be recomputed from InstallmentCharge and CollectionRecord rows.
"""

import logging
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError
from django.db.models import Sum
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.auctions.models import AuctionRecord, InstallmentCharge
from apps.groups.models import ChitGroup
from apps.groups.services import GroupNotFoundError
from apps.ledger.models import CollectionRecord, PaymentType

from .exceptions import (
    AuctionNotFoundError,
    MemberNotFoundError,
    NotGroupMemberError,
    ReceiptNumberExhaustedError,
)
from .receipt_numbering import (
    next_receipt_number,
    receipt_number_taken,
    generate_virtual_transaction_id,
)

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


@dataclass(frozen=True)
class DueReconciliation:
    """Outcome of recomputing one member's due from the ledger."""

    user_id: UUID
    username: Optional[str]
    recorded_due: Decimal
    total_charged: Decimal
    total_collected: Decimal
    expected_due: Decimal
    corrected: bool

    @property
    def drift(self) -> Decimal:
        return self.recorded_due - self.expected_due


def record_collection(
    *,
    group_id: UUID,
    user_id: UUID,
    amount: Decimal,
    payment_mode: str,
    payment_date: date,
    payment_time: time,
    auction_id: Optional[UUID] = None,
    payment_type: str = PaymentType.FULL,
    remarks: str = 'Auction Collection',
    collection_location: str = '',
    recorded_by: Optional[User] = None,
    max_retries: Optional[int] = None,
) -> CollectionRecord:
    """
    Record money received from a member and lower their running due.

    The due is read and written under a row lock in the same transaction
    as the collection row, so back-to-back collections never lose an
    update. If the receipt number turns out to be taken when the row is
    written, the whole write is retried with a fresh number.

    Args:
        group_id: Group the payment belongs to
        user_id: Paying member
        amount: Amount received (positive)
        payment_mode: cash / upi / netbanking
        payment_date: Date of payment
        payment_time: Time of payment
        auction_id: Auction (due) being paid; None for the general due
        payment_type: full / partial
        remarks: Free text printed on the receipt
        collection_location: Where the money was collected
        recorded_by: Staff user recording the payment
        max_retries: Write attempts (default RECEIPT_NUMBER_MAX_RETRIES)

    Returns:
        Created CollectionRecord

    Raises:
        GroupNotFoundError: If group doesn't exist
        MemberNotFoundError: If user doesn't exist
        NotGroupMemberError: If user is not in the group
        AuctionNotFoundError: If auction doesn't exist in this group
        ReceiptNumberExhaustedError: If no unique receipt number could be used
    """
    if max_retries is None:
        max_retries = settings.RECEIPT_NUMBER_MAX_RETRIES

    # Retry logic outside transaction to handle receipt number collisions
    for attempt in range(max_retries):
        receipt_number = None
        try:
            # Each attempt is a separate transaction
            with transaction.atomic():
                receipt_number = next_receipt_number(max_retries)
                return _write_collection(
                    receipt_number=receipt_number,
                    group_id=group_id,
                    user_id=user_id,
                    amount=amount,
                    payment_mode=payment_mode,
                    payment_date=payment_date,
                    payment_time=payment_time,
                    auction_id=auction_id,
                    payment_type=payment_type,
                    remarks=remarks,
                    collection_location=collection_location,
                    recorded_by=recorded_by,
                )
        except IntegrityError:
            # Only a receipt number taken by another collection is retried
            if receipt_number is None or not receipt_number_taken(receipt_number):
                raise
            logger.warning(
                "Receipt number %s collided while recording collection (attempt %d/%d)",
                receipt_number, attempt + 1, max_retries
            )
            if attempt == max_retries - 1:
                raise ReceiptNumberExhaustedError(
                    f"Failed to record collection with a unique receipt number after {max_retries} attempts"
                )
            continue

    # Should never reach here
    raise RuntimeError("Unexpected error in collection recording")


def _write_collection(
    *,
    receipt_number,
    group_id,
    user_id,
    amount,
    payment_mode,
    payment_date,
    payment_time,
    auction_id,
    payment_type,
    remarks,
    collection_location,
    recorded_by,
) -> CollectionRecord:
    try:
        group = ChitGroup.objects.get(id=group_id)
    except ChitGroup.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise MemberNotFoundError(f"Member with ID {user_id} not found")

    if not group.has_member(user):
        raise NotGroupMemberError(
            f"{user.get_display_name()} is not a member of {group.group_name}"
        )

    auction = None
    if auction_id is not None:
        try:
            auction = AuctionRecord.objects.get(id=auction_id, group=group)
        except AuctionRecord.DoesNotExist:
            raise AuctionNotFoundError(
                f"Auction with ID {auction_id} not found in {group.group_name}"
            )

    amount = Decimal(amount)

    # Installment this payment counts against
    if auction is not None and auction.final_amount_to_be_paid is not None:
        chit_amount = auction.final_amount_to_be_paid
    else:
        chit_amount = group.rate

    due_before = user.due_amount

    if auction is not None:
        already_paid = CollectionRecord.objects.filter(
            user=user,
            group=group,
            auction_number=auction.auction_number,
        ).aggregate(total=Coalesce(Sum('amount'), ZERO))['total']
        total_paid_for_due = already_paid + amount
    else:
        total_paid_for_due = amount

    balance_for_installment = None
    balance_amount = None
    if chit_amount is not None:
        balance_for_installment = chit_amount - total_paid_for_due
        balance_amount = chit_amount - amount

    collection = CollectionRecord.objects.create(
        receipt_number=receipt_number,
        company_name=settings.CHIT_COMPANY_NAME,
        group=group,
        auction=auction,
        auction_number=auction.auction_number if auction else None,
        user=user,
        payment_date=payment_date,
        payment_time=payment_time,
        payment_type=payment_type,
        payment_mode=payment_mode,
        amount=amount,
        chit_amount=chit_amount,
        user_total_due_before_this_payment=due_before,
        balance_amount=balance_amount,
        total_paid_for_this_due=total_paid_for_due,
        balance_for_this_installment=balance_for_installment,
        remarks=remarks,
        collection_location=collection_location,
        virtual_transaction_id=generate_virtual_transaction_id(),
        recorded_by=recorded_by,
    )

    # Overpayment is allowed and leaves a negative due
    user.due_amount = due_before - amount
    user.save(update_fields=['due_amount'])

    logger.info(
        "Collection %s recorded: %s paid %s in %s (due %s -> %s)",
        collection.receipt_number, user.username, amount,
        group.group_name, due_before, user.due_amount
    )
    return collection


@transaction.atomic
def reconcile_member_due(*, user_id: UUID, apply: bool = True) -> DueReconciliation:
    """
    Recompute a member's due from installment charges and collections.

    expected due = sum of installment charges - sum of collections

    When ``apply`` is set and the stored due differs, it is overwritten
    with the expected value under a row lock.

    Args:
        user_id: Member to reconcile
        apply: Write the correction (False only reports it)

    Returns:
        DueReconciliation

    Raises:
        MemberNotFoundError: If user doesn't exist
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise MemberNotFoundError(f"Member with ID {user_id} not found")

    charged = InstallmentCharge.objects.filter(member=user).aggregate(
        total=Coalesce(Sum('amount'), ZERO)
    )['total']
    collected = CollectionRecord.objects.filter(user=user).aggregate(
        total=Coalesce(Sum('amount'), ZERO)
    )['total']
    expected = charged - collected
    recorded = user.due_amount

    corrected = False
    if recorded != expected:
        logger.warning(
            "Due drift for %s: recorded %s, ledger says %s",
            user.username, recorded, expected
        )
        if apply:
            user.due_amount = expected
            user.save(update_fields=['due_amount'])
            corrected = True
            logger.info("Due for %s corrected to %s", user.username, expected)

    return DueReconciliation(
        user_id=user.id,
        username=user.username,
        recorded_due=recorded,
        total_charged=charged,
        total_collected=collected,
        expected_due=expected,
        corrected=corrected,
    )
