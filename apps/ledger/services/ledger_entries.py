"""
Append-only ledger entries other than collections.

Payments, credits, expenses and salaries do not touch any member's due;
they only feed the day sheet and the master record.
"""

import logging
from datetime import date, time
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.auctions.models import AuctionRecord
from apps.groups.models import ChitGroup
from apps.groups.services import GroupNotFoundError
from apps.ledger.models import (
    PaymentRecord,
    CreditRecord,
    ExpenseRecord,
    SalaryRecord,
    ExpenseType,
    PaymentType,
)

from .exceptions import (
    AuctionNotFoundError,
    InvalidExpenseError,
    MemberNotFoundError,
    NotEmployeeError,
    NotGroupMemberError,
)
from .receipt_numbering import generate_virtual_transaction_id

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 3


@transaction.atomic
def record_payment(
    *,
    group_id: UUID,
    user_id: UUID,
    amount: Decimal,
    payment_mode: str,
    payment_date: date,
    payment_time: time,
    auction_id: Optional[UUID] = None,
    payment_type: str = PaymentType.FULL,
    remarks: str = '',
    recorded_by: Optional[User] = None,
) -> PaymentRecord:
    """
    Record money paid out to a group member.

    Raises:
        GroupNotFoundError: If group doesn't exist
        MemberNotFoundError: If user doesn't exist
        NotGroupMemberError: If user is not in the group
        AuctionNotFoundError: If auction doesn't exist in this group
    """
    try:
        group = ChitGroup.objects.get(id=group_id)
    except ChitGroup.DoesNotExist:
        raise GroupNotFoundError(f"Group with ID {group_id} not found")

    try:
        user = User.objects.get(id=user_id)
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

    payment = PaymentRecord.objects.create(
        group=group,
        auction=auction,
        auction_number=auction.auction_number if auction else None,
        user=user,
        payment_date=payment_date,
        payment_time=payment_time,
        payment_type=payment_type,
        payment_mode=payment_mode,
        amount=amount,
        remarks=remarks,
        virtual_transaction_id=generate_virtual_transaction_id(),
        recorded_by=recorded_by,
    )

    logger.info("Payment of %s to %s recorded in %s", amount, user.username, group.group_name)
    return payment


@transaction.atomic
def record_credit(
    *,
    from_name: str,
    amount: Decimal,
    payment_mode: str,
    payment_date: date,
    credit_number: str = '',
    remarks: str = 'Credit',
    recorded_by: Optional[User] = None,
) -> CreditRecord:
    """Record money received from an outside party."""
    credit = CreditRecord.objects.create(
        from_name=from_name,
        credit_number=credit_number,
        payment_date=payment_date,
        payment_mode=payment_mode,
        amount=amount,
        remarks=remarks,
        virtual_transaction_id=generate_virtual_transaction_id(),
        recorded_by=recorded_by,
    )

    logger.info("Credit of %s from %s recorded", amount, from_name)
    return credit


@transaction.atomic
def record_expense(
    *,
    expense_type: str,
    amount: Decimal,
    expense_date: Optional[date] = None,
    expense_time: Optional[time] = None,
    reason: str = '',
    from_person: str = '',
    payment_mode: str = '',
    remarks: str = '',
    recorded_by: Optional[User] = None,
) -> ExpenseRecord:
    """
    Record an office expense (spend) or miscellaneous income (received).

    A spend needs its date, time and a reason of at least three
    characters. A receipt needs the payer's name (three characters or
    more) and the payment mode; its date defaults to today.

    Raises:
        InvalidExpenseError: If the fields required by the type are missing
    """
    if expense_type == ExpenseType.SPEND:
        if expense_date is None or expense_time is None:
            raise InvalidExpenseError("Date and time are required for a spend")
        if len(reason.strip()) < MIN_TEXT_LENGTH:
            raise InvalidExpenseError("Reason must be at least 3 characters")
    elif expense_type == ExpenseType.RECEIVED:
        if len(from_person.strip()) < MIN_TEXT_LENGTH:
            raise InvalidExpenseError("From person must be at least 3 characters")
        if not payment_mode:
            raise InvalidExpenseError("Payment mode is required for money received")
        if expense_date is None:
            expense_date = timezone.localdate()
    else:
        raise InvalidExpenseError(f"Unknown expense type '{expense_type}'")

    expense = ExpenseRecord.objects.create(
        expense_type=expense_type,
        amount=amount,
        expense_date=expense_date,
        expense_time=expense_time,
        reason=reason.strip(),
        from_person=from_person.strip(),
        payment_mode=payment_mode,
        remarks=remarks,
        virtual_transaction_id=generate_virtual_transaction_id(),
        recorded_by=recorded_by,
    )

    logger.info("Expense (%s) of %s recorded", expense_type, amount)
    return expense


@transaction.atomic
def record_salary(
    *,
    employee_id: UUID,
    amount: Decimal,
    payment_date: date,
    remarks: str = '',
    recorded_by: Optional[User] = None,
) -> SalaryRecord:
    """
    Record salary paid to an employee.

    Raises:
        MemberNotFoundError: If the user doesn't exist
        NotEmployeeError: If the user is not an employee
    """
    try:
        employee = User.objects.get(id=employee_id)
    except User.DoesNotExist:
        raise MemberNotFoundError(f"Employee with ID {employee_id} not found")

    if employee.role != UserRole.EMPLOYEE:
        raise NotEmployeeError(f"{employee.get_display_name()} is not an employee")

    salary = SalaryRecord.objects.create(
        employee=employee,
        amount=amount,
        payment_date=payment_date,
        remarks=remarks,
        recorded_by=recorded_by,
    )

    logger.info("Salary of %s paid to %s", amount, employee.username)
    return salary
