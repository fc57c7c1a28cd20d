"""
Reports Module
==============

Read-side views of the ledger. Nothing is cached or materialized: each
report re-derives its totals from the append-only ledger rows on every
call, which is fine for a single back-office.

Classes:
    LedgerReports: Static methods for the day sheet, master record,
        due sheet, member statement and dashboard.

Money flows:
    credit (money in):  collections, credits, expenses of type received
    debit (money out):  payments, salaries, expenses of type spend

Every row is placed in time by its ``recorded_at`` timestamp, and days
are cut at local midnight in ``TIME_ZONE``.

Example:
    Closing a day::

        from apps.reports.reports import LedgerReports

        sheet = LedgerReports.day_sheet(date(2024, 8, 15))
        print(sheet['opening_balance'], sheet['closing_balance'])

Note:
    This module is read-only and doesn't modify any data. All methods
    are static and return plain dictionaries.
"""

from datetime import datetime, time, timedelta
from decimal import Decimal

from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.auctions.models import AuctionRecord, InstallmentCharge
from apps.groups.models import ChitGroup, GroupMembership
from apps.ledger.models import (
    CollectionRecord,
    PaymentRecord,
    CreditRecord,
    ExpenseRecord,
    SalaryRecord,
    ExpenseType,
)

from .exceptions import MemberNotFoundError

ZERO = Decimal('0.00')

CREDIT = 'credit'
DEBIT = 'debit'


def _total(queryset):
    return queryset.aggregate(total=Coalesce(Sum('amount'), ZERO))['total']


def _day_bounds(target_date):
    """Aware [start, end) of a local calendar day."""
    start = timezone.make_aware(datetime.combine(target_date, time.min))
    end = timezone.make_aware(datetime.combine(target_date + timedelta(days=1), time.min))
    return start, end


def _ledger_sources():
    """
    Every ledger row type with its direction and how to describe it.

    Each entry: (source, queryset, direction, party, mode, transaction id)
    """
    return [
        (
            'collection',
            CollectionRecord.objects.select_related('user'),
            CREDIT,
            lambda r: r.user.get_display_name(),
            lambda r: r.payment_mode,
            lambda r: r.virtual_transaction_id,
        ),
        (
            'credit',
            CreditRecord.objects.all(),
            CREDIT,
            lambda r: r.from_name,
            lambda r: r.payment_mode,
            lambda r: r.virtual_transaction_id,
        ),
        (
            'expense_received',
            ExpenseRecord.objects.filter(expense_type=ExpenseType.RECEIVED),
            CREDIT,
            lambda r: r.from_person,
            lambda r: r.payment_mode,
            lambda r: r.virtual_transaction_id,
        ),
        (
            'payment',
            PaymentRecord.objects.select_related('user'),
            DEBIT,
            lambda r: r.user.get_display_name(),
            lambda r: r.payment_mode,
            lambda r: r.virtual_transaction_id,
        ),
        (
            'salary',
            SalaryRecord.objects.select_related('employee'),
            DEBIT,
            lambda r: r.employee.get_display_name(),
            lambda r: '',
            lambda r: '',
        ),
        (
            'expense_spend',
            ExpenseRecord.objects.filter(expense_type=ExpenseType.SPEND),
            DEBIT,
            lambda r: r.reason,
            lambda r: r.payment_mode,
            lambda r: r.virtual_transaction_id,
        ),
    ]


def _transaction_rows(**filters):
    """Ledger rows of every type matching ``filters``, unsorted."""
    rows = []
    for source, queryset, direction, party, mode, txn_id in _ledger_sources():
        for record in queryset.filter(**filters):
            rows.append({
                'kind': 'transaction',
                'source': source,
                'direction': direction,
                'recorded_at': record.recorded_at,
                'party': party(record),
                'amount': record.amount,
                'mode': mode(record),
                'remarks': record.remarks,
                'virtual_transaction_id': txn_id(record),
                'record_id': record.id,
            })
    return rows


def _balance(**filters):
    """Money in minus money out over the rows matching ``filters``."""
    balance = ZERO
    for _source, queryset, direction, *_ in _ledger_sources():
        amount = _total(queryset.filter(**filters))
        balance += amount if direction == CREDIT else -amount
    return balance


def _summary_row(kind, recorded_at, amount, label):
    return {
        'kind': kind,
        'source': None,
        'direction': None,
        'recorded_at': recorded_at,
        'party': '',
        'amount': amount,
        'mode': '',
        'remarks': label,
        'virtual_transaction_id': '',
        'record_id': None,
    }


def _split_totals(rows):
    credits = sum((r['amount'] for r in rows if r['direction'] == CREDIT), ZERO)
    debits = sum((r['amount'] for r in rows if r['direction'] == DEBIT), ZERO)
    return credits, debits


class LedgerReports:
    """
    Read-only ledger reports.

    Methods:
        day_sheet: Opening balance, the day's rows and closing balance.
        master_record: Every transaction, newest first.
        due_sheet: Members and what they currently owe.
        member_statement: One member's charges, collections and payouts.
        dashboard: Headline counts and totals for the office.
    """

    @staticmethod
    def day_sheet(target_date):
        """
        Build the cash sheet for one day.

        The opening balance replays every ledger row recorded before the
        start of ``target_date``. The day's rows are sorted by
        ``recorded_at`` and bracketed by an opening and a closing row,
        where closing = opening + credits - debits.

        Args:
            target_date (date): Local calendar day.

        Returns:
            dict: date, opening_balance, total_credits, total_debits,
                closing_balance and rows (opening row, transaction rows,
                closing row).

        Note:
            When nothing is backdated, the closing balance of one day
            equals the opening balance of the next.
        """
        start, end = _day_bounds(target_date)

        opening = _balance(recorded_at__lt=start)
        transactions = sorted(
            _transaction_rows(recorded_at__gte=start, recorded_at__lt=end),
            key=lambda r: r['recorded_at'],
        )
        credits, debits = _split_totals(transactions)
        closing = opening + credits - debits

        rows = [_summary_row('opening', start, opening, 'Opening Balance')]
        rows.extend(transactions)
        rows.append(_summary_row('closing', end, closing, 'Closing Balance'))

        return {
            'date': target_date,
            'opening_balance': opening,
            'total_credits': credits,
            'total_debits': debits,
            'closing_balance': closing,
            'rows': rows,
        }

    @staticmethod
    def master_record(days=None):
        """
        List every ledger transaction, newest first.

        Args:
            days (int, optional): Only rows recorded in the last N days.
                None returns the whole history.

        Returns:
            dict: days, total_credits, total_debits, net and rows.
        """
        filters = {}
        if days:
            filters['recorded_at__gte'] = timezone.now() - timedelta(days=days)

        rows = sorted(
            _transaction_rows(**filters),
            key=lambda r: r['recorded_at'],
            reverse=True,
        )
        credits, debits = _split_totals(rows)

        return {
            'days': days,
            'total_credits': credits,
            'total_debits': debits,
            'net': credits - debits,
            'rows': rows,
        }

    @staticmethod
    def due_sheet(only_outstanding=False):
        """
        Members with their running due, highest first.

        Args:
            only_outstanding (bool): Skip members who owe nothing
                (zero or negative due).

        Returns:
            dict: count, total_outstanding (sum of positive dues) and
                members, each with the names of their groups.
        """
        members = User.objects.filter(role=UserRole.MEMBER).prefetch_related(
            'chit_memberships__group'
        ).order_by('-due_amount', 'username')
        if only_outstanding:
            members = members.filter(due_amount__gt=0)

        rows = [
            {
                'user_id': member.id,
                'username': member.username,
                'fullname': member.fullname,
                'phone': member.phone,
                'due_amount': member.due_amount,
                'groups': [m.group.group_name for m in member.chit_memberships.all()],
            }
            for member in members
        ]

        outstanding = User.objects.filter(
            role=UserRole.MEMBER, due_amount__gt=0
        ).aggregate(total=Coalesce(Sum('due_amount'), ZERO))['total']

        return {
            'count': len(rows),
            'total_outstanding': outstanding,
            'members': rows,
        }

    @staticmethod
    def member_statement(user_id):
        """
        Payment history of one member.

        Args:
            user_id (UUID): Member to report on.

        Returns:
            dict: member, due_amount, groups, charges (installments billed
                by auctions), collections, payments, total_charged and
                total_collected.

        Raises:
            MemberNotFoundError: If the user doesn't exist.
        """
        try:
            member = User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise MemberNotFoundError(f"Member with ID {user_id} not found")

        memberships = GroupMembership.objects.filter(user=member).select_related('group')
        charges = InstallmentCharge.objects.filter(member=member).select_related(
            'auction__group'
        ).order_by('created_at')
        collections = CollectionRecord.objects.filter(user=member).select_related(
            'group'
        ).order_by('recorded_at')
        payments = PaymentRecord.objects.filter(user=member).select_related(
            'group'
        ).order_by('recorded_at')

        return {
            'member': {
                'id': member.id,
                'username': member.username,
                'fullname': member.fullname,
                'phone': member.phone,
            },
            'due_amount': member.due_amount,
            'groups': [
                {
                    'group_id': m.group_id,
                    'group_name': m.group.group_name,
                    'position': m.position,
                }
                for m in memberships
            ],
            'charges': [
                {
                    'auction_id': c.auction_id,
                    'group_name': c.auction.group.group_name,
                    'auction_number': c.auction.auction_number,
                    'auction_month': c.auction.auction_month,
                    'amount': c.amount,
                    'created_at': c.created_at,
                }
                for c in charges
            ],
            'collections': [
                {
                    'id': c.id,
                    'receipt_number': c.receipt_number,
                    'group_name': c.group.group_name,
                    'auction_number': c.auction_number,
                    'amount': c.amount,
                    'payment_date': c.payment_date,
                    'payment_mode': c.payment_mode,
                    'balance_for_this_installment': c.balance_for_this_installment,
                    'recorded_at': c.recorded_at,
                }
                for c in collections
            ],
            'payments': [
                {
                    'id': p.id,
                    'group_name': p.group.group_name,
                    'auction_number': p.auction_number,
                    'amount': p.amount,
                    'payment_date': p.payment_date,
                    'payment_mode': p.payment_mode,
                    'recorded_at': p.recorded_at,
                }
                for p in payments
            ],
            'total_charged': _total(charges),
            'total_collected': _total(collections),
        }

    @staticmethod
    def dashboard():
        """
        Headline numbers for the office dashboard.

        Returns:
            dict: groups_count, members_count, employees_count,
                auctions_count, total_outstanding_due,
                today_collections_count and today_collections_total.
        """
        start, end = _day_bounds(timezone.localdate())
        today_collections = CollectionRecord.objects.filter(
            recorded_at__gte=start, recorded_at__lt=end
        )

        return {
            'groups_count': ChitGroup.objects.count(),
            'members_count': User.objects.filter(role=UserRole.MEMBER).count(),
            'employees_count': User.objects.filter(role=UserRole.EMPLOYEE).count(),
            'auctions_count': AuctionRecord.objects.count(),
            'total_outstanding_due': User.objects.filter(
                role=UserRole.MEMBER, due_amount__gt=0
            ).aggregate(total=Coalesce(Sum('due_amount'), ZERO))['total'],
            'today_collections_count': today_collections.count(),
            'today_collections_total': _total(today_collections),
        }
