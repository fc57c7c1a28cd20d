import pytest
from datetime import date, time, timedelta
from decimal import Decimal

from django.utils import timezone

from apps.accounts.models import User
from apps.ledger.models import ExpenseType
from apps.ledger.services import (
    record_collection,
    record_payment,
    record_credit,
    record_expense,
    record_salary,
)
from apps.reports.exceptions import MemberNotFoundError
from apps.reports.reports import LedgerReports

DAY = date(2024, 8, 15)


def _stamp(record, recorded_at):
    """Move a ledger row to the given recorded_at."""
    type(record).objects.filter(id=record.id).update(recorded_at=recorded_at)


def _collect(group, member, amount, **extra):
    return record_collection(
        group_id=group.id,
        user_id=member.id,
        amount=Decimal(amount),
        payment_mode='cash',
        payment_date=DAY,
        payment_time=time(10, 0),
        **extra
    )


@pytest.fixture
def ledger_history(group, member, employee_user, local_dt):
    """
    Day before DAY: credit 50000 in, office spend 500 out.
    DAY: received 1200 (09:00), collection 3000 (10:00), salary 18000 (12:00).
    """
    credit = record_credit(
        from_name='Ravi Kumar',
        amount=Decimal('50000.00'),
        payment_mode='upi',
        payment_date=DAY - timedelta(days=1),
    )
    _stamp(credit, local_dt(DAY - timedelta(days=1), 10))

    spend = record_expense(
        expense_type=ExpenseType.SPEND,
        amount=Decimal('500.00'),
        expense_date=DAY - timedelta(days=1),
        expense_time=time(16, 0),
        reason='Stationery',
    )
    _stamp(spend, local_dt(DAY - timedelta(days=1), 16))

    received = record_expense(
        expense_type=ExpenseType.RECEIVED,
        amount=Decimal('1200.00'),
        expense_date=DAY,
        from_person='Scrap dealer',
        payment_mode='cash',
    )
    _stamp(received, local_dt(DAY, 9))

    collection = _collect(group, member, '3000.00')
    _stamp(collection, local_dt(DAY, 10))

    salary = record_salary(
        employee_id=employee_user.id,
        amount=Decimal('18000.00'),
        payment_date=DAY,
    )
    _stamp(salary, local_dt(DAY, 12))

    return {
        'credit': credit,
        'spend': spend,
        'received': received,
        'collection': collection,
        'salary': salary,
    }


@pytest.mark.django_db
class TestDaySheet:
    """Tests for LedgerReports.day_sheet"""

    def test_opening_replays_history(self, ledger_history):
        sheet = LedgerReports.day_sheet(DAY)

        assert sheet['opening_balance'] == Decimal('49500.00')

    def test_totals_and_closing(self, ledger_history):
        sheet = LedgerReports.day_sheet(DAY)

        assert sheet['total_credits'] == Decimal('4200.00')
        assert sheet['total_debits'] == Decimal('18000.00')
        assert sheet['closing_balance'] == Decimal('35700.00')
        assert sheet['closing_balance'] == (
            sheet['opening_balance'] + sheet['total_credits'] - sheet['total_debits']
        )

    def test_rows_bracketed_and_sorted(self, ledger_history, member):
        rows = LedgerReports.day_sheet(DAY)['rows']

        assert [r['kind'] for r in rows] == [
            'opening', 'transaction', 'transaction', 'transaction', 'closing'
        ]
        assert [r['source'] for r in rows[1:-1]] == ['expense_received', 'collection', 'salary']
        assert [r['direction'] for r in rows[1:-1]] == ['credit', 'credit', 'debit']
        assert rows[0]['remarks'] == 'Opening Balance'
        assert rows[-1]['remarks'] == 'Closing Balance'
        assert rows[2]['party'] == member.get_display_name()
        assert rows[2]['record_id'] == ledger_history['collection'].id

    def test_next_day_opens_at_previous_close(self, ledger_history):
        today = LedgerReports.day_sheet(DAY)
        tomorrow = LedgerReports.day_sheet(DAY + timedelta(days=1))

        assert tomorrow['opening_balance'] == today['closing_balance']
        assert tomorrow['closing_balance'] == today['closing_balance']
        assert [r['kind'] for r in tomorrow['rows']] == ['opening', 'closing']

    def test_day_cut_at_local_midnight(self, group, member, local_dt):
        late = _collect(group, member, '100.00')
        _stamp(late, local_dt(DAY, 23, 45))
        early = _collect(group, member, '200.00')
        _stamp(early, local_dt(DAY + timedelta(days=1), 0, 15))

        assert LedgerReports.day_sheet(DAY)['total_credits'] == Decimal('100.00')
        assert LedgerReports.day_sheet(DAY + timedelta(days=1))['total_credits'] == Decimal('200.00')

    def test_payment_is_debit(self, group, members, auction, local_dt):
        payment = record_payment(
            group_id=group.id,
            user_id=members[0].id,
            auction_id=auction.id,
            amount=Decimal('62800.00'),
            payment_mode='netbanking',
            payment_date=DAY,
            payment_time=time(15, 0),
        )
        _stamp(payment, local_dt(DAY, 15))

        sheet = LedgerReports.day_sheet(DAY)

        assert sheet['total_debits'] == Decimal('62800.00')
        assert sheet['closing_balance'] == Decimal('-62800.00')

    def test_empty_ledger(self, db):
        sheet = LedgerReports.day_sheet(DAY)

        assert sheet['opening_balance'] == Decimal('0.00')
        assert sheet['closing_balance'] == Decimal('0.00')


@pytest.mark.django_db
class TestMasterRecord:
    """Tests for LedgerReports.master_record"""

    def test_everything_newest_first(self, ledger_history):
        record = LedgerReports.master_record()

        assert [r['source'] for r in record['rows']] == [
            'salary', 'collection', 'expense_received', 'expense_spend', 'credit'
        ]
        assert record['total_credits'] == Decimal('54200.00')
        assert record['total_debits'] == Decimal('18500.00')
        assert record['net'] == Decimal('35700.00')

    def test_limited_to_recent_days(self, group, member, local_dt):
        old = _collect(group, member, '100.00')
        _stamp(old, timezone.now() - timedelta(days=20))
        _collect(group, member, '200.00')

        record = LedgerReports.master_record(days=7)

        assert record['days'] == 7
        assert len(record['rows']) == 1
        assert record['rows'][0]['amount'] == Decimal('200.00')


@pytest.mark.django_db
class TestDueSheet:
    """Tests for LedgerReports.due_sheet"""

    def test_highest_due_first(self, group, members, auction):
        _collect(group, members[3], '7200.00', auction_id=auction.id)
        _collect(group, members[4], '1000.00', auction_id=auction.id)

        sheet = LedgerReports.due_sheet()

        assert sheet['count'] == 10
        assert sheet['members'][0]['due_amount'] == Decimal('7200.00')
        assert sheet['members'][-1]['user_id'] == members[3].id
        assert sheet['members'][-1]['groups'] == ['Chit 1L']
        assert sheet['total_outstanding'] == Decimal('7200.00') * 8 + Decimal('6200.00')

    def test_only_outstanding(self, group, members, auction):
        _collect(group, members[3], '7200.00', auction_id=auction.id)

        sheet = LedgerReports.due_sheet(only_outstanding=True)

        assert sheet['count'] == 9
        assert members[3].id not in [m['user_id'] for m in sheet['members']]


@pytest.mark.django_db
class TestMemberStatement:
    """Tests for LedgerReports.member_statement"""

    def test_statement(self, group, member, auction):
        _collect(group, member, '3000.00', auction_id=auction.id)

        statement = LedgerReports.member_statement(member.id)

        assert statement['due_amount'] == Decimal('4200.00')
        assert statement['groups'][0]['group_name'] == 'Chit 1L'
        assert statement['charges'][0]['amount'] == Decimal('7200.00')
        assert statement['charges'][0]['auction_number'] == 1
        assert statement['collections'][0]['balance_for_this_installment'] == Decimal('4200.00')
        assert statement['total_charged'] - statement['total_collected'] == statement['due_amount']

    def test_unknown_member(self, db):
        with pytest.raises(MemberNotFoundError):
            LedgerReports.member_statement('00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
def test_dashboard(group, member, auction, employee_user):
    _collect(group, member, '3000.00', auction_id=auction.id)

    data = LedgerReports.dashboard()

    assert data['groups_count'] == 1
    assert data['members_count'] == 10
    assert data['employees_count'] == 1
    assert data['auctions_count'] == 1
    assert data['total_outstanding_due'] == Decimal('72000.00') - Decimal('3000.00')
    assert data['today_collections_count'] == 1
    assert data['today_collections_total'] == Decimal('3000.00')
    assert User.objects.get(id=member.id).due_amount == Decimal('4200.00')
