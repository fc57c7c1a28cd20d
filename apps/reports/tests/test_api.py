import pytest
from datetime import time
from decimal import Decimal
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.ledger.services import record_collection, record_credit


def _collect(group, member, auction, amount='3000.00'):
    return record_collection(
        group_id=group.id,
        user_id=member.id,
        auction_id=auction.id,
        amount=Decimal(amount),
        payment_mode='cash',
        payment_date=timezone.localdate(),
        payment_time=time(10, 0),
    )


@pytest.mark.django_db
class TestDaySheetEndpoint:
    """Tests for GET /api/reports/day-sheet/"""

    def test_defaults_to_today(self, employee_client, group, member, auction):
        _collect(group, member, auction)
        record_credit(
            from_name='Ravi Kumar',
            amount=Decimal('500.00'),
            payment_mode='upi',
            payment_date=timezone.localdate(),
        )

        response = employee_client.get(reverse('reports:day-sheet'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['date'] == timezone.localdate().isoformat()
        assert response.data['opening_balance'] == '0.00'
        assert response.data['total_credits'] == '3500.00'
        assert response.data['closing_balance'] == '3500.00'
        assert len(response.data['rows']) == 4

    def test_explicit_date(self, employee_client):
        response = employee_client.get(reverse('reports:day-sheet'), {'date': '2024-08-15'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['date'] == '2024-08-15'

    def test_invalid_date(self, employee_client):
        response = employee_client.get(reverse('reports:day-sheet'), {'date': '15/08/2024'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_member_forbidden(self, member_client):
        response = member_client.get(reverse('reports:day-sheet'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('reports:day-sheet'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestMasterRecordEndpoint:
    """Tests for GET /api/reports/master-record/"""

    def test_all(self, admin_client, group, member, auction):
        _collect(group, member, auction)

        response = admin_client.get(reverse('reports:master-record'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['days'] is None
        assert response.data['rows'][0]['source'] == 'collection'

    def test_bad_days(self, admin_client):
        response = admin_client.get(reverse('reports:master-record'), {'days': '0'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestDueSheetEndpoint:
    """Tests for GET /api/reports/due-sheet/"""

    def test_only_outstanding(self, employee_client, group, member, auction):
        _collect(group, member, auction, amount='7200.00')

        response = employee_client.get(reverse('reports:due-sheet'), {'only_outstanding': 'true'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 9
        assert response.data['members'][0]['due_amount'] == '7200.00'


@pytest.mark.django_db
class TestMemberStatementEndpoint:
    """Tests for GET /api/reports/members/{id}/statement/"""

    def test_member_reads_own(self, member_client, group, member, auction):
        _collect(group, member, auction)
        url = reverse('reports:member-statement', kwargs={'user_id': member.id})

        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['due_amount'] == '4200.00'
        assert response.data['collections'][0]['amount'] == '3000.00'

    def test_member_cannot_read_others(self, member_client, members, auction):
        url = reverse('reports:member-statement', kwargs={'user_id': members[5].id})

        assert member_client.get(url).status_code == status.HTTP_403_FORBIDDEN

    def test_staff_reads_any(self, employee_client, members, auction):
        url = reverse('reports:member-statement', kwargs={'user_id': members[5].id})

        response = employee_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_charged'] == '7200.00'

    def test_unknown_member(self, employee_client):
        url = reverse(
            'reports:member-statement',
            kwargs={'user_id': '00000000-0000-0000-0000-000000000000'},
        )

        assert employee_client.get(url).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
def test_dashboard_endpoint(admin_client, group, auction):
    response = admin_client.get(reverse('reports:dashboard'))

    assert response.status_code == status.HTTP_200_OK
    assert response.data['groups_count'] == 1
    assert response.data['total_outstanding_due'] == '72000.00'
