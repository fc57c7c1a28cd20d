from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.auctions.models import AuctionRecord


def _payload(group, winner, **overrides):
    data = {
        'group': str(group.id),
        'winner': str(winner.id),
        'winning_bid_amount': '70000.00',
        'auction_month': 'August 2024',
        'auction_date': '2024-08-10',
        'auction_time': '11:30',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestRecordAuction:
    """Tests for POST /api/auctions/"""

    def test_employee_records_auction(self, employee_client, group, members, employee_user):
        response = employee_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['auction_number'] == 1
        assert response.data['final_amount_to_be_paid'] == '7200.00'
        assert response.data['amount_paid_to_winner'] == '62800.00'
        assert response.data['members_billed'] == 10
        assert response.data['recorded_by']['id'] == str(employee_user.id)

    def test_duplicate_number_conflict(self, employee_client, group, members):
        url = reverse('auctions:auction-list')
        employee_client.post(url, _payload(group, members[0], auction_number=1))
        response = employee_client.post(url, _payload(group, members[1], auction_number=1))

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_bid_over_max(self, employee_client, group, members):
        url = reverse('auctions:auction-list')
        response = employee_client.post(url, _payload(group, members[0], winning_bid_amount='99000'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'maximum' in response.data['error']

    def test_bid_below_min_bid_recorded(self, employee_client, group, members):
        group.min_bid = Decimal('80000.00')
        group.save(update_fields=['min_bid'])

        response = employee_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['final_amount_to_be_paid'] == '7200.00'

    def test_member_forbidden(self, member_client, group, members):
        response = member_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_records_are_immutable(self, employee_client, group, members):
        employee_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))
        auction = AuctionRecord.objects.get()
        url = reverse('auctions:auction-detail', kwargs={'pk': auction.id})

        assert employee_client.patch(url, {'notes': 'x'}).status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert employee_client.delete(url).status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestReadAuctions:

    def test_list_filtered_by_group(self, employee_client, group, members):
        employee_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))

        response = employee_client.get(reverse('auctions:auction-list'), {'group': str(group.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['winner_name'] == 'Member 1'

    def test_charges(self, employee_client, group, members):
        created = employee_client.post(reverse('auctions:auction-list'), _payload(group, members[0]))
        url = reverse('auctions:auction-charges', kwargs={'pk': created.data['id']})

        response = employee_client.get(url)

        assert len(response.data) == 10
        assert {c['amount'] for c in response.data} == {'7200.00'}

    def test_preview(self, employee_client, group):
        url = reverse('auctions:auction-preview')
        response = employee_client.post(url, {'group': str(group.id), 'winning_bid_amount': '70000'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['dividend_per_member'] == '2800.00'
        assert not AuctionRecord.objects.exists()

    def test_preview_rejects_bad_bid(self, employee_client, group):
        url = reverse('auctions:auction-preview')
        response = employee_client.post(url, {'group': str(group.id), 'winning_bid_amount': '98000.01'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_malformed_group_filter(self, employee_client):
        response = employee_client.get(reverse('auctions:auction-list'), {'group': 'not-a-uuid'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'group' in response.data
