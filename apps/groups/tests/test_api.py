import pytest
from django.urls import reverse
from rest_framework import status

from apps.groups.models import ChitGroup


@pytest.mark.django_db
class TestGroupCreate:
    """Tests for POST /api/groups/"""

    def _payload(self, **overrides):
        data = {
            'group_name': 'Chit 1L',
            'total_people': 10,
            'total_amount': '100000.00',
            'tenure': 10,
            'start_date': '2024-08-01',
            'rate': '10000.00',
            'commission': '2.00',
        }
        data.update(overrides)
        return data

    def test_admin_creates_group(self, admin_client, members):
        url = reverse('groups:group-list')
        data = self._payload(members=[str(m.id) for m in members])
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['member_count'] == 3
        assert response.data['commission_amount'] == '2000.00'
        assert response.data['max_bid_amount'] == '98000.00'

    def test_too_many_members(self, admin_client, members):
        url = reverse('groups:group-list')
        data = self._payload(total_people=2, members=[str(m.id) for m in members])
        response = admin_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'members' in response.data

    def test_duplicate_name(self, admin_client, group):
        url = reverse('groups:group-list')
        response = admin_client.post(url, self._payload(group_name=group.group_name), format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_employee_cannot_create(self, employee_client):
        url = reverse('groups:group-list')
        response = employee_client.post(url, self._payload(), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not ChitGroup.objects.exists()


@pytest.mark.django_db
class TestGroupRead:
    """Tests for listing and retrieving groups."""

    def test_staff_sees_all_groups(self, employee_client, group):
        response = employee_client.get(reverse('groups:group-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_member_sees_only_own_groups(self, member_client, seated_group):
        ChitGroup.objects.create(
            group_name='Other', total_people=5, total_amount='50000.00',
            tenure=5, start_date='2024-01-01',
        )
        response = member_client.get(reverse('groups:group-list'))

        assert response.data['count'] == 1
        assert response.data['results'][0]['group_name'] == seated_group.group_name

    def test_members_in_order(self, employee_client, seated_group, members):
        url = reverse('groups:group-members', kwargs={'pk': seated_group.id})
        response = employee_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [m['user']['username'] for m in response.data] == ['user001', 'user002']
        assert response.data[0]['due_amount'] == '0.00'

    def test_my_groups(self, member_client, seated_group):
        response = member_client.get(reverse('groups:my-groups'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    def test_auction_state(self, employee_client, group):
        url = reverse('groups:group-auction-state', kwargs={'pk': group.id})
        response = employee_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['next_auction_number'] == 1

    def test_member_cannot_read_auction_state(self, member_client, seated_group):
        url = reverse('groups:group-auction-state', kwargs={'pk': seated_group.id})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_group_cannot_be_deleted(self, admin_client, group):
        url = reverse('groups:group-detail', kwargs={'pk': group.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestAddMember:
    """Tests for POST /api/groups/{id}/add_member/"""

    def test_admin_adds_member(self, admin_client, seated_group, members):
        url = reverse('groups:group-add-member', kwargs={'pk': seated_group.id})
        response = admin_client.post(url, {'user_id': str(members[2].id)})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['position'] == 3

    def test_already_member(self, admin_client, seated_group, members):
        url = reverse('groups:group-add-member', kwargs={'pk': seated_group.id})
        response = admin_client.post(url, {'user_id': str(members[0].id)})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_group_full(self, admin_client, seated_group, members, outsider):
        url = reverse('groups:group-add-member', kwargs={'pk': seated_group.id})
        admin_client.post(url, {'user_id': str(members[2].id)})
        response = admin_client.post(url, {'user_id': str(outsider.id)})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
