import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User, UserRole


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, member_user):
        url = reverse('users:login')
        response = api_client.post(url, {'phone': member_user.phone, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['username'] == 'user900'

    def test_login_wrong_password(self, api_client, member_user):
        url = reverse('users:login')
        response = api_client.post(url, {'phone': member_user.phone, 'password': 'nope'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_inactive(self, api_client, inactive_user):
        url = reverse('users:login')
        response = api_client.post(url, {'phone': inactive_user.phone, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {'phone': '9000000001'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/me/"""

    def test_me(self, employee_client, employee_user):
        response = employee_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['role'] == UserRole.EMPLOYEE
        assert response.data['phone'] == employee_user.phone

    def test_me_unauthenticated(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Member and employee management
# =============================================================================

@pytest.mark.django_db
class TestMembers:
    """Tests for /api/auth/members/"""

    def test_admin_creates_member(self, admin_client):
        url = reverse('users:member-list')
        data = {
            'fullname': 'Ravi Kumar',
            'phone': '9876500001',
            'password': 'Secret123!',
            'address': '12 Temple Street',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['username'] == 'user001'
        assert response.data['due_amount'] == '0.00'

    def test_duplicate_phone_conflict(self, admin_client, member_user):
        url = reverse('users:member-list')
        data = {'fullname': 'Copy', 'phone': member_user.phone, 'password': 'Secret123!'}
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_invalid_phone(self, admin_client):
        url = reverse('users:member-list')
        data = {'fullname': 'Bad Phone', 'phone': '12345', 'password': 'Secret123!'}
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'phone' in response.data

    def test_employee_cannot_create_member(self, employee_client):
        url = reverse('users:member-list')
        data = {'fullname': 'Ravi', 'phone': '9876500001', 'password': 'Secret123!'}
        response = employee_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_employee_lists_members(self, employee_client, member_user):
        response = employee_client.get(reverse('users:member-list'))

        assert response.status_code == status.HTTP_200_OK
        phones = [m['phone'] for m in response.data]
        assert member_user.phone in phones

    def test_member_cannot_list_members(self, member_client):
        response = member_client.get(reverse('users:member-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_member_detail(self, employee_client, member_user):
        url = reverse('users:member-detail', kwargs={'pk': member_user.id})
        response = employee_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['groups'] == []


@pytest.mark.django_db
class TestEmployees:
    """Tests for /api/auth/employees/"""

    def test_admin_creates_employee(self, admin_client):
        url = reverse('users:employee-list')
        data = {
            'fullname': 'Suresh',
            'phone': '9876500010',
            'password': 'Secret123!',
            'job_title': 'Collector',
            'pan_card_number': 'ABCDE1234F',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['username'] == 'EMP001'
        assert User.objects.get(username='EMP001').role == UserRole.EMPLOYEE

    def test_invalid_pan(self, admin_client):
        url = reverse('users:employee-list')
        data = {
            'fullname': 'Suresh',
            'phone': '9876500010',
            'password': 'Secret123!',
            'pan_card_number': 'abc',
        }
        response = admin_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_employee_cannot_list_employees(self, employee_client):
        response = employee_client.get(reverse('users:employee-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
