import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an office administrator."""
    return User.objects.create_user(
        phone='9000000001',
        password='TestPass123!',
        fullname='Office Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def employee_user(db):
    """Create and return an employee."""
    return User.objects.create_user(
        phone='9000000002',
        password='TestPass123!',
        fullname='Field Employee',
        username='EMP900',
        role=UserRole.EMPLOYEE,
    )


@pytest.fixture
def member_user(db):
    """Create and return a chit member."""
    return User.objects.create_user(
        phone='9000000003',
        password='TestPass123!',
        fullname='Chit Member',
        username='user900',
        role=UserRole.MEMBER,
    )


@pytest.fixture
def inactive_user(db):
    """Create and return an inactive member."""
    return User.objects.create_user(
        phone='9000000004',
        password='TestPass123!',
        fullname='Inactive Member',
        is_active=False,
    )


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return an API client authenticated as admin."""
    return _authenticate(api_client, admin_user)


@pytest.fixture
def employee_client(api_client, employee_user):
    """Return an API client authenticated as employee."""
    return _authenticate(api_client, employee_user)


@pytest.fixture
def member_client(api_client, member_user):
    """Return an API client authenticated as member."""
    return _authenticate(api_client, member_user)
