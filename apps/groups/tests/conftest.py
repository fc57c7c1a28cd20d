import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.groups.models import ChitGroup, GroupMembership


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an office administrator."""
    return User.objects.create_user(
        phone='9100000001',
        password='TestPass123!',
        fullname='Office Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def employee_user(db):
    """Create and return an employee."""
    return User.objects.create_user(
        phone='9100000002',
        password='TestPass123!',
        fullname='Field Employee',
        username='EMP001',
        role=UserRole.EMPLOYEE,
    )


@pytest.fixture
def members(db):
    """Create and return three chit members."""
    return [
        User.objects.create_user(
            phone=f'91000001{i:02d}',
            password='TestPass123!',
            fullname=f'Member {i}',
            username=f'user{i:03d}',
            role=UserRole.MEMBER,
        )
        for i in range(1, 4)
    ]


@pytest.fixture
def outsider(db):
    """Create and return a member not seated in any group."""
    return User.objects.create_user(
        phone='9100000999',
        password='TestPass123!',
        fullname='Outsider',
        username='user999',
        role=UserRole.MEMBER,
    )


@pytest.fixture
def group(db):
    """Create and return an empty three-seat group."""
    return ChitGroup.objects.create(
        group_name='Test Chit 3L',
        total_people=3,
        total_amount=Decimal('30000.00'),
        tenure=3,
        start_date=date(2024, 1, 1),
        rate=Decimal('10000.00'),
        commission=Decimal('5.00'),
    )


@pytest.fixture
def seated_group(group, members):
    """Group with its first two members seated."""
    for position, member in enumerate(members[:2], start=1):
        GroupMembership.objects.create(group=group, user=member, position=position)
    return group


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(api_client, admin_user):
    return _authenticate(api_client, admin_user)


@pytest.fixture
def employee_client(api_client, employee_user):
    return _authenticate(api_client, employee_user)


@pytest.fixture
def member_client(api_client, members):
    return _authenticate(api_client, members[0])
