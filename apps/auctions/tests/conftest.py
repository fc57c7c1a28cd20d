import pytest
from datetime import date, time
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
def employee_user(db):
    """Create and return an employee."""
    return User.objects.create_user(
        phone='9200000002',
        password='TestPass123!',
        fullname='Field Employee',
        username='EMP001',
        role=UserRole.EMPLOYEE,
    )


@pytest.fixture
def members(db):
    """Create and return ten chit members."""
    return [
        User.objects.create_user(
            phone=f'92000001{i:02d}',
            password='TestPass123!',
            fullname=f'Member {i}',
            username=f'user{i:03d}',
            role=UserRole.MEMBER,
        )
        for i in range(1, 11)
    ]


@pytest.fixture
def outsider(db):
    """Create and return a member who is not in the group."""
    return User.objects.create_user(
        phone='9200000999',
        password='TestPass123!',
        fullname='Outsider',
        username='user999',
        role=UserRole.MEMBER,
    )


@pytest.fixture
def group(members):
    """1 lakh chit, 2% commission, 10000 monthly, ten seated members."""
    group = ChitGroup.objects.create(
        group_name='Chit 1L',
        total_people=10,
        total_amount=Decimal('100000.00'),
        tenure=10,
        start_date=date(2024, 8, 1),
        rate=Decimal('10000.00'),
        commission=Decimal('2.00'),
    )
    for position, member in enumerate(members, start=1):
        GroupMembership.objects.create(group=group, user=member, position=position)
    return group


@pytest.fixture
def auction_kwargs(group, members, employee_user):
    """Keyword arguments for a valid first auction."""
    return dict(
        group_id=group.id,
        winner=members[0],
        winning_bid_amount=Decimal('70000.00'),
        auction_month='August 2024',
        auction_date=date(2024, 8, 10),
        auction_time=time(11, 30),
        recorded_by=employee_user,
    )


@pytest.fixture
def employee_client(api_client, employee_user):
    """Return an API client authenticated as employee."""
    refresh = RefreshToken.for_user(employee_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def member_client(api_client, members):
    """Return an API client authenticated as a member."""
    refresh = RefreshToken.for_user(members[0])
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
