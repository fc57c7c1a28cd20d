import pytest
from datetime import date, datetime, time
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.auctions.services import start_auction
from apps.groups.models import ChitGroup, GroupMembership


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def local_dt():
    """Build an aware datetime from a local date and clock time."""
    def build(day, hour, minute=0):
        return timezone.make_aware(datetime.combine(day, time(hour, minute)))
    return build


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        phone='9400000001',
        password='TestPass123!',
        fullname='Report Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def employee_user(db):
    return User.objects.create_user(
        phone='9400000002',
        password='TestPass123!',
        fullname='Report Employee',
        username='EMP001',
        role=UserRole.EMPLOYEE,
    )


@pytest.fixture
def members(db):
    return [
        User.objects.create_user(
            phone=f'94000001{i:02d}',
            password='TestPass123!',
            fullname=f'Member {i}',
            username=f'user{i:03d}',
            role=UserRole.MEMBER,
        )
        for i in range(1, 11)
    ]


@pytest.fixture
def member(members):
    return members[1]


# =============================================================================
# Groups and auctions
# =============================================================================

@pytest.fixture
def group(members):
    group = ChitGroup.objects.create(
        group_name='Chit 1L',
        total_people=10,
        total_amount=Decimal('100000.00'),
        tenure=10,
        start_date=date(2024, 8, 1),
        rate=Decimal('10000.00'),
        commission=Decimal('2.00'),
    )
    for position, m in enumerate(members, start=1):
        GroupMembership.objects.create(group=group, user=m, position=position)
    return group


@pytest.fixture
def auction(group, members):
    """First auction of the group; every member owes 7200."""
    return start_auction(
        group_id=group.id,
        winner=members[0],
        winning_bid_amount=Decimal('70000.00'),
        auction_month='August 2024',
        auction_date=date(2024, 8, 10),
        auction_time=time(11, 0),
    )


# =============================================================================
# Clients
# =============================================================================

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
def member_client(api_client, member):
    return _authenticate(api_client, member)
