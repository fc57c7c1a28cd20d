import pytest
from datetime import date, time
from decimal import Decimal
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
def admin_user(db):
    return User.objects.create_user(
        phone='9300000001',
        password='TestPass123!',
        fullname='Office Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def employee_user(db):
    return User.objects.create_user(
        phone='9300000002',
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
            phone=f'93000001{i:02d}',
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


@pytest.fixture
def outsider(db):
    return User.objects.create_user(
        phone='9300000999',
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
    for position, m in enumerate(members, start=1):
        GroupMembership.objects.create(group=group, user=m, position=position)
    return group


@pytest.fixture
def auction(group, members, employee_user):
    """First auction: bid 70000, every member owes 7200."""
    return start_auction(
        group_id=group.id,
        winner=members[0],
        winning_bid_amount=Decimal('70000.00'),
        auction_month='August 2024',
        auction_date=date(2024, 8, 10),
        auction_time=time(11, 0),
        recorded_by=employee_user,
    )


@pytest.fixture
def collection_kwargs(group, member, auction, employee_user):
    """Keyword arguments for a 3000 cash collection against the first auction."""
    return dict(
        group_id=group.id,
        user_id=member.id,
        auction_id=auction.id,
        amount=Decimal('3000.00'),
        payment_mode='cash',
        payment_date=date(2024, 8, 15),
        payment_time=time(10, 0),
        recorded_by=employee_user,
    )


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
