from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from decimal import Decimal
import uuid


class BiddingType(models.TextChoices):
    AUCTION = 'auction', 'Auction Based'
    RANDOM = 'random', 'Random Draw'
    PRE_FIXED = 'pre-fixed', 'Pre-fixed'


class ChitGroup(models.Model):
    """Chit fund group: a fixed pot paid into monthly and auctioned each month."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group_name = models.CharField(max_length=200, unique=True)
    description = models.TextField(blank=True)

    # Scheme terms
    total_people = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    total_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    tenure = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text='Number of monthly auctions'
    )
    start_date = models.DateField()
    rate = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text='Monthly installment before dividend'
    )
    commission = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        help_text='Foreman commission, percent of total amount'
    )
    bidding_type = models.CharField(
        max_length=20,
        choices=BiddingType.choices,
        default=BiddingType.AUCTION
    )
    min_bid = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    # Next-auction pointer, rewritten after every auction
    auction_month = models.CharField(max_length=30, blank=True)
    auction_scheduled_date = models.DateField(null=True, blank=True)
    auction_scheduled_time = models.TimeField(null=True, blank=True)
    last_auction_winner = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    last_winning_bid_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'chit_groups'
        indexes = [
            models.Index(fields=['start_date'], name='chit_groups_start_date_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.group_name

    @property
    def commission_amount(self):
        if self.commission is None:
            return Decimal('0.00')
        return (self.commission / Decimal('100')) * self.total_amount

    @property
    def max_bid_amount(self):
        """Largest winning bid the group accepts."""
        return self.total_amount - self.commission_amount

    def has_member(self, user):
        return self.memberships.filter(user=user).exists()

    def member_count(self):
        return self.memberships.count()

    def is_full(self):
        return self.member_count() >= self.total_people


class GroupMembership(models.Model):
    """A member's seat in a chit group, kept in joining order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='chit_memberships'
    )
    group = models.ForeignKey(ChitGroup, on_delete=models.CASCADE, related_name='memberships')
    position = models.PositiveIntegerField()
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_memberships'
        constraints = [
            models.UniqueConstraint(fields=['group', 'user'], name='unique_group_member'),
            models.UniqueConstraint(fields=['group', 'position'], name='unique_group_position'),
        ]
        indexes = [
            models.Index(fields=['user', 'joined_at'], name='membership_user_joined_idx'),
        ]
        ordering = ['position']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.group.group_name} (#{self.position})"
