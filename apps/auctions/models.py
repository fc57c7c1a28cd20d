from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class AuctionRecord(models.Model):
    """
    Outcome of one monthly auction in a chit group.

    Immutable once written. Amount fields hold the settlement computed at
    auction time; `billed_at` is set once every member has been charged.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(
        'groups.ChitGroup',
        on_delete=models.PROTECT,
        related_name='auction_records'
    )
    auction_number = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    auction_month = models.CharField(max_length=30)
    auction_date = models.DateField()
    auction_time = models.TimeField()

    winner = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='auctions_won'
    )
    winning_bid_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    # Settlement
    commission_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    discount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    net_discount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    dividend_per_member = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    final_amount_to_be_paid = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    amount_paid_to_winner = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    notes = models.TextField(blank=True)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='auctions_recorded'
    )
    billed_at = models.DateTimeField(null=True, blank=True)
    recorded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'auction_records'
        constraints = [
            models.UniqueConstraint(
                fields=['group', 'auction_number'],
                name='unique_group_auction_number'
            ),
            models.UniqueConstraint(
                fields=['group', 'winner'],
                name='unique_group_winner'
            ),
        ]
        indexes = [
            models.Index(fields=['group', 'auction_date'], name='auction_group_date_idx'),
            models.Index(fields=['recorded_at'], name='auction_recorded_at_idx'),
        ]
        ordering = ['group', 'auction_number']

    def __str__(self):
        return f"{self.group.group_name} #{self.auction_number} - {self.winner.get_display_name()}"

    @property
    def is_billed(self):
        return self.billed_at is not None


class InstallmentCharge(models.Model):
    """The installment one member owes for one auction."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    auction = models.ForeignKey(
        AuctionRecord,
        on_delete=models.CASCADE,
        related_name='charges'
    )
    member = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='installment_charges'
    )
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'installment_charges'
        constraints = [
            models.UniqueConstraint(
                fields=['auction', 'member'],
                name='unique_auction_member_charge'
            ),
        ]
        indexes = [
            models.Index(fields=['member', 'created_at'], name='charge_member_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.member.get_display_name()} owes {self.amount} for {self.auction}"
