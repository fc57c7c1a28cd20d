from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid


class PaymentMode(models.TextChoices):
    CASH = 'cash', 'Cash'
    UPI = 'upi', 'UPI'
    NETBANKING = 'netbanking', 'Netbanking'


class PaymentType(models.TextChoices):
    FULL = 'full', 'Full Payment'
    PARTIAL = 'partial', 'Partial Payment'


class ExpenseType(models.TextChoices):
    SPEND = 'spend', 'Spend'
    RECEIVED = 'received', 'Received'


def positive_amount_field(**kwargs):
    return models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        **kwargs
    )


def snapshot_amount_field():
    return models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)


class CollectionRecord(models.Model):
    """
    Money received from a member against their dues.

    Append-only. Snapshot fields capture the member's position at the
    moment of payment and are never recomputed.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    receipt_number = models.CharField(max_length=7, unique=True, editable=False)
    company_name = models.CharField(max_length=100)

    group = models.ForeignKey(
        'groups.ChitGroup',
        on_delete=models.PROTECT,
        related_name='collections'
    )
    # Null for payments towards the general due
    auction = models.ForeignKey(
        'auctions.AuctionRecord',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='collections'
    )
    auction_number = models.PositiveIntegerField(null=True, blank=True)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='collections'
    )

    payment_date = models.DateField()
    payment_time = models.TimeField()
    payment_type = models.CharField(
        max_length=20,
        choices=PaymentType.choices,
        default=PaymentType.FULL
    )
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices)
    amount = positive_amount_field()

    # Snapshots
    chit_amount = snapshot_amount_field()
    user_total_due_before_this_payment = models.DecimalField(max_digits=12, decimal_places=2)
    balance_amount = snapshot_amount_field()
    total_paid_for_this_due = models.DecimalField(max_digits=12, decimal_places=2)
    balance_for_this_installment = snapshot_amount_field()

    remarks = models.CharField(max_length=255, default='Auction Collection')
    collection_location = models.CharField(max_length=255, blank=True)
    virtual_transaction_id = models.CharField(max_length=7)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='collections_recorded'
    )
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'collection_records'
        indexes = [
            models.Index(fields=['user', 'group', 'auction_number'], name='collection_user_due_idx'),
            models.Index(fields=['group', 'payment_date'], name='collection_group_date_idx'),
        ]
        ordering = ['-recorded_at']

    def __str__(self):
        return f"Receipt {self.receipt_number} - {self.amount} from {self.user.get_display_name()}"

    @property
    def due_number(self):
        return self.auction_number


class PaymentRecord(models.Model):
    """Money paid out to a member, e.g. the auction payout to the winner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(
        'groups.ChitGroup',
        on_delete=models.PROTECT,
        related_name='payments'
    )
    auction = models.ForeignKey(
        'auctions.AuctionRecord',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='payments'
    )
    auction_number = models.PositiveIntegerField(null=True, blank=True)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='payments_received'
    )

    payment_date = models.DateField()
    payment_time = models.TimeField()
    payment_type = models.CharField(
        max_length=20,
        choices=PaymentType.choices,
        default=PaymentType.FULL
    )
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices)
    amount = positive_amount_field()
    remarks = models.CharField(max_length=255, blank=True)
    virtual_transaction_id = models.CharField(max_length=7)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments_recorded'
    )
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'payment_records'
        indexes = [
            models.Index(fields=['user', 'group'], name='payment_user_group_idx'),
        ]
        ordering = ['-recorded_at']

    def __str__(self):
        return f"Payment {self.amount} to {self.user.get_display_name()}"


class CreditRecord(models.Model):
    """Money received from an outside party (loan, deposit, capital)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    from_name = models.CharField(max_length=150)
    credit_number = models.CharField(max_length=50, blank=True)
    payment_date = models.DateField()
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices)
    amount = positive_amount_field()
    remarks = models.CharField(max_length=255, default='Credit')
    virtual_transaction_id = models.CharField(max_length=7)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='credits_recorded'
    )
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'credit_records'
        ordering = ['-recorded_at']

    def __str__(self):
        return f"Credit {self.amount} from {self.from_name}"


class ExpenseRecord(models.Model):
    """Office expense paid out, or miscellaneous money received."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    expense_type = models.CharField(max_length=20, choices=ExpenseType.choices)
    amount = positive_amount_field()
    expense_date = models.DateField()
    expense_time = models.TimeField(null=True, blank=True)

    # spend
    reason = models.CharField(max_length=255, blank=True)
    # received
    from_person = models.CharField(max_length=150, blank=True)
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices, blank=True)

    remarks = models.CharField(max_length=255, blank=True)
    virtual_transaction_id = models.CharField(max_length=7)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses_recorded'
    )
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'expense_records'
        indexes = [
            models.Index(fields=['expense_type', 'recorded_at'], name='expense_type_recorded_idx'),
        ]
        ordering = ['-recorded_at']

    def __str__(self):
        party = self.reason if self.expense_type == ExpenseType.SPEND else self.from_person
        return f"{self.get_expense_type_display()} {self.amount} ({party})"


class SalaryRecord(models.Model):
    """Salary paid to an employee."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='salary_records'
    )
    amount = positive_amount_field()
    payment_date = models.DateField()
    remarks = models.CharField(max_length=255, blank=True)
    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='salaries_recorded'
    )
    recorded_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'salary_records'
        ordering = ['-recorded_at']

    def __str__(self):
        return f"Salary {self.amount} to {self.employee.get_display_name()}"
